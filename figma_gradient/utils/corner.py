from figma_gradient.models import Corners, Point, Shape

from .geometry import GeometryUtils


class CornerUtils:
    @staticmethod
    def to_absolute(shape: Shape, point: Point, rotation: float = 0) -> Point:
        """Point of the unrotated box of 'shape' turned with the node about its top-left corner."""
        if not rotation:
            return point
        return GeometryUtils.rotate_point(shape.top_left, point, rotation)

    @staticmethod
    def get_corners(shape: Shape, rotation: float = 0) -> Corners:
        """
        Four corners of the shape, 'top_left' is the shape position.
        The box is turned by -rotation about 'top_left', so placing the corners
        back with to_absolute(..., rotation) gives the unrotated box.
        """
        top_left = shape.top_left
        return Corners(
            top_left=top_left,
            top_right=CornerUtils.to_absolute(shape, top_left.offset(shape.width, 0), -rotation),
            bottom_left=CornerUtils.to_absolute(shape, top_left.offset(0, shape.height), -rotation),
            bottom_right=CornerUtils.to_absolute(shape, top_left.offset(shape.width, shape.height), -rotation),
        )

    @staticmethod
    def get_center(corners: Corners) -> Point:
        """Crossing of the diagonals. Raises DegenerateLinesError for a box with no area."""
        return GeometryUtils.intersect(corners.top_left, corners.bottom_right, corners.top_right, corners.bottom_left)
