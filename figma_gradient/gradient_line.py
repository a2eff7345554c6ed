import math

import configuration as config
from log_utils import logs, setup_logger

from .errors import DegenerateLinesError
from .models import Corners, GradientHandles, GradientLine, Point, Shape
from .utils.corner import CornerUtils
from .utils.geometry import GeometryUtils
from .utils.number import NumberUtils

logger = setup_logger(__name__)


@logs(logger, on=True)
class GradientLineResolver:
    """
    Recovers the rendered gradient line of a Figma linear gradient.

    Handle positions only describe the gradient direction relative to the bounding box.
    The line the colors are actually spread over is bounded by two lines perpendicular
    to the gradient (in rendered space) that pass through opposite corners of the shape.
    The handle vector is stretched far beyond the shape and intersected with both of them.
    """

    def __init__(self, gradient_config: config.GradientConfig = config.GRADIENT_CONFIG) -> None:
        self.config = gradient_config

    @staticmethod
    def handle_vector(shape: Shape, handles: GradientHandles) -> Point:
        """Start-to-end handle vector in shape units, y pointing up."""
        return Point(
            (handles.end.x - handles.start.x) * shape.width,
            (1 - handles.end.y - (1 - handles.start.y)) * shape.height,
        )

    def desired_length(self, shape: Shape) -> float:
        """Length the handle vector is stretched to, always well past the shape."""
        return (shape.width + shape.height) / 2 * self.config.DESIRED_LENGTH_MULTIPLIER

    @staticmethod
    def anchor_corners(corners: Corners, angle: float) -> tuple[Point, Point]:
        """Diagonally opposite corners the perpendicular lines go through, picked by angle quadrant."""
        top = corners.top_left if (90 < angle <= 180) or (270 < angle <= 360) else corners.top_right
        bottom = corners.bottom_left if (0 <= angle <= 90) or (180 < angle <= 270) else corners.bottom_right
        return top, bottom

    def extend_handles(self, shape: Shape, handles: GradientHandles) -> tuple[Point, Point]:
        """Handle segment stretched symmetrically to the desired length, in the unrotated box."""
        delta = self.handle_vector(shape, handles)
        current_length = math.hypot(delta.x, delta.y)
        if current_length == 0:
            raise DegenerateLinesError(f"Gradient handles {handles.start} and {handles.end} span no distance on a {shape.width}x{shape.height} shape")

        scale_factor = (self.desired_length(shape) - current_length) / 2 / current_length
        scale_x = delta.x * scale_factor
        scale_y = delta.y * scale_factor

        top_left = shape.top_left
        start = top_left.offset(handles.start.x * shape.width - scale_x, handles.start.y * shape.height + scale_y)
        end = top_left.offset(handles.end.x * shape.width + scale_x, handles.end.y * shape.height - scale_y)
        return start, end

    def perpendicular_line(self, anchor: Point, shape: Shape, angle: float) -> tuple[Point, Point]:
        """Line through 'anchor' perpendicular to the rendered gradient direction."""
        half = self.desired_length(shape) / 2
        aspect = shape.height / shape.width
        start, end = (
            GeometryUtils.rotate_ellipse_point(
                anchor,
                x_radius,
                x_radius * aspect,
                angle,
                0,
                radius_scale=self.config.RADIUS_SCALE,
            )
            for x_radius in (half, -half)
        )
        return start, end

    @logs(logger, on=True)
    def resolve(self, shape: Shape, handles: GradientHandles, angle: float) -> GradientLine:
        """
        True gradient line for the given handles and nominal CSS angle, in the unrotated box.
        Raises DegenerateLinesError for shapes with no area or coincident handles.
        """
        corners = CornerUtils.get_corners(shape)
        center = CornerUtils.get_center(corners)
        logger.debug(f"Shape corners: {corners}, center: {center}")

        extended_start, extended_end = self.extend_handles(shape, handles)

        top_anchor, bottom_anchor = self.anchor_corners(corners, angle)
        top_line = self.perpendicular_line(top_anchor, shape, angle)
        bottom_line = self.perpendicular_line(bottom_anchor, shape, angle)

        line = GradientLine(
            top=GeometryUtils.intersect(top_line[0], top_line[1], extended_start, extended_end, self.config.DECIMAL_PLACES),
            bottom=GeometryUtils.intersect(bottom_line[0], bottom_line[1], extended_start, extended_end, self.config.DECIMAL_PLACES),
        )
        logger.info(f"Gradient line {line.top} -> {line.bottom}, length {line.length:.2f}")
        return line

    @logs(logger, on=True)
    def place(self, shape: Shape, line: GradientLine, rotation: float = 0) -> GradientLine:
        """
        Gradient line moved onto the node turned by 'rotation' degrees, together with its corners.
        The turn is rigid, so stop percentages measured on the unrotated line still hold.
        """
        if not rotation:
            return line

        top, bottom = (CornerUtils.to_absolute(shape, point, rotation) for point in (line.top, line.bottom))
        placed = GradientLine(
            top=Point(NumberUtils.round_to(top.x, self.config.DECIMAL_PLACES), NumberUtils.round_to(top.y, self.config.DECIMAL_PLACES)),
            bottom=Point(NumberUtils.round_to(bottom.x, self.config.DECIMAL_PLACES), NumberUtils.round_to(bottom.y, self.config.DECIMAL_PLACES)),
        )
        logger.info(f"Gradient line on the node rotated by {rotation}deg: {placed.top} -> {placed.bottom}")
        return placed
