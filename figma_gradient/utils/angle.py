import math

from figma_gradient.models import GradientHandles, Shape


class AngleUtils:
    @staticmethod
    def calculate_angle(shape: Shape, handles: GradientHandles) -> float:
        """
        CSS angle of the gradient in degrees, 0 points up and the angle grows clockwise.
        Handles are scaled by the shape size first, so the angle follows the rendered box.
        """
        delta_x = (handles.end.x - handles.start.x) * shape.width
        delta_y = (handles.end.y - handles.start.y) * shape.height

        angle = math.degrees(math.atan2(delta_y, delta_x))
        if angle < 0:
            angle += 360

        # atan2 is measured from the x axis, CSS from the y axis
        return AngleUtils.normalize(angle + 90)

    @staticmethod
    def normalize(angle: float) -> float:
        """Wrap any angle into [0, 360)."""
        return angle % 360
