import math

import configuration as config
from figma_gradient.errors import DegenerateLinesError
from figma_gradient.models import Point

from .number import NumberUtils


class GeometryUtils:
    """Coordinate math in Figma's screen space (y grows downward), angles in degrees."""

    @staticmethod
    def rotate_point(center: Point, point: Point, angle: float) -> Point:
        """Rotate 'point' about 'center' by 'angle' degrees."""
        radians = math.radians(angle)
        cos = math.cos(radians)
        sin = math.sin(radians)
        dx = point.x - center.x
        dy = point.y - center.y
        return Point(
            cos * dx + sin * dy + center.x,
            cos * dy - sin * dx + center.y,
        )

    @staticmethod
    def rotate_ellipse_point(
        center: Point,
        x_radius: float,
        y_radius: float,
        angle: float,
        rotation_factor: float,
        radius_scale: float = config.GRADIENT_CONFIG.RADIUS_SCALE,
    ) -> Point:
        """
        Point of an ellipse around 'center' seen at 'angle' + 180 degrees.
        'rotation_factor' (degrees) tilts the ellipse itself, radii are scaled by 'radius_scale'.
        """
        x_radius *= radius_scale
        y_radius *= radius_scale

        tilt = rotation_factor / (180 / math.pi)
        cos_angle = math.cos(math.radians(angle + 180))
        sin_angle = math.sin(math.radians(angle + 180))

        x = -x_radius * math.cos(tilt) * cos_angle - y_radius * math.sin(tilt) * sin_angle + center.x
        y = -y_radius * math.cos(tilt) * sin_angle + x_radius * math.sin(tilt) * cos_angle + center.y
        return Point(x, y)

    @staticmethod
    def intersect(p1: Point, p2: Point, p3: Point, p4: Point, decimal_places: int = config.GRADIENT_CONFIG.DECIMAL_PLACES) -> Point:
        """
        Intersection of the infinite lines (p1, p2) and (p3, p4).
        Raises DegenerateLinesError when the lines are parallel or coincident.
        """
        denominator = (p1.x - p2.x) * (p3.y - p4.y) - (p1.y - p2.y) * (p3.x - p4.x)
        if denominator == 0:
            raise DegenerateLinesError(f"Lines {p1}-{p2} and {p3}-{p4} have zero or infinitely many intersection points")

        first = p1.x * p2.y - p1.y * p2.x
        second = p3.x * p4.y - p3.y * p4.x

        px = (first * (p3.x - p4.x) - (p1.x - p2.x) * second) / denominator
        py = (first * (p3.y - p4.y) - (p1.y - p2.y) * second) / denominator

        return Point(NumberUtils.round_to(px, decimal_places), NumberUtils.round_to(py, decimal_places))

    @staticmethod
    def distance(a: Point, b: Point) -> float:
        return math.hypot(b.x - a.x, b.y - a.y)
