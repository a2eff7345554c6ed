from collections.abc import Sequence

from figma_gradient.errors import InvalidGradientError
from figma_gradient.models import GradientHandles, Point

# Gradient space: the gradient runs from (0, 0.5) to (1, 0.5)
GRADIENT_START = Point(0, 0.5)
GRADIENT_END = Point(1, 0.5)


class TransformUtils:
    @staticmethod
    def invert_affine(transform: Sequence[Sequence[float]]) -> list[list[float]]:
        """Inverse of a 2x3 affine matrix [[a, b, c], [d, e, f]] (an optional [0, 0, 1] row is ignored)."""
        if len(transform) < 2 or any(len(row) < 3 for row in transform[:2]):
            raise InvalidGradientError(f"Gradient transform must be a 2x3 matrix, got {transform!r}")

        (a, b, c), (d, e, f) = transform[0][:3], transform[1][:3]
        determinant = a * e - b * d
        if determinant == 0:
            raise InvalidGradientError(f"Gradient transform {transform!r} is not invertible")

        return [
            [e / determinant, -b / determinant, (b * f - c * e) / determinant],
            [-d / determinant, a / determinant, (c * d - a * f) / determinant],
        ]

    @staticmethod
    def apply_affine(matrix: Sequence[Sequence[float]], point: Point) -> Point:
        return Point(
            matrix[0][0] * point.x + matrix[0][1] * point.y + matrix[0][2],
            matrix[1][0] * point.x + matrix[1][1] * point.y + matrix[1][2],
        )

    @staticmethod
    def handles_from_transform(transform: Sequence[Sequence[float]]) -> GradientHandles:
        """
        Normalized start/end handles of a linear gradient from its Figma 'gradientTransform'.
        The transform maps the shape's unit box into gradient space, so the handles are
        the gradient-space endpoints mapped back through its inverse.
        """
        inverse = TransformUtils.invert_affine(transform)
        return GradientHandles(
            start=TransformUtils.apply_affine(inverse, GRADIENT_START),
            end=TransformUtils.apply_affine(inverse, GRADIENT_END),
        )
