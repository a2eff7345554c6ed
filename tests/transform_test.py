import pytest

from figma_gradient.errors import InvalidGradientError
from figma_gradient.models import GradientHandles, Point
from figma_gradient.utils.transform import TransformUtils


class TestTransformUtils:

    def test_identity_is_default_horizontal_gradient(self):
        handles = TransformUtils.handles_from_transform([[1, 0, 0], [0, 1, 0]])

        assert handles == GradientHandles(start=Point(0, 0.5), end=Point(1, 0.5))

    def test_rotated_transform_gives_vertical_gradient(self):
        """Матрица поворота на 90: градиент сверху вниз."""
        handles = TransformUtils.handles_from_transform([[0, 1, 0], [-1, 0, 1]])

        assert handles == GradientHandles(start=Point(0.5, 0), end=Point(0.5, 1))

    def test_scaled_transform(self):
        handles = TransformUtils.handles_from_transform([[2, 0, -0.5], [0, 1, 0]])

        assert handles.start == Point(0.25, 0.5)
        assert handles.end == Point(0.75, 0.5)

    def test_three_by_three_matrix_is_accepted(self):
        handles = TransformUtils.handles_from_transform([[1, 0, 0], [0, 1, 0], [0, 0, 1]])

        assert handles == GradientHandles(start=Point(0, 0.5), end=Point(1, 0.5))

    def test_inverse_round_trip(self):
        matrix = [[0.5, -0.25, 0.1], [0.3, 0.8, -0.2]]
        inverse = TransformUtils.invert_affine(matrix)
        point = Point(0.7, 0.4)

        restored = TransformUtils.apply_affine(matrix, TransformUtils.apply_affine(inverse, point))

        assert restored.x == pytest.approx(point.x)
        assert restored.y == pytest.approx(point.y)

    def test_singular_transform_raises(self):
        with pytest.raises(InvalidGradientError):
            TransformUtils.handles_from_transform([[1, 2, 0], [2, 4, 0]])

    @pytest.mark.parametrize("transform", [[], [[1, 0, 0]], [[1, 0], [0, 1]]])
    def test_malformed_transform_raises(self, transform):
        with pytest.raises(InvalidGradientError):
            TransformUtils.handles_from_transform(transform)
