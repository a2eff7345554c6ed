import pytest

from figma_gradient.models import Color, ColorStop, GradientHandles, Point, Shape

BLACK = Color(0, 0, 0)
WHITE = Color(1, 1, 1)
RED = Color(1, 0, 0)


@pytest.fixture
def square_shape():
    """Квадрат 100x100 в начале координат."""
    return Shape(width=100, height=100, top_left=Point(0, 0))


@pytest.fixture
def wide_shape():
    """Прямоугольник 200x100."""
    return Shape(width=200, height=100, top_left=Point(0, 0))


@pytest.fixture
def horizontal_handles():
    """Градиент слева направо через середину."""
    return GradientHandles(start=Point(0, 0.5), end=Point(1, 0.5))


@pytest.fixture
def black_white_stops():
    return [ColorStop(position=0, color=BLACK), ColorStop(position=1, color=WHITE)]


@pytest.fixture
def three_stops():
    return [
        ColorStop(position=0, color=BLACK),
        ColorStop(position=0.25, color=RED),
        ColorStop(position=1, color=WHITE),
    ]


@pytest.fixture
def linear_node():
    """Узел Figma в формате REST API с линейным градиентом."""
    return {
        "id": "1:2",
        "name": "Rectangle",
        "type": "RECTANGLE",
        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 200, "height": 100},
        "fills": [
            {
                "type": "GRADIENT_LINEAR",
                "visible": True,
                "opacity": 1,
                "gradientHandlePositions": [
                    {"x": 0, "y": 0.5},
                    {"x": 1, "y": 0.5},
                    {"x": 0, "y": 0},
                ],
                "gradientStops": [
                    {"position": 0, "color": {"r": 0, "g": 0, "b": 0, "a": 1}},
                    {"position": 0.25, "color": {"r": 1, "g": 0, "b": 0, "a": 1}},
                    {"position": 1, "color": {"r": 1, "g": 1, "b": 1, "a": 1}},
                ],
            }
        ],
    }
