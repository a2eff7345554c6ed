from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float

    @staticmethod
    def of(raw: Point | Mapping[str, float] | Sequence[float]) -> Point:
        """Build a point from a Point, a {'x', 'y'} mapping or an (x, y) pair."""
        if isinstance(raw, Point):
            return raw
        if isinstance(raw, Mapping):
            return Point(float(raw.get("x", 0)), float(raw.get("y", 0)))
        return Point(float(raw[0]), float(raw[1]))

    def offset(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class Shape:
    width: float
    height: float
    top_left: Point = Point(0, 0)
    rotation: float = 0


@dataclass(frozen=True, slots=True)
class GradientHandles:
    """Normalized start/end handles relative to the shape's unrotated bounding box."""

    start: Point
    end: Point

    @staticmethod
    def from_positions(positions: Iterable[Point | Mapping[str, float] | Sequence[float]]) -> GradientHandles:
        # Figma keeps a third handle (gradient width), it carries nothing for linear fills
        points = [Point.of(position) for position in positions]
        if len(points) < 2:
            raise ValueError(f"Linear gradient needs at least 2 handle positions, got {len(points)}")
        return GradientHandles(start=points[0], end=points[1])

    def swapped(self) -> GradientHandles:
        return GradientHandles(start=self.end, end=self.start)


@dataclass(frozen=True, slots=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True, slots=True)
class ColorStop:
    position: float
    color: Color
    alpha: float = 1.0


@dataclass(frozen=True, slots=True)
class Corners:
    top_left: Point
    top_right: Point
    bottom_left: Point
    bottom_right: Point


@dataclass(frozen=True, slots=True)
class GradientLine:
    """True gradient line bounded by the perpendicular reference lines."""

    top: Point
    bottom: Point

    @property
    def length(self) -> float:
        return math.hypot(self.bottom.x - self.top.x, self.bottom.y - self.top.y)


@dataclass(frozen=True, slots=True)
class ResolvedStop:
    color: str
    percentage: float


@dataclass(frozen=True, slots=True)
class LinearGradient:
    angle: float
    stops: list[ResolvedStop] = field(default_factory=list)
    # gradient line on the node in absolute coordinates
    line: GradientLine | None = None


@dataclass(frozen=True, slots=True)
class GradientInput:
    """Everything the converter needs, as read from a single Figma node."""

    shape: Shape
    handles: GradientHandles
    stops: list[ColorStop]
    fill_opacity: float = 1.0
    node_id: str | None = None
