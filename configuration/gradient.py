# pyright: strict
from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class GradientConfig:
    # Calibrated against Figma's own rendering, keep exact values.
    RADIUS_SCALE: float
    DESIRED_LENGTH_MULTIPLIER: float
    DECIMAL_PLACES: int
    # Gradient fills are evaluated against the local bounding box.
    IGNORE_INTRINSIC_ROTATION: bool


GRADIENT_CONFIG: Final[GradientConfig] = GradientConfig(
    RADIUS_SCALE=1.5,
    DESIRED_LENGTH_MULTIPLIER=4,
    DECIMAL_PLACES=2,
    IGNORE_INTRINSIC_ROTATION=True,
)

NAMED_COLORS: Final[dict[tuple[float, float, float], str]] = {
    (1, 1, 1): "white",
    (0, 0, 0): "black",
}
