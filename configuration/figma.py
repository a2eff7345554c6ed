# pyright: strict
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class FigmaKey(StrEnum):
    ABSOLUTE_BOUNDING_BOX = "absoluteBoundingBox"
    RELATIVE_TRANSFORM = "relativeTransform"
    SIZE = "size"
    ROTATION = "rotation"
    FILLS = "fills"
    TYPE = "type"
    VISIBLE = "visible"
    OPACITY = "opacity"
    GRADIENT_STOPS = "gradientStops"
    GRADIENT_HANDLE_POSITIONS = "gradientHandlePositions"
    GRADIENT_TRANSFORM = "gradientTransform"
    NODES = "nodes"
    DOCUMENT = "document"


class FigmaPaintType(StrEnum):
    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"


@dataclass(frozen=True, slots=True)
class FigmaApiConfig:
    API_URL: str
    REQUEST_TIMEOUT: int


FIGMA_CONFIG: Final[FigmaApiConfig] = FigmaApiConfig(
    API_URL="https://api.figma.com/v1",
    REQUEST_TIMEOUT=30,
)
