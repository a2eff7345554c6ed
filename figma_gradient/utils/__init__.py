# pyright: strict
from __future__ import annotations

from .angle import AngleUtils
from .color import ColorUtils
from .corner import CornerUtils
from .geometry import GeometryUtils
from .helper import HelpUtils
from .number import NumberUtils
from .transform import TransformUtils

__all__ = [
    # Geometry
    "AngleUtils",
    "CornerUtils",
    "GeometryUtils",
    "TransformUtils",
    # Formatting
    "ColorUtils",
    "NumberUtils",
    # Files
    "HelpUtils",
]
