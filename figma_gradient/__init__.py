# pyright: strict
from __future__ import annotations

from .base import FigmaSession
from .converter import LinearGradientConverter, compute_css_linear_gradient
from .errors import DegenerateLinesError, InvalidGradientError
from .figma_extractor import FigmaGradientExtractor
from .gradient_line import GradientLineResolver
from .models import Color, ColorStop, Corners, GradientHandles, GradientInput, GradientLine, LinearGradient, Point, ResolvedStop, Shape
from .stop_projector import StopProjector

# Utils imports
from .utils.angle import AngleUtils
from .utils.color import ColorUtils
from .utils.corner import CornerUtils
from .utils.geometry import GeometryUtils
from .utils.number import NumberUtils
from .utils.transform import TransformUtils

__all__ = [
    # Entry point
    "compute_css_linear_gradient",
    # Main classes
    "LinearGradientConverter",
    "GradientLineResolver",
    "StopProjector",
    "FigmaGradientExtractor",
    "FigmaSession",
    # Models
    "Point",
    "Shape",
    "GradientHandles",
    "Color",
    "ColorStop",
    "Corners",
    "GradientLine",
    "ResolvedStop",
    "LinearGradient",
    "GradientInput",
    # Errors
    "DegenerateLinesError",
    "InvalidGradientError",
    # Utils
    "AngleUtils",
    "ColorUtils",
    "CornerUtils",
    "GeometryUtils",
    "NumberUtils",
    "TransformUtils",
]
