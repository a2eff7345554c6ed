# pyright: strict
from __future__ import annotations

# Единая точка импорта для остального кода.
from .env import FigmaSettings, LoggingSettings, figma_settings, logging_settings
from .figma import FIGMA_CONFIG, FigmaApiConfig, FigmaKey, FigmaPaintType
from .gradient import GRADIENT_CONFIG, NAMED_COLORS, GradientConfig

__all__ = [
    # env
    "FigmaSettings",
    "LoggingSettings",
    "figma_settings",
    "logging_settings",
    # figma
    "FigmaKey",
    "FigmaPaintType",
    "FigmaApiConfig",
    "FIGMA_CONFIG",
    # gradient
    "GradientConfig",
    "GRADIENT_CONFIG",
    "NAMED_COLORS",
]
