# pyright: strict
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from dotenv import load_dotenv


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class FigmaSettings:
    """Настройки, приходящие из окружения."""

    FIGMA_FILE_ID: str
    FIGMA_TOKEN: str

    @staticmethod
    def from_env() -> FigmaSettings:
        load_dotenv()
        return FigmaSettings(
            FIGMA_FILE_ID=os.environ.get("FIGMA_FILE_ID", ""),
            FIGMA_TOKEN=os.environ.get("FIGMA_TOKEN", ""),
        )


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    """Global logging switch, log directory (empty for console only) and level."""

    LOGGING_ON: bool
    LOG_DIR: str
    LOG_LEVEL: str = "INFO"

    @staticmethod
    def from_env() -> LoggingSettings:
        load_dotenv()
        return LoggingSettings(
            LOGGING_ON=_env_flag("LOGGING_ON", True),
            LOG_DIR=os.environ.get("LOG_DIR", "logs"),
            LOG_LEVEL=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


figma_settings: Final[FigmaSettings] = FigmaSettings.from_env()
logging_settings: Final[LoggingSettings] = LoggingSettings.from_env()
