"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MAX_DEPTH = 64
MAX_SUPPORTED_DEPTH = 100
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class CodecSettings:
    """Encoder and decoder options."""

    indent: int | None = None
    sort_keys: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class LoggingSettings:
    level: str = DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    codec: CodecSettings = field(default_factory=CodecSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
