"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_DEPTH,
    MAX_SUPPORTED_DEPTH,
    CodecSettings,
    Configuration,
    LoggingSettings,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Return the configuration used when no file is given."""
    return Configuration(path=None)


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    codec = _parse_codec_section(parsed.get("codec"))
    logging_settings = _parse_logging_section(parsed.get("logging"))
    return Configuration(path=path, codec=codec, logging=logging_settings)


def _parse_codec_section(value: Any) -> CodecSettings:
    section = _optional_mapping(value, "codec")
    indent = section.get("indent")
    if indent is not None:
        indent = _require_non_negative_int(indent, "codec.indent")
    sort_keys = section.get("sort_keys", False)
    if not isinstance(sort_keys, bool):
        raise ConfigurationError("codec.sort_keys must be a boolean.")
    max_depth = _require_positive_int(
        section.get("max_depth", DEFAULT_MAX_DEPTH), "codec.max_depth"
    )
    if max_depth > MAX_SUPPORTED_DEPTH:
        raise ConfigurationError(
            f"codec.max_depth must not exceed {MAX_SUPPORTED_DEPTH}; got {max_depth}."
        )
    return CodecSettings(indent=indent, sort_keys=sort_keys, max_depth=max_depth)


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = section.get("level", DEFAULT_LOG_LEVEL)
    if not isinstance(level, str):
        raise ConfigurationError("logging.level must be a string.")
    normalized = level.strip().upper()
    if normalized not in _LOG_LEVELS:
        raise ConfigurationError(
            f"logging.level must be one of {', '.join(_LOG_LEVELS)}; got '{level}'."
        )
    return LoggingSettings(level=normalized)


def configure_logging(settings: LoggingSettings) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=getattr(logging, settings.level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    value = _require_non_negative_int(value, field_name)
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
