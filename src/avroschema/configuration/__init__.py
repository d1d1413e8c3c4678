"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    ConfigurationError,
    configure_logging,
    default_configuration,
    load_configuration,
)
from .runtime_settings import CodecSettings, Configuration, LoggingSettings

__all__ = [
    "CodecSettings",
    "Configuration",
    "LoggingSettings",
    "ConfigurationError",
    "configure_logging",
    "default_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
