"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "avroschema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Codec configuration template for avroschema.
# Every setting is optional; remove a line to fall back to its default.

codec:
  # JSON indentation for encoded schemas (omit for compact single-line output).
  indent: 2
  # Sort object keys instead of keeping the canonical attribute order.
  sort_keys: false
  # Maximum schema nesting depth for decoding and encoding (at most 100).
  max_depth: 64

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
  level: WARNING
"""


def build_placeholder_configuration() -> str:
    """Build a YAML codec configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
