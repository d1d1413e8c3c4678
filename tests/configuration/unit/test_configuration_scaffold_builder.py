"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from avroschema.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from avroschema.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Codec configuration template" in scaffold
    assert "codec:" in scaffold
    assert "indent:" in scaffold
    assert "sort_keys:" in scaffold
    assert "max_depth:" in scaffold
    assert "logging:" in scaffold
    assert isinstance(yaml.safe_load(scaffold), dict)


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "avroschema.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    configuration = load_configuration(output_path)
    assert configuration.codec.indent == 2
    assert configuration.codec.max_depth == 64


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "avroschema.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
