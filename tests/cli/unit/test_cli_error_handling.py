"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from avroschema.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["compare", "--left", "/tmp/a.avsc"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--right" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["canonicalize", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_undecodable_schema_returns_domain_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "broken.avsc"
    schema_path.write_text('{"type": "int", "logicalType": "nanosecond"}', encoding="utf-8")

    exit_code = main(["canonicalize", "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "unknown logical type nanosecond" in captured.err
    assert "Traceback" not in captured.err


def test_missing_schema_file_returns_domain_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["canonicalize", "--schema", str(tmp_path / "missing.avsc")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read schema file" in captured.err


def test_empty_schema_file_returns_domain_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "empty.avsc"
    schema_path.write_text("  \n", encoding="utf-8")

    exit_code = main(["canonicalize", "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Schema file is empty" in captured.err


def test_invalid_configuration_returns_domain_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "string.avsc"
    schema_path.write_text('"string"', encoding="utf-8")
    config_path = tmp_path / "avroschema.yaml"
    config_path.write_text("codec:\n  max_depth: 0\n", encoding="utf-8")

    exit_code = main(["canonicalize", "--schema", str(schema_path), "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "codec.max_depth must be greater than zero" in captured.err


def test_deeply_nested_schema_returns_domain_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "deep.avsc"
    schema_path.write_text("[" * 300 + '"int"' + "]" * 300, encoding="utf-8")

    exit_code = main(["canonicalize", "--schema", str(schema_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "maximum depth of 64" in captured.err


def test_configuration_directory_returns_domain_error(tmp_path: Path, capsys) -> None:
    schema_path = tmp_path / "string.avsc"
    schema_path.write_text('"string"', encoding="utf-8")

    exit_code = main(["canonicalize", "--schema", str(schema_path), "--config", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read configuration file" in captured.err
