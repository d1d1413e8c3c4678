"""CLI smoke tests."""

from click.testing import CliRunner
from avroschema.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "canonicalize" in result.output
    assert "compare" in result.output
    assert "contains" in result.output
    assert "generate-config" in result.output
