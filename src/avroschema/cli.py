"""Command line interface entry point."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from avroschema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    configure_logging,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from avroschema.schema_codec import SchemaError, decode_schema, encode_schema
from avroschema.schema_comparison import schema_contains, schemas_equal
from avroschema.schema_model import Schema


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON codec configuration file",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="avroschema")
def cli() -> None:
    """Avro schema codec and comparison utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML codec configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML codec configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="canonicalize")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the Avro schema (.avsc) file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file for the canonical encoding instead of stdout",
)
@_CONFIG_OPTION
def canonicalize(schema_path: str, output_path: str | None, config_path: str | None) -> None:
    """Decode a schema file and print its canonical encoding."""
    configuration = _load_cli_configuration(config_path)
    schema = _load_schema(schema_path, configuration)
    try:
        encoded = encode_schema(schema, configuration.codec)
    except SchemaError as exc:
        raise CliError(str(exc)) from exc
    if output_path is None:
        click.echo(encoded)
        return
    try:
        Path(output_path).write_text(encoded + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


@cli.command(name="compare")
@click.option(
    "--left",
    "left_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the first Avro schema file",
)
@click.option(
    "--right",
    "right_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the second Avro schema file",
)
@_CONFIG_OPTION
def compare(left_path: str, right_path: str, config_path: str | None) -> None:
    """Report whether two schema files describe the same type."""
    configuration = _load_cli_configuration(config_path)
    left = _load_schema(left_path, configuration)
    right = _load_schema(right_path, configuration)
    click.echo("equal" if schemas_equal(left, right) else "different")


@cli.command(name="contains")
@click.option(
    "--container",
    "container_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the declared (usually union) schema file",
)
@click.option(
    "--member",
    "member_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the candidate member schema file",
)
@_CONFIG_OPTION
def contains(container_path: str, member_path: str, config_path: str | None) -> None:
    """Report whether the member schema is accepted by the container schema."""
    configuration = _load_cli_configuration(config_path)
    container = _load_schema(container_path, configuration)
    member = _load_schema(member_path, configuration)
    click.echo("contained" if schema_contains(container, member) else "not contained")


def _load_cli_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        configuration = default_configuration()
    else:
        try:
            configuration = load_configuration(config_path)
        except ConfigurationError as exc:
            raise CliError(str(exc)) from exc
    configure_logging(configuration.logging)
    return configuration


def _load_schema(schema_path: str, configuration: Configuration) -> Schema:
    path = Path(schema_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CliError(f"Failed to read schema file {path}: {exc}") from exc
    try:
        schema = decode_schema(text, configuration.codec)
    except SchemaError as exc:
        raise CliError(f"{path}: {exc}") from exc
    if schema is None:
        raise CliError(f"Schema file is empty: {path}")
    return schema


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
