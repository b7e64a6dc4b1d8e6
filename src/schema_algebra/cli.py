"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from schema_algebra.algebra import CompositionError, JsonSchema
from schema_algebra.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    SchemaReferenceError,
    load_configuration,
    resolve_schema_reference,
    write_placeholder_configuration,
)
from schema_algebra.json_codec import decode_json_text, encode_json_text, json_codec
from schema_algebra.json_descriptor import DescriptorError, describe, flatten_descriptor


class CliError(Exception):
    """Custom CLI error."""


_SCHEMA_OPTION = click.option(
    "--schema",
    "schema_reference",
    required=True,
    help="Schema description as 'module:attribute' or a name from the configuration",
)
_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration file",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-algebra")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Describe, encode and decode JSON with schema descriptions."""
    if verbose:
        _enable_debug_logging()


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="describe")
@_SCHEMA_OPTION
@_CONFIG_OPTION
def describe_schema(schema_reference: str, config_path: str | None) -> None:
    """Print the JSON schema document of a schema description."""
    configuration = _load_optional_configuration(config_path)
    schema = _resolve_schema(schema_reference, configuration)
    click.echo(_render_json(_describe(schema, configuration)))


@cli.command(name="fields")
@_SCHEMA_OPTION
@_CONFIG_OPTION
def list_fields(schema_reference: str, config_path: str | None) -> None:
    """Print the flattened property paths of a schema description."""
    configuration = _load_optional_configuration(config_path)
    schema = _resolve_schema(schema_reference, configuration)
    try:
        fields = flatten_descriptor(_describe(schema, configuration))
    except DescriptorError as exc:
        raise CliError(str(exc)) from exc
    for described_field in fields:
        marker = "" if described_field.required else " (optional)"
        click.echo(f"{described_field.path}{marker}")


@cli.command(name="validate")
@_SCHEMA_OPTION
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON document to decode",
)
@_CONFIG_OPTION
def validate_document(schema_reference: str, input_path: str, config_path: str | None) -> None:
    """Decode a JSON document and print its canonical encoding."""
    configuration = _load_optional_configuration(config_path)
    schema = _resolve_schema(schema_reference, configuration)
    try:
        codec = json_codec(schema, configuration.interpreter)
        text = Path(input_path).read_text(encoding="utf-8")
        result = decode_json_text(codec, text)
    except CompositionError as exc:
        raise CliError(f"Invalid schema description: {exc}") from exc
    except (OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    if not result.ok:
        raise CliError(f"{input_path}: {result.error}")
    click.echo(encode_json_text(codec, result.unwrap(), indent=2))


def _load_optional_configuration(config_path: str | None) -> Configuration:
    if config_path is None:
        return Configuration(path=None)
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def _resolve_schema(reference: str, configuration: Configuration) -> JsonSchema[Any]:
    try:
        return resolve_schema_reference(reference, configuration.schemas)
    except SchemaReferenceError as exc:
        raise CliError(str(exc)) from exc


def _describe(schema: JsonSchema[Any], configuration: Configuration) -> dict[str, Any]:
    try:
        return describe(schema, configuration.interpreter, configuration.descriptor)
    except CompositionError as exc:
        raise CliError(f"Invalid schema description: {exc}") from exc


def _render_json(document: dict[str, Any]) -> str:
    return json.dumps(document, indent=2)


def _enable_debug_logging() -> None:
    logger = logging.getLogger("schema_algebra")
    logger.setLevel(logging.DEBUG)
    if any(isinstance(existing, logging.StreamHandler) for existing in logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)


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
