"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click

from mitto.config_loading import load_config
from mitto.configuration import DEFAULT_CONFIG_FILENAME, write_configuration_scaffold
from mitto.errors import MittoError
from mitto.schema_management import (
    SCHEMA_FILENAME,
    FieldSpec,
    SchemaDocument,
    resolve_schema,
    validate_schema,
)


class CliError(Exception):
    """Custom CLI error."""


_VERBOSE_MARKER = "_mitto_verbose"


_START_DIR_OPTION = click.option(
    "--start-dir",
    "start_dir",
    required=False,
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory the upward file search starts from",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="mitto")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log file resolution steps.")
def cli(verbose: bool) -> None:
    """Package-local configuration loader constrained by a .mitto schema."""
    if verbose:
        _enable_debug_logging()


@cli.command(name="check")
@click.argument("filename")
@_START_DIR_OPTION
def check(filename: str, start_dir: str) -> None:
    """Load FILENAME, validate it against the .mitto schema and print the result."""
    try:
        config = load_config(filename, start_dir=start_dir)
    except MittoError as exc:
        raise CliError(str(exc)) from exc
    click.echo(json.dumps(config, indent=2, default=repr))


@cli.command(name="describe")
@_START_DIR_OPTION
def describe(start_dir: str) -> None:
    """Print the fields declared by the nearest .mitto schema."""
    try:
        schema = validate_schema(resolve_schema(start_dir))
    except MittoError as exc:
        raise CliError(str(exc)) from exc
    if schema is None:
        click.echo(f"No {SCHEMA_FILENAME} schema found.")
        return
    for line in _describe_schema(schema):
        click.echo(line)


@cli.command(name="generate-config")
@_START_DIR_OPTION
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the JSON configuration scaffold to write",
)
def generate_config(start_dir: str, output_path: str) -> None:
    """Generate a JSON configuration scaffold from the .mitto schema."""
    try:
        schema = validate_schema(resolve_schema(start_dir))
        if schema is None:
            raise CliError(f"No {SCHEMA_FILENAME} schema found; nothing to scaffold.")
        resolved_output = write_configuration_scaffold(schema, output_path)
    except (MittoError, FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


def _enable_debug_logging() -> None:
    package_logger = logging.getLogger("mitto")
    package_logger.setLevel(logging.DEBUG)
    for stale in [h for h in package_logger.handlers if getattr(h, _VERBOSE_MARKER, False)]:
        package_logger.removeHandler(stale)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    setattr(handler, _VERBOSE_MARKER, True)
    package_logger.addHandler(handler)


def _describe_schema(schema: SchemaDocument) -> list[str]:
    lines = [f"Schema: {schema.name}"]
    lines.extend(_describe_field("required", key, spec) for key, spec in schema.required.items())
    lines.extend(_describe_field("optional", key, spec) for key, spec in schema.optional.items())
    return lines


def _describe_field(section: str, key: str, spec: FieldSpec) -> str:
    details = spec.kind.value
    if spec.has_default:
        details += f", default {json.dumps(spec.default, default=repr)}"
    line = f"  {section} {key} ({details})"
    if spec.description:
        line += f" - {spec.description}"
    return line


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="mitto", standalone_mode=False)
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
