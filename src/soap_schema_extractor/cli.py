"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import click

from soap_schema_extractor.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    ConversionOptions,
    OutputFormat,
    Scope,
    load_configuration,
    write_placeholder_configuration,
)
from soap_schema_extractor.document_ingestion import (
    SchemaConversionError,
    SourceDocument,
    decode_document,
)
from soap_schema_extractor.review_export import write_review_workbook
from soap_schema_extractor.schema_flattening import build_schema_from_documents, render_schema_json


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="soap-schema-extractor")
def cli() -> None:
    """Convert XSD/WSDL documents into a flat connector schema."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML conversion configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML conversion configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="convert")
@click.argument(
    "documents",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON conversion configuration file",
)
@click.option(
    "--scope",
    type=click.Choice([scope.value for scope in Scope]),
    help="Which global elements become entities (overrides configuration)",
)
@click.option("--schema-name", help="Output schema name (overrides configuration)")
@click.option("--schema-version", help="Output schema version (overrides configuration)")
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    help="Maximum reference/type nesting depth (overrides configuration)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
    help="File to write; JSON is printed to stdout when omitted",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([output_format.value for output_format in OutputFormat]),
    help="Output format (overrides configuration)",
)
@click.option("--verbose", is_flag=True, default=False, help="Log resolution details to stderr.")
def convert(  # pylint: disable=too-many-arguments
    documents: tuple[Path, ...],
    config_path: str | None,
    scope: str | None,
    schema_name: str | None,
    schema_version: str | None,
    max_depth: int | None,
    output_path: Path | None,
    output_format: str | None,
    verbose: bool,
) -> None:
    """Convert XSD and WSDL documents into a connector schema."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        configuration = load_configuration(config_path) if config_path else None
        document_paths = documents or (configuration.documents if configuration else ())
        if not document_paths:
            raise CliError("Provide document paths or a --config file listing documents.")
        options = _resolve_options(
            configuration,
            scope=scope,
            name=schema_name,
            version=schema_version,
            max_depth=max_depth,
        )
        schema = build_schema_from_documents(_read_documents(document_paths), options)
        resolved_format = OutputFormat(output_format) if output_format else None
        resolved_format = resolved_format or (
            configuration.output.format if configuration else OutputFormat.JSON
        )
        destination = output_path or (configuration.output.path if configuration else None)
        if resolved_format is OutputFormat.XLSX:
            if destination is None:
                raise CliError("--output is required for xlsx output.")
            click.echo(str(write_review_workbook(schema, destination)))
            return
        if destination is None:
            click.echo(render_schema_json(schema))
            return
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(render_schema_json(schema) + "\n", encoding="utf-8")
        click.echo(str(destination.resolve()))
    except (ConfigurationError, SchemaConversionError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _resolve_options(
    configuration: Configuration | None,
    *,
    scope: str | None,
    name: str | None,
    version: str | None,
    max_depth: int | None,
) -> ConversionOptions:
    base = configuration.conversion if configuration else ConversionOptions()
    return ConversionOptions(
        name=name or base.name,
        version=version or base.version,
        scope=Scope(scope) if scope else base.scope,
        max_depth=max_depth or base.max_depth,
    )


def _read_documents(paths: Sequence[Path]) -> list[SourceDocument]:
    return [decode_document(path.name, path.read_bytes()) for path in paths]


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
