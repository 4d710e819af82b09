"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from schema_descriptor_gen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from schema_descriptor_gen.descriptor_conversion import convert_registry
from schema_descriptor_gen.descriptor_emission import (
    DEFAULT_BUILDER_NAME,
    DEFAULT_FUNCTION_NAME,
    OutputFormat,
    render_descriptors,
)
from schema_descriptor_gen.document_loading import (
    DEFAULT_TIMEOUT_SECONDS,
    DocumentLoadError,
    DocumentSource,
    load_schema_registry,
)
from schema_descriptor_gen.generation_run import (
    GenerationRequest,
    GenerationRunError,
    execute_generation_run,
)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-descriptor-gen")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(verbose: bool) -> None:
    """Generate type descriptor tables from OpenAPI schema documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generation configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generation configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Override the configured generated source path",
)
def generate(config_path: str, output_path: str | None) -> None:
    """Write the descriptor table configured in the generation configuration."""
    try:
        outcome = execute_generation_run(
            GenerationRequest(config_path=config_path, output_path=output_path)
        )
    except GenerationRunError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


@cli.command(name="convert")
@click.option("--url", "url", required=False, help="Fetch the schema document from this URL")
@click.option(
    "--file",
    "file_path",
    required=False,
    type=click.Path(path_type=Path),
    help="Read the schema document from this local YAML/JSON file",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([item.value for item in OutputFormat]),
    default=OutputFormat.ARRAY_LITERAL.value,
    show_default=True,
    help="Generated source surface",
)
@click.option(
    "--timeout",
    "timeout_seconds",
    type=click.IntRange(min=1),
    default=DEFAULT_TIMEOUT_SECONDS,
    show_default=True,
    help="HTTP timeout in seconds for --url",
)
def convert(
    url: str | None, file_path: Path | None, output_format: str, timeout_seconds: int
) -> None:
    """Print descriptors for a schema document without a configuration file."""
    if (url is None) == (file_path is None):
        raise click.UsageError("Provide exactly one of --url or --file.")
    source = DocumentSource(url=url) if url is not None else DocumentSource(path=file_path)
    try:
        registry = load_schema_registry(source, timeout_seconds=timeout_seconds)
    except DocumentLoadError as exc:
        raise CliError(str(exc)) from exc
    rendered = render_descriptors(
        convert_registry(registry),
        OutputFormat(output_format),
        function_name=DEFAULT_FUNCTION_NAME,
        builder_name=DEFAULT_BUILDER_NAME,
    )
    click.echo(rendered, nl=False)


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
