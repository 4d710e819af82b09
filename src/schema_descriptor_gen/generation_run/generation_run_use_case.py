"""Generation run use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from schema_descriptor_gen.configuration import ConfigurationError, load_configuration
from schema_descriptor_gen.descriptor_conversion import convert_registry
from schema_descriptor_gen.descriptor_emission import (
    EmissionError,
    render_descriptors,
    write_artifact,
)
from schema_descriptor_gen.document_loading import DocumentLoadError, load_schema_registry

from .run_contracts import GenerationOutcome, GenerationRequest

LOGGER = logging.getLogger(__name__)


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_generation_run(
    request: GenerationRequest,
    *,
    http_client: httpx.Client | None = None,
) -> GenerationOutcome:
    """Load the schema registry, convert every schema and write the artifact.

    Nothing is written unless loading and conversion both succeed.
    """
    try:
        configuration = load_configuration(request.config_path)
        registry = load_schema_registry(
            configuration.source,
            timeout_seconds=configuration.http.timeout_seconds,
            client=http_client,
        )
    except (ConfigurationError, DocumentLoadError, OSError, ValueError) as exc:
        raise GenerationRunError(str(exc)) from exc

    descriptors = convert_registry(registry)
    output = configuration.output
    rendered = render_descriptors(
        descriptors,
        output.output_format,
        function_name=output.function_name,
        builder_name=output.builder_name,
    )
    output_path = Path(request.output_path) if request.output_path else output.path
    try:
        artifact = write_artifact(rendered, output_path)
    except EmissionError as exc:
        raise GenerationRunError(str(exc)) from exc

    LOGGER.info(
        "Generated %d descriptors (%s) into %s",
        len(descriptors),
        output.output_format.value,
        artifact.path,
    )
    return GenerationOutcome(
        output_path=artifact.path,
        schema_count=len(descriptors),
        changed=artifact.changed,
    )
