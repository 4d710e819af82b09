"""Descriptor emission exports."""

from .artifact_writer import EmissionError, WrittenArtifact, write_artifact
from .emission_formats import (
    DEFAULT_BUILDER_NAME,
    DEFAULT_FUNCTION_NAME,
    GENERATED_BANNER,
    OutputFormat,
    cpp_string_literal,
    render_array_literal,
    render_descriptors,
    render_lookup_chain,
)

__all__ = [
    "DEFAULT_BUILDER_NAME",
    "DEFAULT_FUNCTION_NAME",
    "GENERATED_BANNER",
    "EmissionError",
    "OutputFormat",
    "WrittenArtifact",
    "cpp_string_literal",
    "render_array_literal",
    "render_descriptors",
    "render_lookup_chain",
    "write_artifact",
]
