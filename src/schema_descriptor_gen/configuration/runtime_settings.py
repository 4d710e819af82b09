"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_descriptor_gen.descriptor_emission import OutputFormat
from schema_descriptor_gen.document_loading import DocumentSource


@dataclass(frozen=True)
class OutputSettings:
    """Generated artifact destination and surface."""

    output_format: OutputFormat
    path: Path
    function_name: str
    builder_name: str


@dataclass(frozen=True)
class HTTPSettings:
    """Remote document fetch settings."""

    timeout_seconds: int


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    source: DocumentSource
    output: OutputSettings
    http: HTTPSettings
