"""Schema document loading exports."""

from .document_reader import (
    DocumentLoadError,
    fetch_document_text,
    load_schema_registry,
    parse_document_text,
    read_document_text,
)
from .document_sources import (
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_ENTERPRISE_CLOUD_DESCRIPTION_URL,
    DocumentSource,
    SourceKind,
)

__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "GITHUB_ENTERPRISE_CLOUD_DESCRIPTION_URL",
    "DocumentLoadError",
    "DocumentSource",
    "SourceKind",
    "fetch_document_text",
    "load_schema_registry",
    "parse_document_text",
    "read_document_text",
]
