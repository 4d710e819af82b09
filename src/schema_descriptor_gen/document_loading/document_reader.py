"""Schema document loading service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
import yaml

from schema_descriptor_gen.schema_management import (
    SchemaError,
    SchemaRegistry,
    parse_schema_registry,
)

from .core_schema_loader import load_core_schema_yaml
from .document_sources import DEFAULT_TIMEOUT_SECONDS, DocumentSource, SourceKind

LOGGER = logging.getLogger(__name__)


class DocumentLoadError(Exception):
    """Raised when the schema document cannot be fetched, read or parsed."""


def fetch_document_text(
    url: str,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> str:
    """Fetch the document body, following redirects.

    Args:
      url: Absolute document URL.
      timeout_seconds: Read timeout applied when no client is supplied.
      client: Optional preconfigured client, closed by the caller.

    Returns:
      The decoded response body.

    Raises:
      DocumentLoadError: On transport failure or a non-success status.
    """
    LOGGER.info("Fetching schema document from %s", url)
    owns_client = client is None
    http_client = client or httpx.Client(timeout=timeout_seconds, follow_redirects=True)
    try:
        response = http_client.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise DocumentLoadError(
            f"HTTP GET {url} failed. Status: {exc.response.status_code}, "
            f"Reason: {exc.response.reason_phrase}"
        ) from exc
    except httpx.HTTPError as exc:
        raise DocumentLoadError(f"HTTP GET {url} failed: {exc}") from exc
    finally:
        if owns_client:
            http_client.close()
    LOGGER.debug("Fetched %d bytes from %s", len(response.content), url)
    return response.text


def read_document_text(path: Path | str) -> str:
    """Read a local schema document as UTF-8 text."""
    document_path = Path(path)
    if not document_path.exists():
        raise DocumentLoadError(f"Schema document not found: {document_path}")
    LOGGER.info("Reading schema document from %s", document_path)
    try:
        return document_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Failed to read schema document {document_path}: {exc}") from exc


def parse_document_text(text: str, *, origin: str) -> Mapping[str, Any]:
    """Parse YAML or JSON document text into its root mapping."""
    try:
        parsed = load_core_schema_yaml(text)
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Failed to parse schema document {origin}: {exc}") from exc
    if parsed is None:
        raise DocumentLoadError(f"Schema document is empty: {origin}")
    if not isinstance(parsed, Mapping):
        raise DocumentLoadError(f"Schema document root must be a mapping: {origin}")
    return parsed


def load_schema_registry(
    source: DocumentSource,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    client: httpx.Client | None = None,
) -> SchemaRegistry:
    """Load the source document and parse its schema registry."""
    if source.kind is SourceKind.URL:
        assert source.url is not None
        text = fetch_document_text(source.url, timeout_seconds=timeout_seconds, client=client)
    else:
        assert source.path is not None
        text = read_document_text(source.path)

    document = parse_document_text(text, origin=source.describe())
    try:
        registry = parse_schema_registry(document)
    except SchemaError as exc:
        raise DocumentLoadError(f"Invalid schema document {source.describe()}: {exc}") from exc
    LOGGER.info("Loaded %d schemas from %s", len(registry), source.describe())
    return registry
