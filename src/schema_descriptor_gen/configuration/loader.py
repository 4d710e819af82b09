"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_descriptor_gen.descriptor_emission import (
    DEFAULT_BUILDER_NAME,
    DEFAULT_FUNCTION_NAME,
    OutputFormat,
)
from schema_descriptor_gen.document_loading import DEFAULT_TIMEOUT_SECONDS, DocumentSource

from .runtime_settings import Configuration, HTTPSettings, OutputSettings

_PLACEHOLDERS = frozenset({"<REQUIRED>", "<OPTIONAL>"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    source = _parse_source_section(parsed.get("source"), base_path)
    output = _parse_output_section(parsed.get("output"), base_path)
    http = _parse_http_section(parsed.get("http"))

    return Configuration(path=path, source=source, output=output, http=http)


def _parse_source_section(value: Any, base_path: Path) -> DocumentSource:
    section = _require_mapping(value, "source")
    url = _optional_string(section.get("url"), "source.url")
    path_value = _optional_string(section.get("path"), "source.path")
    if url and path_value:
        raise ConfigurationError("Source must not set both url and path.")
    if url:
        if not url.startswith(("https://", "http://")):
            raise ConfigurationError("source.url must be an http(s) URL.")
        return DocumentSource(url=url)
    if path_value:
        return DocumentSource(path=_resolve_path(base_path, path_value))
    raise ConfigurationError("Source requires either url or path.")


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _require_mapping(value, "output")
    format_value = _require_non_empty_string(
        section.get("format", OutputFormat.ARRAY_LITERAL.value), "output.format"
    )
    try:
        output_format = OutputFormat(format_value.lower())
    except ValueError as exc:
        supported = ", ".join(item.value for item in OutputFormat)
        raise ConfigurationError(
            f"output.format '{format_value}' is not supported (expected one of: {supported})."
        ) from exc
    output_path = _require_non_empty_string(section.get("path"), "output.path")
    function_name = _require_non_empty_string(
        section.get("function_name", DEFAULT_FUNCTION_NAME), "output.function_name"
    )
    builder_name = _require_non_empty_string(
        section.get("builder_name", DEFAULT_BUILDER_NAME), "output.builder_name"
    )
    return OutputSettings(
        output_format=output_format,
        path=_resolve_path(base_path, output_path),
        function_name=function_name,
        builder_name=builder_name,
    )


def _parse_http_section(value: Any) -> HTTPSettings:
    section = value or {}
    if not isinstance(section, Mapping):
        raise ConfigurationError("Configuration section 'http' must be a mapping.")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "http.timeout_seconds"
    )
    return HTTPSettings(timeout_seconds=timeout_seconds)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped in _PLACEHOLDERS:
        raise ConfigurationError(f"{field_name} still holds the placeholder {stripped}.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if stripped in _PLACEHOLDERS:
        return None
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
