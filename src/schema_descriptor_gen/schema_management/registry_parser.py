"""OpenAPI document to schema registry parsing service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .schema_models import (
    ArrayShape,
    BooleanShape,
    IntegerShape,
    NumberShape,
    ObjectShape,
    SchemaKind,
    SchemaNode,
    SchemaRegistry,
    SchemaShape,
    StringShape,
    UntypedShape,
)

LOGGER = logging.getLogger(__name__)

COMPONENTS_REF_PREFIX = "#/components/schemas/"
DEFINITIONS_REF_PREFIX = "#/definitions/"


class SchemaError(Exception):
    """Raised when a schema document cannot be turned into a registry."""


def parse_schema_registry(document: Mapping[str, Any]) -> SchemaRegistry:
    """Build the schema registry from ``components.schemas`` or ``definitions``."""
    schemas = _locate_schemas(document)
    resolver = _ReferenceResolver(schemas)
    entries = []
    for name in schemas:
        if not isinstance(name, str) or not name:
            raise SchemaError(f"Schema names must be non-empty strings, got {name!r}.")
        entries.append((name, resolver.resolve_component(name)))
    LOGGER.debug("Parsed %d schemas from document", len(entries))
    return SchemaRegistry(entries=tuple(entries))


def parse_schema_node(
    raw: Any, *, components: Mapping[str, Any] | None = None
) -> SchemaNode:
    """Parse one raw schema mapping; ``$ref`` targets are looked up in ``components``."""
    return _ReferenceResolver(components or {}).parse(raw)


def _locate_schemas(document: Mapping[str, Any]) -> Mapping[str, Any]:
    components = document.get("components")
    if isinstance(components, Mapping) and "schemas" in components:
        schemas = components["schemas"]
    elif "definitions" in document:
        schemas = document["definitions"]
    else:
        raise SchemaError("Document defines neither components.schemas nor definitions.")
    if schemas is None:
        return {}
    if not isinstance(schemas, Mapping):
        raise SchemaError("Schema registry section must be a mapping.")
    return schemas


def _schema_kind(raw: Mapping[str, Any]) -> SchemaKind:
    declared = raw.get("type")
    if isinstance(declared, list):
        # Only a single-entry type list names a kind; [string, "null"] stays untyped.
        declared = declared[0] if len(declared) == 1 else None
    if not isinstance(declared, str):
        return SchemaKind.UNKNOWN
    try:
        return SchemaKind(declared)
    except ValueError:
        return SchemaKind.UNKNOWN


def _schema_format(raw: Mapping[str, Any]) -> str | None:
    value = raw.get("format")
    return value if isinstance(value, str) else None


def _reference_name(ref: Any) -> str:
    if not isinstance(ref, str):
        raise SchemaError(f"$ref must be a string, got {ref!r}.")
    for prefix in (COMPONENTS_REF_PREFIX, DEFINITIONS_REF_PREFIX):
        if ref.startswith(prefix):
            return ref[len(prefix) :].replace("~1", "/").replace("~0", "~")
    raise SchemaError(f"Unsupported $ref (only local schema references are resolved): {ref}")


class _ReferenceResolver:
    """Resolves local references while parsing, caching acyclic components."""

    def __init__(self, components: Mapping[str, Any]) -> None:
        self._components = components
        self._cache: dict[str, SchemaNode] = {}
        self._stack: list[str] = []
        self._placeholders = 0

    def resolve_component(self, name: str) -> SchemaNode:
        cached = self._cache.get(name)
        if cached is not None:
            return cached
        if name in self._stack:
            LOGGER.warning(
                "Reference cycle %s -> %s replaced by an untyped placeholder",
                " -> ".join(self._stack),
                name,
            )
            self._placeholders += 1
            return SchemaNode()
        if name not in self._components:
            raise SchemaError(f"Unresolved schema reference: {name}")

        placeholders_before = self._placeholders
        self._stack.append(name)
        try:
            node = self.parse(self._components[name])
        finally:
            self._stack.pop()
        # A node that contains a cycle placeholder depends on where it was reached from.
        if self._placeholders == placeholders_before:
            self._cache[name] = node
        return node

    def parse(self, raw: Any) -> SchemaNode:
        if not isinstance(raw, Mapping):
            return SchemaNode()
        if "$ref" in raw:
            return self.resolve_component(_reference_name(raw["$ref"]))

        return SchemaNode(
            shape=self._parse_shape(raw),
            properties=self._parse_properties(raw.get("properties")),
            any_of=self._parse_branches(raw.get("anyOf")),
            all_of=self._parse_branches(raw.get("allOf")),
            one_of=self._parse_branches(raw.get("oneOf")),
        )

    def _parse_shape(self, raw: Mapping[str, Any]) -> SchemaShape:
        kind = _schema_kind(raw)
        if kind is SchemaKind.INTEGER:
            return IntegerShape(format=_schema_format(raw))
        if kind is SchemaKind.NUMBER:
            return NumberShape(format=_schema_format(raw))
        if kind is SchemaKind.STRING:
            return StringShape(format=_schema_format(raw))
        if kind is SchemaKind.BOOLEAN:
            return BooleanShape()
        if kind is SchemaKind.ARRAY:
            return ArrayShape(items=self.parse(raw.get("items")))
        if kind is SchemaKind.OBJECT:
            # A schema-valued additionalProperties still flattens declared members.
            return ObjectShape(free_form=raw.get("additionalProperties") is True)
        return UntypedShape()

    def _parse_properties(self, value: Any) -> tuple[tuple[str, SchemaNode], ...]:
        if not isinstance(value, Mapping):
            return ()
        return tuple((str(name), self.parse(child)) for name, child in value.items())

    def _parse_branches(self, value: Any) -> tuple[SchemaNode, ...]:
        if not isinstance(value, list):
            return ()
        return tuple(self.parse(branch) for branch in value)
