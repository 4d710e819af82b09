"""Schema node to type descriptor conversion service.

Conversion is total and pure: every node yields a descriptor, unrecognized
shapes fall back to ``"JSON"``, and object members are always re-sorted so
that an unchanged schema renders byte-identical output.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from schema_descriptor_gen.schema_management.schema_models import (
    ArrayShape,
    BooleanShape,
    IntegerShape,
    NumberShape,
    ObjectShape,
    SchemaNode,
    StringShape,
)

from .constants import (
    BOOLEAN,
    DOUBLE,
    FREE_FORM_MAP,
    INT64,
    INTEGER_FORMAT_TOKENS,
    JSON,
    STRING,
    STRING_FORMAT_TOKENS,
)


@dataclass(frozen=True)
class SchemaDescriptor:
    """Converted descriptor for one named schema."""

    name: str
    descriptor: str


def convert_schema(node: SchemaNode) -> str:
    """Return the canonical descriptor for ``node``."""
    shape = node.shape
    if isinstance(shape, IntegerShape):
        return INTEGER_FORMAT_TOKENS.get(shape.format or "", INT64)
    if isinstance(shape, NumberShape):
        return DOUBLE
    if isinstance(shape, StringShape):
        return STRING_FORMAT_TOKENS.get(shape.format or "", STRING)
    if isinstance(shape, BooleanShape):
        return BOOLEAN
    if isinstance(shape, ArrayShape):
        return f"[{convert_schema(shape.items)}]"
    if isinstance(shape, ObjectShape):
        if shape.free_form:
            return FREE_FORM_MAP
        members: dict[str, str] = {}
        flatten_members(node, members)
        return serialize_members(members)
    return JSON


def flatten_members(node: SchemaNode, members: dict[str, str]) -> None:
    """Merge ``node``'s members into ``members``; later writes win.

    Own properties are written first, then every anyOf, allOf and oneOf
    branch in that order, each flattened recursively.
    """
    for name, child in node.properties:
        members[name] = convert_schema(child)
    for branches in node.compositions():
        for branch in branches:
            flatten_members(branch, members)


def serialize_members(members: dict[str, str]) -> str:
    """Render members as ``{"name":descriptor,...}`` sorted by codepoint."""
    body = ",".join(f'"{name}":{members[name]}' for name in sorted(members))
    return "{" + body + "}"


def convert_registry(
    registry: Iterable[tuple[str, SchemaNode]],
) -> tuple[SchemaDescriptor, ...]:
    """Convert every registry entry, ordered by schema name."""
    return tuple(
        SchemaDescriptor(name=name, descriptor=convert_schema(node))
        for name, node in sorted(registry, key=lambda entry: entry[0])
    )
