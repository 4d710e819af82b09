"""Schema management entities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class SchemaKind(str, Enum):
    """Primitive kind declared by a schema node's ``type``."""

    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class IntegerShape:
    """Integer node with an optional format hint."""

    format: str | None = None


@dataclass(frozen=True)
class NumberShape:
    """Floating point node; the format hint is kept but never consulted."""

    format: str | None = None


@dataclass(frozen=True)
class StringShape:
    """String node with an optional format hint."""

    format: str | None = None


@dataclass(frozen=True)
class BooleanShape:
    """Boolean node."""


@dataclass(frozen=True)
class ArrayShape:
    """Array node owning its single item schema."""

    items: SchemaNode


@dataclass(frozen=True)
class ObjectShape:
    """Object node; ``free_form`` is set by ``additionalProperties: true``."""

    free_form: bool = False


@dataclass(frozen=True)
class UntypedShape:
    """Node without a recognized ``type`` (pure compositions, multi-type lists)."""


SchemaShape = (
    IntegerShape
    | NumberShape
    | StringShape
    | BooleanShape
    | ArrayShape
    | ObjectShape
    | UntypedShape
)

_KIND_BY_SHAPE: dict[type, SchemaKind] = {
    IntegerShape: SchemaKind.INTEGER,
    NumberShape: SchemaKind.NUMBER,
    StringShape: SchemaKind.STRING,
    BooleanShape: SchemaKind.BOOLEAN,
    ArrayShape: SchemaKind.ARRAY,
    ObjectShape: SchemaKind.OBJECT,
    UntypedShape: SchemaKind.UNKNOWN,
}


@dataclass(frozen=True)
class SchemaNode:
    """One schema definition.

    Properties and composition branches live on every node, not only on
    objects: flattening reads them from ``anyOf``/``allOf``/``oneOf`` branches
    that usually carry no ``type`` of their own.
    """

    shape: SchemaShape = field(default_factory=UntypedShape)
    properties: tuple[tuple[str, SchemaNode], ...] = ()
    any_of: tuple[SchemaNode, ...] = ()
    all_of: tuple[SchemaNode, ...] = ()
    one_of: tuple[SchemaNode, ...] = ()

    @property
    def kind(self) -> SchemaKind:
        return _KIND_BY_SHAPE[type(self.shape)]

    def compositions(self) -> tuple[tuple[SchemaNode, ...], ...]:
        """Composition sequences in flattening order: anyOf, allOf, oneOf."""
        return (self.any_of, self.all_of, self.one_of)


@dataclass(frozen=True)
class SchemaRegistry:
    """Read-only mapping from schema name to its top-level node, in document order."""

    entries: tuple[tuple[str, SchemaNode], ...] = ()

    def __post_init__(self) -> None:
        names = [name for name, _ in self.entries]
        if len(names) != len(set(names)):
            raise ValueError("Schema registry names must be unique.")
        if any(not name for name in names):
            raise ValueError("Schema registry names must not be empty.")

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[str, SchemaNode]]:
        return iter(self.entries)

    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def get(self, name: str) -> SchemaNode | None:
        for entry_name, node in self.entries:
            if entry_name == name:
                return node
        return None
