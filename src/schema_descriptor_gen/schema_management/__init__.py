"""Schema management exports."""

from .registry_parser import SchemaError, parse_schema_node, parse_schema_registry
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

__all__ = [
    "ArrayShape",
    "BooleanShape",
    "IntegerShape",
    "NumberShape",
    "ObjectShape",
    "SchemaKind",
    "SchemaNode",
    "SchemaRegistry",
    "SchemaShape",
    "StringShape",
    "UntypedShape",
    "SchemaError",
    "parse_schema_node",
    "parse_schema_registry",
]
