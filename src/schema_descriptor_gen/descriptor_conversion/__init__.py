"""Descriptor conversion exports."""

from .descriptor_converter import (
    SchemaDescriptor,
    convert_registry,
    convert_schema,
    flatten_members,
    serialize_members,
)

__all__ = [
    "SchemaDescriptor",
    "convert_registry",
    "convert_schema",
    "flatten_members",
    "serialize_members",
]
