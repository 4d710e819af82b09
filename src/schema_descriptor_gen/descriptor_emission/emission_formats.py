"""Descriptor table rendering service."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from schema_descriptor_gen.descriptor_conversion import SchemaDescriptor

GENERATED_BANNER = "// Generated by schema-descriptor-gen. Do not edit."
DEFAULT_FUNCTION_NAME = "GetTypeDescriptor"
DEFAULT_BUILDER_NAME = "StringVector::AddString"

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class OutputFormat(str, Enum):
    """Generated source surface."""

    ARRAY_LITERAL = "array_literal"
    LOOKUP_CHAIN = "lookup_chain"


def cpp_string_literal(value: str) -> str:
    """Quote ``value`` as a C++ narrow string literal."""
    escaped = []
    for char in value:
        if char in _SIMPLE_ESCAPES:
            escaped.append(_SIMPLE_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            # Octal escapes stop after three digits, unlike \x.
            escaped.append(f"\\{ord(char):03o}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'


def render_array_literal(descriptors: Sequence[SchemaDescriptor]) -> str:
    """Render ``{"name","descriptor"},`` rows for a static key/descriptor table."""
    lines = [GENERATED_BANNER]
    lines.extend(
        f"{{{cpp_string_literal(item.name)},{cpp_string_literal(item.descriptor)}}},"
        for item in descriptors
    )
    return "\n".join(lines) + "\n"


def render_lookup_chain(
    descriptors: Sequence[SchemaDescriptor],
    *,
    function_name: str = DEFAULT_FUNCTION_NAME,
    builder_name: str = DEFAULT_BUILDER_NAME,
) -> str:
    """Render an if/return chain that maps a requested name to its descriptor."""
    lines = [GENERATED_BANNER, f"// Lookup chain body for {function_name}(name)."]
    lines.extend(
        f"if (name == {cpp_string_literal(item.name)}) "
        f"{{ return {builder_name}({cpp_string_literal(item.descriptor)}); }}"
        for item in descriptors
    )
    return "\n".join(lines) + "\n"


def render_descriptors(
    descriptors: Sequence[SchemaDescriptor],
    output_format: OutputFormat,
    *,
    function_name: str = DEFAULT_FUNCTION_NAME,
    builder_name: str = DEFAULT_BUILDER_NAME,
) -> str:
    """Render descriptors in the requested output format."""
    if output_format is OutputFormat.ARRAY_LITERAL:
        return render_array_literal(descriptors)
    if output_format is OutputFormat.LOOKUP_CHAIN:
        return render_lookup_chain(
            descriptors, function_name=function_name, builder_name=builder_name
        )
    raise ValueError(f"Unsupported output format: {output_format}")
