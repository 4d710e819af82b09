"""Descriptor rendering tests."""

from __future__ import annotations

import pytest
from schema_descriptor_gen.descriptor_conversion import SchemaDescriptor
from schema_descriptor_gen.descriptor_emission.emission_formats import (
    GENERATED_BANNER,
    OutputFormat,
    cpp_string_literal,
    render_array_literal,
    render_descriptors,
    render_lookup_chain,
)

DESCRIPTORS = (
    SchemaDescriptor(name="label", descriptor='{"color":"STRING","name":"STRING"}'),
    SchemaDescriptor(name="tags", descriptor='["STRING"]'),
)


def test_cpp_string_literal_escapes_quotes_and_backslashes() -> None:
    assert cpp_string_literal('"INT32"') == '"\\"INT32\\""'
    assert cpp_string_literal("a\\b") == '"a\\\\b"'


def test_cpp_string_literal_escapes_control_characters() -> None:
    assert cpp_string_literal("a\nb\tc") == '"a\\nb\\tc"'
    assert cpp_string_literal("\x01f") == '"\\001f"'


def test_cpp_string_literal_keeps_non_ascii_text() -> None:
    assert cpp_string_literal("café") == '"café"'


def test_render_array_literal_writes_one_row_per_schema() -> None:
    rendered = render_array_literal(DESCRIPTORS)

    assert rendered.splitlines() == [
        GENERATED_BANNER,
        '{"label","{\\"color\\":\\"STRING\\",\\"name\\":\\"STRING\\"}"},',
        '{"tags","[\\"STRING\\"]"},',
    ]
    assert rendered.endswith("\n")


def test_render_lookup_chain_writes_one_conditional_per_schema() -> None:
    rendered = render_lookup_chain(DESCRIPTORS, function_name="Lookup", builder_name="Build")

    lines = rendered.splitlines()
    assert lines[0] == GENERATED_BANNER
    assert lines[1] == "// Lookup chain body for Lookup(name)."
    assert lines[2:] == [
        'if (name == "label") '
        '{ return Build("{\\"color\\":\\"STRING\\",\\"name\\":\\"STRING\\"}"); }',
        'if (name == "tags") { return Build("[\\"STRING\\"]"); }',
    ]


def test_render_empty_descriptor_set_writes_only_banner() -> None:
    assert render_array_literal(()) == GENERATED_BANNER + "\n"


@pytest.mark.parametrize(
    ("output_format", "marker"),
    [(OutputFormat.ARRAY_LITERAL, '{"tags",'), (OutputFormat.LOOKUP_CHAIN, 'if (name == "tags")')],
)
def test_render_descriptors_dispatches_on_format(output_format: OutputFormat, marker: str) -> None:
    assert marker in render_descriptors(DESCRIPTORS, output_format)


def test_rendering_is_byte_identical_across_runs() -> None:
    assert render_descriptors(DESCRIPTORS, OutputFormat.LOOKUP_CHAIN) == render_descriptors(
        DESCRIPTORS, OutputFormat.LOOKUP_CHAIN
    )
