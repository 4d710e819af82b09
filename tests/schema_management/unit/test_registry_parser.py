"""Schema registry parsing tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from schema_descriptor_gen.descriptor_conversion import convert_schema
from schema_descriptor_gen.schema_management.registry_parser import (
    SchemaError,
    parse_schema_node,
    parse_schema_registry,
)
from schema_descriptor_gen.schema_management.schema_models import (
    ArrayShape,
    IntegerShape,
    ObjectShape,
    SchemaKind,
    StringShape,
    UntypedShape,
)


def _sample_document() -> dict:
    sample_path = Path(__file__).resolve().parents[3] / "samples" / "sample-openapi.yaml"
    return yaml.safe_load(sample_path.read_text(encoding="utf-8"))


def test_registry_keeps_document_order_of_component_schemas() -> None:
    registry = parse_schema_registry(_sample_document())

    assert registry.names() == (
        "simple-user",
        "label",
        "issue",
        "issue-event",
        "nullable-issue",
        "tagged-issue",
    )


def test_registry_resolves_component_references() -> None:
    registry = parse_schema_registry(_sample_document())
    issue = registry.get("issue")

    assert issue is not None
    members = dict(issue.properties)
    assert members["user"] == registry.get("simple-user")
    labels = members["labels"].shape
    assert isinstance(labels, ArrayShape)
    assert labels.items == registry.get("label")


def test_sample_registry_converts_to_expected_descriptors() -> None:
    registry = parse_schema_registry(_sample_document())
    descriptors = {name: convert_schema(node) for name, node in registry}

    issue = (
        '{"body_bytes":"BINARY","due_on":"DATE",'
        '"labels":[{"color":"STRING","default":"BOOLEAN","name":"STRING"}],'
        '"metadata":"MAP(STRING,STRING)","number":"INT32","score":"DOUBLE","title":"STRING",'
        '"user":{"created_at":"DATETIME","id":"INT64","login":"STRING","site_admin":"BOOLEAN"}}'
    )
    assert descriptors["issue"] == issue
    assert descriptors["issue-event"] == '"JSON"'
    assert descriptors["nullable-issue"] == '"JSON"'
    tagged = issue.replace('"score":"DOUBLE",', '"score":"DOUBLE","tag":"STRING",')
    assert descriptors["tagged-issue"] == tagged


def test_definitions_section_is_used_when_components_are_absent() -> None:
    document = {"definitions": {"Pet": {"type": "object", "properties": {"id": {"type": "integer"}}}}}

    registry = parse_schema_registry(document)

    assert registry.names() == ("Pet",)
    assert convert_schema(registry.get("Pet")) == '{"id":"INT64"}'


def test_definitions_references_resolve() -> None:
    document = {
        "definitions": {
            "Owner": {"type": "string"},
            "Pet": {"type": "object", "properties": {"owner": {"$ref": "#/definitions/Owner"}}},
        }
    }

    registry = parse_schema_registry(document)

    assert convert_schema(registry.get("Pet")) == '{"owner":"STRING"}'


def test_document_without_schema_registry_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="neither components.schemas nor definitions"):
        parse_schema_registry({"openapi": "3.0.0", "paths": {}})


def test_non_mapping_registry_raises_schema_error() -> None:
    with pytest.raises(SchemaError, match="must be a mapping"):
        parse_schema_registry({"components": {"schemas": ["a", "b"]}})


def test_null_registry_yields_empty_registry() -> None:
    assert len(parse_schema_registry({"components": {"schemas": None}})) == 0


def test_unresolved_reference_raises_schema_error() -> None:
    document = {"components": {"schemas": {"a": {"$ref": "#/components/schemas/missing"}}}}

    with pytest.raises(SchemaError, match="Unresolved schema reference: missing"):
        parse_schema_registry(document)


def test_remote_reference_raises_schema_error() -> None:
    document = {"components": {"schemas": {"a": {"$ref": "other.yaml#/components/schemas/x"}}}}

    with pytest.raises(SchemaError, match="Unsupported \\$ref"):
        parse_schema_registry(document)


def test_escaped_reference_names_are_unescaped() -> None:
    document = {
        "components": {
            "schemas": {
                "a/b~c": {"type": "boolean"},
                "holder": {"$ref": "#/components/schemas/a~1b~0c"},
            }
        }
    }

    registry = parse_schema_registry(document)

    assert convert_schema(registry.get("holder")) == '"BOOLEAN"'


def test_reference_cycle_is_replaced_with_untyped_placeholder(caplog) -> None:
    document = {
        "components": {
            "schemas": {
                "node": {
                    "type": "object",
                    "properties": {
                        "value": {"type": "string"},
                        "next": {"$ref": "#/components/schemas/node"},
                    },
                },
            }
        }
    }

    registry = parse_schema_registry(document)

    assert convert_schema(registry.get("node")) == '{"next":"JSON","value":"STRING"}'
    assert "Reference cycle" in caplog.text


def test_mutual_reference_cycle_expands_from_each_entry_point() -> None:
    document = {
        "components": {
            "schemas": {
                "a": {"type": "object", "properties": {"b": {"$ref": "#/components/schemas/b"}}},
                "b": {"type": "object", "properties": {"a": {"$ref": "#/components/schemas/a"}}},
            }
        }
    }

    registry = parse_schema_registry(document)

    assert convert_schema(registry.get("a")) == '{"b":{"a":"JSON"}}'
    assert convert_schema(registry.get("b")) == '{"a":{"b":"JSON"}}'


def test_parse_schema_node_builds_shapes() -> None:
    node = parse_schema_node(
        {
            "type": "object",
            "properties": {
                "id": {"type": "integer", "format": "int32"},
                "tags": {"type": "array", "items": {"type": "string", "format": 5}},
            },
        }
    )

    assert node.kind is SchemaKind.OBJECT
    assert node.shape == ObjectShape(free_form=False)
    members = dict(node.properties)
    assert members["id"].shape == IntegerShape(format="int32")
    tags = members["tags"].shape
    assert isinstance(tags, ArrayShape)
    assert tags.items.shape == StringShape(format=None)


def test_non_mapping_children_parse_as_untyped_nodes() -> None:
    node = parse_schema_node({"type": "object", "properties": {"x": True}, "anyOf": ["bad"]})

    assert dict(node.properties)["x"].shape == UntypedShape()
    assert node.any_of[0].kind is SchemaKind.UNKNOWN


def test_additional_properties_only_true_literal_is_free_form() -> None:
    assert parse_schema_node({"type": "object", "additionalProperties": True}).shape == ObjectShape(
        free_form=True
    )
    assert parse_schema_node({"type": "object", "additionalProperties": False}).shape == (
        ObjectShape(free_form=False)
    )
    assert parse_schema_node({"type": "object", "additionalProperties": {}}).shape == ObjectShape(
        free_form=False
    )
