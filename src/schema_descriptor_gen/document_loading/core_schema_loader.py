"""YAML loader with YAML 1.2 core schema scalar typing.

PyYAML resolves plain scalars with YAML 1.1 rules, so ``on``/``yes`` load as
booleans and ``0x10`` as an integer. Schema and member names must survive as
written, so mapping keys keep their scalar text and only the 1.2 core forms
of bool, int and float are resolved implicitly.
"""

from __future__ import annotations

import re
from collections.abc import Hashable
from typing import Any

import yaml

_BaseSafeLoader: Any = getattr(yaml, "CSafeLoader", yaml.SafeLoader)

_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
_REPLACED_TAGS = frozenset({_BOOL_TAG, _INT_TAG, _FLOAT_TAG, _TIMESTAMP_TAG})


class CoreSchemaLoader(_BaseSafeLoader):  # pylint: disable=too-many-ancestors
    """Safe loader that keeps plain mapping keys as text."""

    def construct_mapping(self, node: yaml.Node, deep: bool = False) -> dict[Any, Any]:
        if not isinstance(node, yaml.MappingNode):
            raise yaml.constructor.ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark
            )
        self.flatten_mapping(node)
        mapping: dict[Any, Any] = {}
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.ScalarNode):
                key: Any = key_node.value
            else:
                key = self.construct_object(key_node, deep=deep)
                if not isinstance(key, Hashable):
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        "found unhashable key",
                        key_node.start_mark,
                    )
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


CoreSchemaLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _REPLACED_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreSchemaLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
# Decimal only: leading zeros would be read as octal by the int constructor.
CoreSchemaLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$"),
    list("-+0123456789"),
)
CoreSchemaLoader.add_implicit_resolver(
    _FLOAT_TAG,
    re.compile(
        r"""^(?:[-+]?(?:\.[0-9]+|[0-9]+\.[0-9]*)(?:[eE][-+]?[0-9]+)?
        |[-+]?[0-9]+[eE][-+]?[0-9]+
        |[-+]?\.(?:inf|Inf|INF)
        |\.(?:nan|NaN|NAN))$""",
        re.X,
    ),
    list("-+0123456789."),
)


def load_core_schema_yaml(text: str) -> Any:
    """Parse YAML or JSON text with :class:`CoreSchemaLoader`."""
    return yaml.load(text, Loader=CoreSchemaLoader)
