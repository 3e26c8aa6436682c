"""Object schema builder: properties, required names and structural keywords."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any, Self

from .base import BaseSchema, SchemaLike, is_required_of, node_of
from .merge import SchemaNode
from .registry import ValidatorRegistry


def strip_required(node: Mapping[str, Any]) -> SchemaNode:
    """
    Remove `required` from an object node and from nested object properties.

    Only properties whose `type` is exactly "object" are descended into.
    Arrays of objects, nullable objects and combinators keep their
    `required` lists.
    """
    result = dict(node)
    properties = result.get("properties")
    if properties:
        result["properties"] = {
            name: strip_required(child) if isinstance(child, Mapping) and child.get("type") == "object" else child
            for name, child in properties.items()
        }
    result.pop("required", None)
    return result


class ObjectSchema(BaseSchema):
    """Builder for `{"type": "object"}` schemas."""

    def __init__(self, *, registry: ValidatorRegistry | None = None):
        super().__init__("object", registry=registry)

    def prop(self, name: str, schema: SchemaLike) -> Self:
        """
        Add or replace a property.

        The name is appended to `required` unless the child was marked
        optional(). Replacing a property does not remove its name from
        `required`.

        Args:
            name: Property name
            schema: Child schema; its node is copied into `properties`

        Returns:
            A new builder
        """
        update: dict[str, Any] = {"properties": {name: node_of(schema)}}
        if is_required_of(schema):
            update["required"] = [name]
        return self.copy_with(update)

    def required(self, *names: str) -> Self:
        """Add names to `required`. Names are not checked against `properties`."""
        return self.copy_with({"required": list(names)})

    def not_required(self, *names: str) -> Self:
        """Remove names from `required`; an emptied list is kept as []."""
        current = self._node.get("required")
        if current is None:
            return self.copy_with()
        remaining = [name for name in current if name not in names]
        return self.copy_with({"required": remaining}, replace=("required",))

    def additional_properties(self, schema: SchemaLike | bool) -> Self:
        """
        Constrain properties not listed in `properties` or matched by `patternProperties`.

        Args:
            schema: False forbids them, True allows anything, a schema
                constrains their values

        Returns:
            A new builder
        """
        value = schema if isinstance(schema, bool) else node_of(schema)
        return self.copy_with({"additionalProperties": value})

    def property_names(self, schema: SchemaLike) -> Self:
        """Validate every property name (always a string) against `schema`."""
        return self.copy_with({"propertyNames": node_of(schema)})

    def min_properties(self, min_properties: int) -> Self:
        return self.copy_with({"minProperties": min_properties})

    def max_properties(self, max_properties: int) -> Self:
        return self.copy_with({"maxProperties": max_properties})

    def dependencies(self, dependencies: Mapping[str, Sequence[str] | SchemaLike]) -> Self:
        """
        Set property dependencies.

        Args:
            dependencies: Maps a property name to either the names that must
                be present alongside it, or a schema the whole object must
                match when the property is present

        Returns:
            A new builder
        """
        result: dict[str, Any] = {}
        for name, dependency in dependencies.items():
            if isinstance(dependency, (list, tuple)):
                result[name] = list(dependency)
            else:
                result[name] = node_of(dependency)
        return self.copy_with({"dependencies": result})

    def pattern_properties(self, patterns: Mapping[str | re.Pattern[str], SchemaLike]) -> Self:
        """Constrain the values of properties whose names match a regular expression."""
        result: dict[str, Any] = {}
        for pattern, schema in patterns.items():
            source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
            result[source] = node_of(schema)
        return self.copy_with({"patternProperties": result})

    def partial(self) -> Self:
        """Return a copy with `required` removed here and in nested object properties."""
        return self.with_node(strip_required(self._node))
