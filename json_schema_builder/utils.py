"""
Merge and projection utilities over built object schemas.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from .object import ObjectSchema

T = TypeVar("T", bound=ObjectSchema)


def pick(keys: Iterable[str], obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return the entries of `obj` whose key is in `keys`, in the order of `keys`."""
    return {key: obj[key] for key in keys if key in obj}


def omit(keys: Iterable[str], obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return the entries of `obj` whose key is not in `keys`, in the order of `obj`."""
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def merge_schemas(schema1: T, schema2: ObjectSchema) -> T:
    """
    Merge the properties of two object schemas, taking the first one as master.

    Properties of schema2 win on name collisions. The required names of both
    schemas are combined only when schema1 itself is required; otherwise the
    result keeps schema1's `required` and schema2's required names are dropped.
    Every other keyword, the class and the required flag come from schema1.

    Args:
        schema1: Master schema
        schema2: Schema whose properties are merged in

    Returns:
        A new schema of schema1's class
    """
    node1 = schema1.node
    node2 = schema2.node
    update: dict[str, Any] = {"properties": {**node1.get("properties", {}), **node2.get("properties", {})}}
    if schema1.is_required:
        update["required"] = [*node1.get("required", []), *node2.get("required", [])]
    return schema1.copy_with(update)


def merge_multiple_schemas(*schemas: ObjectSchema) -> ObjectSchema:
    """
    Merge several object schemas with merge_schemas.

    The sequence is reversed and folded with its first element (the last
    schema given) as the master, so schemas given earlier win property name
    collisions.

    Raises:
        ValueError: If no schema is given
    """
    if not schemas:
        raise ValueError("merge_multiple_schemas() requires at least one schema")
    ordered = list(reversed(schemas))
    return functools.reduce(merge_schemas, ordered[1:], ordered[0])


def pick_from_schema(schema: T, props: Iterable[str]) -> T:
    """Keep only the given properties (and their `required` entries)."""
    names = list(props)
    node = schema.node
    node["properties"] = pick(names, node.get("properties", {}))
    if "required" in node:
        node["required"] = [name for name in node["required"] if name in names]
    return schema.with_node(node)


def omit_from_schema(schema: T, props: Iterable[str]) -> T:
    """Drop the given properties (and their `required` entries)."""
    names = list(props)
    node = schema.node
    node["properties"] = omit(names, node.get("properties", {}))
    if "required" in node:
        node["required"] = [name for name in node["required"] if name not in names]
    return schema.with_node(node)
