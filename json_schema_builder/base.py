"""
Core schema builder.

BaseSchema wraps a Schema Node (a plain dict of JSON Schema keywords) and
an `is_required` flag. Every operation returns a new builder of the same
class; the receiver is never modified.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from typing import Any, Self

from .merge import SchemaNode, merge_node
from .registry import CUSTOM_KEYWORD, Predicate, ValidatorRegistry, default_registry

NULL_TYPE = "null"


def node_of(schema: SchemaLike) -> SchemaNode:
    """Return a copy of the node behind a builder or a raw schema mapping."""
    if isinstance(schema, BaseSchema):
        return schema.node
    return copy.deepcopy(dict(schema))


def is_required_of(schema: SchemaLike) -> bool:
    """Raw schema mappings count as required."""
    return schema.is_required if isinstance(schema, BaseSchema) else True


class BaseSchema:
    """Immutable builder for a single JSON Schema fragment."""

    def __init__(self, type_: str | list[str] | None = None, *, registry: ValidatorRegistry | None = None):
        """
        Initialize a builder.

        Args:
            type_: Optional type tag (or list of tags) seeded into the node
            registry: Registry receiving predicates from custom(); defaults to
                the process-wide registry
        """
        self._node: SchemaNode = {} if type_ is None else {"type": copy.deepcopy(type_)}
        self._is_required = True
        self._registry = registry if registry is not None else default_registry

    @property
    def node(self) -> SchemaNode:
        """A deep copy of the schema document built so far."""
        return copy.deepcopy(self._node)

    @property
    def is_required(self) -> bool:
        return self._is_required

    @property
    def registry(self) -> ValidatorRegistry:
        return self._registry

    def copy_with(
        self,
        update: Mapping[str, Any] | None = None,
        *,
        is_required: bool | None = None,
        replace: tuple[str, ...] = (),
    ) -> Self:
        """
        Return a new builder with a partial node merged in.

        Args:
            update: Partial node merged with the rules of merge.KEYWORD_RULES
            is_required: New value of the required flag (unchanged when None)
            replace: Keywords overwritten regardless of their merge rule

        Returns:
            A new builder of the same class
        """
        clone = copy.copy(self)
        clone._node = merge_node(self._node, update, replace=replace)
        if is_required is not None:
            clone._is_required = is_required
        return clone

    def with_node(self, node: Mapping[str, Any]) -> Self:
        """Return a new builder whose node is exactly `node`."""
        clone = copy.copy(self)
        clone._node = copy.deepcopy(dict(node))
        return clone

    def extend(self, other: BaseSchema) -> Self:
        """Merge another builder's node into this one and adopt its required flag."""
        return self.copy_with(other._node, is_required=other._is_required)

    def to_dict(self) -> SchemaNode:
        return self.node

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self._node, **kwargs)

    # Metadata

    def id(self, schema_id: str) -> Self:
        """Set `$id`, the base URI of the schema."""
        return self.copy_with({"$id": schema_id})

    def schema(self, uri: str) -> Self:
        """Set `$schema`, the meta-schema the document conforms to."""
        return self.copy_with({"$schema": uri})

    def ref(self, ref: str) -> Self:
        """Set `$ref`."""
        return self.copy_with({"$ref": ref})

    def title(self, title: str) -> Self:
        return self.copy_with({"title": title})

    def description(self, description: str) -> Self:
        return self.copy_with({"description": description})

    def examples(self, *examples: Any) -> Self:
        return self.copy_with({"examples": list(examples)})

    def default(self, value: Any) -> Self:
        return self.copy_with({"default": value})

    def definition(self, name: str, schema: SchemaLike) -> Self:
        """Add a named sub-schema under `$defs`, keeping earlier definitions."""
        definitions = {**self._node.get("$defs", {}), name: node_of(schema)}
        return self.copy_with({"$defs": definitions})

    def raw(self, fragment: Mapping[str, Any]) -> Self:
        """Merge an arbitrary schema fragment into the node."""
        return self.copy_with(fragment)

    # Value constraints

    def enum(self, *values: Any) -> Self:
        """
        Restrict the value to one of `values`.

        Replaces any previous enum. A null sentinel added by nullable() is lost
        and has to be re-applied.
        """
        return self.copy_with({"enum": list(values)})

    def const(self, value: Any) -> Self:
        return self.copy_with({"const": value})

    def nullable(self) -> Self:
        """
        Allow null in addition to the current type.

        `type` becomes ["null", *tags] and an existing enum gains a None entry.
        Calling it twice yields the same node.
        """
        current = self._node.get("type")
        if current is None:
            types = [NULL_TYPE]
        elif isinstance(current, str):
            types = [NULL_TYPE] if current == NULL_TYPE else [NULL_TYPE, current]
        else:
            types = [NULL_TYPE, *(tag for tag in current if tag != NULL_TYPE)]

        update: dict[str, Any] = {"type": types}
        values = self._node.get("enum")
        if values is not None and not any(value is None for value in values):
            update["enum"] = [*values, None]
        return self.copy_with(update)

    def optional(self) -> Self:
        """Mark the schema as not required when attached as an object property."""
        return self.copy_with(is_required=False)

    def custom(self, predicate: Predicate, *args: Any) -> Self:
        """
        Validate with a predicate instead of declarative keywords.

        The predicate is stored in the registry and the node becomes
        {"custom": [key, *args]}; every other keyword is dropped. Wrap the
        result in all_of() to combine it with declarative constraints.

        Args:
            predicate: Called as predicate(data, parent_schema, context)
            *args: Extra values stored after the key, available as context.args

        Returns:
            A new builder
        """
        key = self._registry.register(predicate)
        return self.with_node({CUSTOM_KEYWORD: [key, *args]})

    # Combinators

    def _root(self, update: Mapping[str, Any]) -> BaseSchema:
        return BaseSchema(registry=self._registry).copy_with(update)

    def any_of(self, *schemas: SchemaLike) -> BaseSchema:
        return self._root({"anyOf": [node_of(s) for s in schemas]})

    def one_of(self, *schemas: SchemaLike) -> BaseSchema:
        return self._root({"oneOf": [node_of(s) for s in schemas]})

    def all_of(self, *schemas: SchemaLike) -> BaseSchema:
        return self._root({"allOf": [node_of(s) for s in schemas]})

    def not_(self, schema: SchemaLike) -> BaseSchema:
        return self._root({"not": node_of(schema)})

    def if_then(self, if_: SchemaLike, then: SchemaLike) -> BaseSchema:
        return self._root({"if": node_of(if_), "then": node_of(then)})

    def if_then_else(
        self,
        if_: SchemaLike,
        then: SchemaLike,
        else_: SchemaLike,
    ) -> BaseSchema:
        return self._root({"if": node_of(if_), "then": node_of(then), "else": node_of(else_)})

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._node == other._node and self._is_required == other._is_required

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._node!r}, is_required={self._is_required})"


SchemaLike = BaseSchema | Mapping[str, Any]
