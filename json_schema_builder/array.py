"""Array schema builder."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Self

from .base import BaseSchema, SchemaLike, node_of
from .registry import ValidatorRegistry


class ArraySchema(BaseSchema):
    """Builder for `{"type": "array"}` schemas."""

    def __init__(self, *, registry: ValidatorRegistry | None = None):
        super().__init__("array", registry=registry)

    def items(self, items: SchemaLike | Sequence[SchemaLike]) -> Self:
        """
        Constrain the array elements.

        Args:
            items: A single schema every element must match, or a sequence of
                schemas matched position by position (tuple form)

        Returns:
            A new builder
        """
        if isinstance(items, (list, tuple)):
            return self.copy_with({"items": [node_of(item) for item in items]})
        return self.copy_with({"items": node_of(items)})

    def additional_items(self, items: SchemaLike | bool) -> Self:
        """Constrain elements past the end of a tuple-form `items`."""
        value = items if isinstance(items, bool) else node_of(items)
        return self.copy_with({"additionalItems": value})

    def contains(self, schema: SchemaLike) -> Self:
        """Require at least one element to match `schema`."""
        return self.copy_with({"contains": node_of(schema)})

    def min_items(self, min_items: int) -> Self:
        return self.copy_with({"minItems": min_items})

    def max_items(self, max_items: int) -> Self:
        return self.copy_with({"maxItems": max_items})

    def unique_items(self, unique: bool = True) -> Self:
        return self.copy_with({"uniqueItems": unique})
