"""Numeric schema builder for the "number" and "integer" types."""

from __future__ import annotations

from typing import Literal, Self

from .base import BaseSchema
from .registry import ValidatorRegistry

Number = int | float


class NumericSchema(BaseSchema):
    """Builder for `{"type": "number"}` and `{"type": "integer"}` schemas."""

    def __init__(self, type_: Literal["number", "integer"] = "number", *, registry: ValidatorRegistry | None = None):
        super().__init__(type_, registry=registry)

    def minimum(self, minimum: Number, exclusive: bool = False) -> Self:
        """
        Set the lower bound.

        Args:
            minimum: The bound
            exclusive: Set `exclusiveMinimum` instead of `minimum`

        Returns:
            A new builder
        """
        keyword = "exclusiveMinimum" if exclusive else "minimum"
        return self.copy_with({keyword: minimum})

    def maximum(self, maximum: Number, exclusive: bool = False) -> Self:
        """
        Set the upper bound.

        Args:
            maximum: The bound
            exclusive: Set `exclusiveMaximum` instead of `maximum`

        Returns:
            A new builder
        """
        keyword = "exclusiveMaximum" if exclusive else "maximum"
        return self.copy_with({keyword: maximum})

    def multiple_of(self, multiple_of: Number) -> Self:
        return self.copy_with({"multipleOf": multiple_of})
