"""Schema builder for callable values."""

from __future__ import annotations

from typing import Any

from .base import BaseSchema
from .registry import ValidatorRegistry


class FunctionSchema(BaseSchema):
    """
    Builder for callable values.

    JSON Schema has no vocabulary for callables; the node only carries the
    "function" type tag, which SchemaValidator maps to callable(). Host code
    can check values directly with validate().
    """

    def __init__(self, *, registry: ValidatorRegistry | None = None):
        super().__init__("function", registry=registry)

    def validate(self, value: Any) -> bool:
        return callable(value)
