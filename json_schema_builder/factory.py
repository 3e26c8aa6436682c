"""
Schema factory: the shared entry point for building schemas.

Metadata set on the factory (title, description, $id, default, $defs, ...)
is carried into whichever concrete builder is picked afterwards:

    S.title("Person").shape({"name": S.string()})
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Any

from .array import ArraySchema
from .base import BaseSchema, SchemaLike
from .config import BuilderConfig
from .function import FunctionSchema
from .numeric import NumericSchema
from .object import ObjectSchema
from .registry import CUSTOM_KEYWORD, ValidatorRegistry
from .string import StringSchema

COERCE_DATE_KEYWORD = "coerceDate"


class SchemaFactory(BaseSchema):
    """Creates typed builders seeded with the metadata set on the factory."""

    def __init__(self, config: BuilderConfig | None = None, *, registry: ValidatorRegistry | None = None):
        """
        Initialize the factory.

        Args:
            config: Factory configuration
            registry: Registry shared by every builder the factory creates
        """
        super().__init__(registry=registry)
        self.config = config if config is not None else BuilderConfig()
        if self.config.schema_uri:
            self._node = {"$schema": self.config.schema_uri}

    def _seed(self, schema: BaseSchema) -> Any:
        return schema.extend(self)

    def _root(self, update: Mapping[str, Any]) -> BaseSchema:
        return super()._root(update).extend(self)

    def any(self) -> BaseSchema:
        """Empty schema, matches anything: `{}`."""
        return self._seed(BaseSchema(registry=self._registry))

    def string(self) -> StringSchema:
        """`{"type": "string"}`"""
        return self._seed(StringSchema(registry=self._registry))

    def date(self) -> BaseSchema:
        """`{"type": "string", "format": "date", "coerceDate": true}`"""
        schema = BaseSchema("string", registry=self._registry).copy_with(
            {"format": "date", COERCE_DATE_KEYWORD: True}
        )
        return self._seed(schema)

    def datetime(self) -> BaseSchema:
        """
        Date-time given either as an ISO 8601 string or a datetime instance.

        The string branch carries format "date-time"; the instance branch is
        a custom predicate registered once per registry, so repeated calls
        build equal documents.
        """
        key = self._registry.register_once(_is_datetime)
        schema = BaseSchema(registry=self._registry).one_of(
            StringSchema(registry=self._registry).format("date-time"),
            {CUSTOM_KEYWORD: [key]},
        ).copy_with({COERCE_DATE_KEYWORD: True, "format": "date-time"})
        return self._seed(schema)

    def number(self) -> NumericSchema:
        """`{"type": "number"}`"""
        return self._seed(NumericSchema("number", registry=self._registry))

    def integer(self) -> NumericSchema:
        """`{"type": "integer"}`"""
        return self._seed(NumericSchema("integer", registry=self._registry))

    def boolean(self) -> BaseSchema:
        """`{"type": "boolean"}`"""
        return self._seed(BaseSchema("boolean", registry=self._registry))

    def null(self) -> BaseSchema:
        """`{"type": "null"}`"""
        return self._seed(BaseSchema("null", registry=self._registry))

    def array(self) -> ArraySchema:
        """`{"type": "array"}`"""
        return self._seed(ArraySchema(registry=self._registry))

    def list(self, items: SchemaLike) -> ArraySchema:
        """`{"type": "array", "items": {...}}`"""
        return self._seed(ArraySchema(registry=self._registry).items(items))

    def object(self) -> ObjectSchema:
        """`{"type": "object"}`"""
        return self._seed(ObjectSchema(registry=self._registry))

    def shape(self, props: Mapping[str, SchemaLike], additional: bool | None = None) -> ObjectSchema:
        """
        Object schema with the given properties.

        Example: `{"type": "object", "additionalProperties": false, "properties": {...}, "required": [...]}`

        Args:
            props: Property name to child schema, in output order
            additional: Value of `additionalProperties`; defaults to
                config.additional_properties (False)

        Returns:
            ObjectSchema
        """
        if additional is None:
            additional = self.config.additional_properties
        schema = self._seed(ObjectSchema(registry=self._registry).additional_properties(additional))
        for name, child in props.items():
            schema = schema.prop(name, child)
        return schema

    def function(self) -> FunctionSchema:
        """`{"type": "function"}`, checked with callable()."""
        return self._seed(FunctionSchema(registry=self._registry))

    def instance_of(self, cls: type | tuple[type, ...]) -> BaseSchema:
        """Schema passing only instances of `cls`, checked through a custom predicate."""

        def check(data: Any, _parent_schema: dict, _context: Any) -> bool:
            return isinstance(data, cls)

        return BaseSchema(registry=self._registry).custom(check)


def _is_datetime(data: Any, _parent_schema: dict, _context: Any) -> bool:
    return isinstance(data, dt.datetime)


S = SchemaFactory()
