"""
Validation engine adapter.

Wraps jsonschema's Draft 7 validator with the extensions the builders emit:

- `custom`: `[key, *args]`, dispatched to the predicate stored in a
  ValidatorRegistry. Unknown keys fail.
- `coerceDate`: the value must be a date/datetime or an ISO 8601 string.
- the "function" type tag, checked with callable().
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from jsonschema import Draft7Validator, FormatChecker, validators
from jsonschema.exceptions import ValidationError

from .base import BaseSchema, node_of
from .config import EngineConfig
from .exceptions import SchemaValidationError
from .factory import COERCE_DATE_KEYWORD
from .registry import CUSTOM_KEYWORD, DataContext, ValidatorRegistry, default_registry

logger = logging.getLogger(__name__)


def _is_function(_checker: Any, instance: Any) -> bool:
    return callable(instance)


def _coerce_date(_validator: Any, enabled: Any, instance: Any, _schema: dict) -> Iterator[ValidationError]:
    if not enabled or isinstance(instance, (dt.date, dt.datetime)):
        return
    if isinstance(instance, str):
        try:
            dt.datetime.fromisoformat(instance)
            return
        except ValueError:
            pass
    yield ValidationError(f"{instance!r} is not a date")


class SchemaValidator:
    """Validates data against built schemas, with custom predicates resolved from a registry."""

    def __init__(self, registry: ValidatorRegistry | None = None, config: EngineConfig | None = None):
        """
        Initialize the validator.

        Args:
            registry: Registry the `custom` keyword is resolved against; must be
                the one the schemas were built with
            config: Engine configuration
        """
        self.registry = registry if registry is not None else default_registry
        self.config = config if config is not None else EngineConfig()
        self.format_checker = FormatChecker() if self.config.format_checking else None
        self.validator_class = self._create_validator_class()

    def _create_validator_class(self) -> type:
        registry = self.registry

        def custom(_validator: Any, value: Any, instance: Any, schema: dict) -> Iterator[ValidationError]:
            if not isinstance(value, list) or not value:
                yield ValidationError(f"{CUSTOM_KEYWORD} must be a non-empty [key, ...args] list, got {value!r}")
                return
            key, *args = value
            if not isinstance(key, str):
                yield ValidationError(f"{CUSTOM_KEYWORD} key must be a string, got {key!r}")
                return
            context = DataContext(key=key, args=tuple(args))
            if not registry.dispatch(key, instance, schema, context):
                yield ValidationError(f"{instance!r} is not valid under custom validator {key!r}")

        type_checker = Draft7Validator.TYPE_CHECKER.redefine("function", _is_function)
        return validators.extend(
            Draft7Validator,
            {CUSTOM_KEYWORD: custom, COERCE_DATE_KEYWORD: _coerce_date},
            type_checker=type_checker,
        )

    def iter_errors(self, schema: BaseSchema | Mapping[str, Any], data: Any) -> Iterator[ValidationError]:
        validator = self.validator_class(node_of(schema), format_checker=self.format_checker)
        return validator.iter_errors(data)

    def validate(self, schema: BaseSchema | Mapping[str, Any], data: Any) -> tuple[bool, list[ValidationError]]:
        """
        Validate data against a schema.

        Args:
            schema: Builder or raw schema document
            data: Data to validate

        Returns:
            (is_valid, errors)
        """
        errors = list(self.iter_errors(schema, data))
        if errors:
            logger.debug("Validation failed with %d error(s)", len(errors))
        return not errors, errors

    def is_valid(self, schema: BaseSchema | Mapping[str, Any], data: Any) -> bool:
        return self.validate(schema, data)[0]

    def ensure(self, schema: BaseSchema | Mapping[str, Any], data: Any) -> Any:
        """Return data unchanged, or raise SchemaValidationError listing every error."""
        valid, errors = self.validate(schema, data)
        if not valid:
            raise SchemaValidationError(errors)
        return data
