"""
Exceptions raised by the schema builder.

Builders themselves never raise for inconsistent keyword combinations;
those are left to the validation engine.
"""

from __future__ import annotations

from typing import Any


class SchemaBuilderError(Exception):
    """Base class for all errors raised by json_schema_builder."""

    pass


class RegistryKeyCollisionError(SchemaBuilderError):
    """Raised when a generated validator key is already registered.

    Keys come from a process-wide counter, so this signals a broken
    contract rather than a recoverable condition.
    """

    pass


class SchemaValidationError(SchemaBuilderError):
    """Raised by SchemaValidator.ensure when data does not match a schema.

    Attributes:
        errors: The jsonschema ValidationError objects that were collected
    """

    def __init__(self, errors: list[Any]):
        self.errors = errors
        super().__init__(format_errors(errors))


class SchemaLoadError(SchemaBuilderError):
    """Raised when a `module:attribute` target cannot be resolved to a schema."""

    pass


def format_errors(errors: list[Any]) -> str:
    """Join validation errors into a single message, one error per line."""
    lines = []
    for error in errors:
        path = "/" + "/".join(str(p) for p in error.absolute_path) if error.absolute_path else ""
        lines.append(f"{path or '/'}: {error.message}")
    return "\n".join(lines)
