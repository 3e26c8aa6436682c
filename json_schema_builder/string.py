"""String schema builder."""

from __future__ import annotations

import re
from typing import Self

from .base import BaseSchema
from .registry import ValidatorRegistry


class StringSchema(BaseSchema):
    """Builder for `{"type": "string"}` schemas."""

    def __init__(self, *, registry: ValidatorRegistry | None = None):
        super().__init__("string", registry=registry)

    def format(self, format_name: str) -> Self:
        """Set a semantic format such as "date-time", "email" or "uri"."""
        return self.copy_with({"format": format_name})

    def pattern(self, pattern: str | re.Pattern[str]) -> Self:
        """
        Require the string to match a regular expression.

        Args:
            pattern: Regular expression source or a compiled pattern; only the
                source is kept, flags are dropped

        Returns:
            A new builder
        """
        source = pattern.pattern if isinstance(pattern, re.Pattern) else pattern
        return self.copy_with({"pattern": source})

    def min_length(self, min_length: int) -> Self:
        return self.copy_with({"minLength": min_length})

    def max_length(self, max_length: int) -> Self:
        return self.copy_with({"maxLength": max_length})

    def content_media_type(self, media_type: str) -> Self:
        return self.copy_with({"contentMediaType": media_type})

    def content_encoding(self, encoding: str) -> Self:
        return self.copy_with({"contentEncoding": encoding})
