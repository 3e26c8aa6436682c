"""
Validator registry for predicate-based constraints.

A predicate that cannot be expressed with JSON Schema keywords is stored
here under a generated key; the schema only carries the key inside the
`custom` keyword. The validation engine looks the key up at validate time.
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from .exceptions import RegistryKeyCollisionError

logger = logging.getLogger(__name__)

CUSTOM_KEYWORD = "custom"

# Shared by every registry so keys stay unique for the whole process
_key_counter = itertools.count(1)
_key_lock = threading.Lock()


@dataclass(frozen=True)
class DataContext:
    """Context handed to a predicate together with the data and parent schema."""

    key: str
    args: tuple[Any, ...] = ()


Predicate = Callable[[Any, dict[str, Any], DataContext], bool]


def generate_key(prefix: str = CUSTOM_KEYWORD) -> str:
    """Return a key that has never been returned before in this process."""
    with _key_lock:
        return f"{prefix}_{next(_key_counter)}"


class ValidatorRegistry:
    """Append-only table mapping generated keys to predicates."""

    def __init__(self, name: str = "registry"):
        self.name = name
        self._validators: dict[str, Predicate] = {}
        self._shared: dict[Predicate, str] = {}
        self._lock = threading.Lock()

    def register(self, predicate: Predicate) -> str:
        """
        Store a predicate under a freshly generated key.

        Args:
            predicate: Callable invoked as predicate(data, parent_schema, context)

        Returns:
            The generated key

        Raises:
            RegistryKeyCollisionError: If the key is already taken
        """
        with self._lock:
            return self._store(predicate)

    def register_once(self, predicate: Predicate) -> str:
        """Return the key predicate was first stored under, registering it on first use."""
        with self._lock:
            if predicate not in self._shared:
                self._shared[predicate] = self._store(predicate)
            return self._shared[predicate]

    def _store(self, predicate: Predicate) -> str:
        # Caller holds self._lock
        key = generate_key()
        if key in self._validators:
            raise RegistryKeyCollisionError(f"Validator key {key!r} already registered in {self.name}")
        self._validators[key] = predicate
        logger.debug("Registered validator %s in %s", key, self.name)
        return key

    def get(self, key: str) -> Predicate | None:
        return self._validators.get(key)

    def dispatch(self, key: str, data: Any, parent_schema: dict[str, Any], context: DataContext) -> bool:
        """Run the predicate stored under key. Unknown keys never pass."""
        predicate = self.get(key)
        if predicate is None:
            logger.warning("No validator registered under %s in %s", key, self.name)
            return False
        result = bool(predicate(data, parent_schema, context))
        logger.debug("Validator %s returned %s", key, result)
        return result

    def keys(self) -> list[str]:
        return list(self._validators)

    def __getitem__(self, key: str) -> Predicate:
        return self._validators[key]

    def __contains__(self, key: object) -> bool:
        return key in self._validators

    def __len__(self) -> int:
        return len(self._validators)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._validators))

    def __repr__(self) -> str:
        return f"ValidatorRegistry(name={self.name!r}, size={len(self)})"


# Process-wide table used by the shared factory
default_registry = ValidatorRegistry("default")
