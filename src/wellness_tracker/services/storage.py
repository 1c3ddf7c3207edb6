"""Key-value storage abstractions."""

from dataclasses import dataclass
from typing import Protocol


class KeyValueStorage(Protocol):
    """Persistence interface for string values under string keys."""

    async def get_item(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    async def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one. Raises on failure."""


@dataclass
class InMemoryKeyValueStorage(KeyValueStorage):
    """Dict-backed storage that lives as long as the process."""

    _items: dict[str, str]

    def __init__(self) -> None:
        self._items = {}

    async def get_item(self, key: str) -> str | None:
        """Return a stored value if present."""
        return self._items.get(key)

    async def set_item(self, key: str, value: str) -> None:
        """Store a value."""
        self._items[key] = value
