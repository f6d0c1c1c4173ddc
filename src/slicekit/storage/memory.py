"""InMemoryStorage: dict-based storage for prototypes and tests."""
from __future__ import annotations

from typing import Mapping

from slicekit.core.errors import ValueNotFoundError
from slicekit.storage.key import Key


class InMemoryStorage:
    """In-memory storage. Values are copied in on save."""

    def __init__(self, data: Mapping[Key, bytes] | None = None) -> None:
        self._data: dict[Key, bytes] = dict(data or {})

    async def exists(self, key: Key) -> bool:
        return key in self._data

    async def size(self, key: Key) -> int:
        return len(self._get(key))

    async def save(self, key: Key, data: bytes) -> None:
        self._data[key] = bytes(data)

    async def value(self, key: Key) -> bytes:
        return self._get(key)

    def _get(self, key: Key) -> bytes:
        try:
            return self._data[key]
        except KeyError:
            raise ValueNotFoundError(key.string()) from None
