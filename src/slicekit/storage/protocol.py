"""Storage protocols: async key/value access. Backend — user's choice."""
from typing import Protocol, runtime_checkable

from slicekit.storage.key import Key


@runtime_checkable
class Storage(Protocol):
    """Read-only async storage; all a metadata slice needs."""

    async def exists(self, key: Key) -> bool:
        ...

    async def size(self, key: Key) -> int:
        """Size in bytes. Defined only when exists(key) is true."""
        ...


@runtime_checkable
class WritableStorage(Storage, Protocol):
    """Storage that can also be filled and read back."""

    async def save(self, key: Key, data: bytes) -> None:
        ...

    async def value(self, key: Key) -> bytes:
        ...
