"""FileStorage: one file per key under a root directory."""
from __future__ import annotations

import asyncio
from pathlib import Path

from slicekit.core.errors import InvalidKeyError, ValueNotFoundError
from slicekit.storage.key import Key


class FileStorage:
    """
    File-system storage. Key 'a/b.bin' lives at <root>/a/b.bin.
    Blocking file calls run in a worker thread via asyncio.to_thread.
    Keys resolving outside the root never exist.
    """

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def _path(self, key: Key) -> Path:
        """Resolve key path and ensure it stays under the root."""
        if not key.parts:
            raise InvalidKeyError(key.string(), "the root key holds no value")
        root = self._root.resolve()
        candidate = root.joinpath(*key.parts).resolve()
        try:
            candidate.relative_to(root)
        except ValueError:
            raise InvalidKeyError(key.string(), "resolves outside storage root") from None
        return candidate

    async def exists(self, key: Key) -> bool:
        try:
            path = self._path(key)
        except InvalidKeyError:
            return False
        return await asyncio.to_thread(path.is_file)

    async def size(self, key: Key) -> int:
        path = self._path(key)
        try:
            stat = await asyncio.to_thread(path.stat)
        except FileNotFoundError:
            raise ValueNotFoundError(key.string()) from None
        return stat.st_size

    async def save(self, key: Key, data: bytes) -> None:
        path = self._path(key)
        await asyncio.to_thread(self._write, path, data)

    async def value(self, key: Key) -> bytes:
        path = self._path(key)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            raise ValueNotFoundError(key.string()) from None

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
