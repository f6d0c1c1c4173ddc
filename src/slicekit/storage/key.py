"""Key — storage address; equality by parts."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Key:
    """Storage key: '/'-separated parts, empty parts dropped."""

    parts: tuple[str, ...] = ()

    @classmethod
    def of(cls, *items: str) -> Key:
        parts: list[str] = []
        for item in items:
            parts.extend(p for p in item.split("/") if p)
        return cls(tuple(parts))

    def string(self) -> str:
        return "/".join(self.parts)

    def __str__(self) -> str:
        return self.string()


def key_from_path(path: str) -> Key:
    """Default path -> key transform: '/a/b.bin' -> Key('a/b.bin')."""
    return Key.of(path.lstrip("/"))
