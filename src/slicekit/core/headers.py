"""Header pairs and the headers slices attach to responses."""
from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable, Iterator
from urllib.parse import quote

Header = tuple[str, str]


class Headers:
    """Ordered (name, value) pairs; lookup by name is case-insensitive."""

    def __init__(self, items: Iterable[Header] = ()) -> None:
        self._items: list[Header] = [(str(k), str(v)) for k, v in items]

    def get(self, name: str, default: str | None = None) -> str | None:
        lowered = name.lower()
        for key, value in self._items:
            if key.lower() == lowered:
                return value
        return default

    def items(self) -> list[Header]:
        return list(self._items)

    def __iter__(self) -> Iterator[Header]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Headers({self._items!r})"


def content_length(size: int) -> Header:
    return ("Content-Length", str(size))


def _ascii_file_name(name: str) -> str:
    """Printable ASCII only; quotes, backslashes and everything else become '_'."""
    return "".join(c if " " <= c <= "~" and c not in '"\\' else "_" for c in name)


def content_file_name(path: str) -> Header:
    """
    Content-Disposition naming the last segment of a URI path (RFC 6266).
    Names that are not plain ASCII also get filename*=UTF-8''<percent-encoded>.
    """
    name = PurePosixPath(path).name
    fallback = _ascii_file_name(name)
    value = f'attachment; filename="{fallback}"'
    if fallback != name:
        value = f"{value}; filename*=UTF-8''{quote(name, safe='')}"
    return ("Content-Disposition", value)
