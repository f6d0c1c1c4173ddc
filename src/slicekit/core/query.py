"""
URI query parameters (RFC 3986, section 3.4).

The raw query is kept as-is and re-parsed on every lookup. Splitting on
``&`` happens before decoding, so an encoded ``%26`` stays inside its value.
"""
from __future__ import annotations

import re
from typing import Iterator
from urllib.parse import unquote, urlsplit

from slicekit.core.errors import QueryDecodeError

# '%' not followed by two hex digits
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _decode(encoded: str) -> str:
    """Percent-decode one value as UTF-8. '+' is left alone."""
    if _BAD_ESCAPE.search(encoded):
        raise QueryDecodeError(encoded)
    try:
        return unquote(encoded, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as err:
        raise QueryDecodeError(encoded) from err


class QueryParams:
    """
    Query parameters read on demand from a raw query string.
    value(name) -> first match or None; values(name) -> every match, in order.
    """

    __slots__ = ("_query",)

    def __init__(self, query: str | None) -> None:
        self._query = query

    @classmethod
    def from_uri(cls, uri: str) -> QueryParams:
        """Params over the raw (still encoded) query of a full URI."""
        return cls(urlsplit(uri).query)

    @property
    def query(self) -> str | None:
        return self._query

    def _matches(self, name: str) -> Iterator[str]:
        if not self._query:
            return
        prefix = f"{name}="
        for token in self._query.split("&"):
            if token and token.startswith(prefix):
                yield _decode(token[len(prefix):])

    def value(self, name: str) -> str | None:
        """
        First value for name, decoded. None if the query is absent or has no
        ``name=`` token; ``""`` for an explicit empty value (``name=``).
        """
        return next(self._matches(name), None)

    def values(self, name: str) -> list[str]:
        """All values for name in query order, decoded. Empty list if none."""
        return list(self._matches(name))

    def __repr__(self) -> str:
        return f"QueryParams({self._query!r})"
