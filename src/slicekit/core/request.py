"""Request boundary: HTTP start line, headers and body stream."""
from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterable, AsyncIterator, Iterable
from urllib.parse import SplitResult, unquote, urlsplit

from slicekit.core.errors import InvalidRequestLineError
from slicekit.core.headers import Header, Headers
from slicekit.core.query import QueryParams


@dataclass(frozen=True)
class RequestLine:
    """Parsed ``<METHOD> <target> <VERSION>`` start line."""

    method: str
    target: str
    version: str

    @classmethod
    def parse(cls, line: str) -> RequestLine:
        parts = line.strip().split(" ")
        if len(parts) != 3 or not all(parts) or not parts[2].startswith("HTTP/"):
            raise InvalidRequestLineError(line)
        return cls(parts[0], parts[1], parts[2])

    @property
    def uri(self) -> SplitResult:
        return urlsplit(self.target)

    @property
    def path(self) -> str:
        """Decoded path of the target."""
        return unquote(self.uri.path)

    @property
    def query(self) -> QueryParams:
        return QueryParams(self.uri.query)

    def __str__(self) -> str:
        return f"{self.method} {self.target} {self.version}"


async def empty_body() -> AsyncIterator[bytes]:
    for chunk in ():
        yield chunk


class Request:
    """Request-like object: start line, headers, body stream."""

    def __init__(
        self,
        line: str,
        headers: Headers | Iterable[Header] = (),
        body: AsyncIterable[bytes] | None = None,
    ) -> None:
        self.line = line
        self.headers = headers if isinstance(headers, Headers) else Headers(headers)
        self.body = body if body is not None else empty_body()
