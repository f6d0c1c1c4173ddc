"""Slice protocol: one request in, one response out."""
from typing import AsyncIterable, Protocol, runtime_checkable

from slicekit.core.headers import Headers
from slicekit.core.responses import Response


@runtime_checkable
class Slice(Protocol):
    """HTTP handler. Implementations may ignore headers and body."""

    async def response(
        self,
        line: str,
        headers: Headers,
        body: AsyncIterable[bytes],
    ) -> Response:
        ...
