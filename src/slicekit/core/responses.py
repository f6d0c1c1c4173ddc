"""Minimal response type for slices (no Starlette)."""
from __future__ import annotations

from typing import Iterable

from slicekit.core.headers import Header, Headers, content_length

OK = 200
NOT_FOUND = 404


class Response:
    """Response with .status_code, .headers and .body (bytes)."""

    def __init__(
        self,
        status_code: int = OK,
        headers: Headers | Iterable[Header] = (),
        body: bytes | str = b"",
    ) -> None:
        self.status_code = status_code
        self.headers = headers if isinstance(headers, Headers) else Headers(headers)
        self.body = body if isinstance(body, bytes) else body.encode("utf-8")

    def header(self, name: str) -> str | None:
        return self.headers.get(name)

    def text(self) -> str:
        return self.body.decode("utf-8")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Response):
            return NotImplemented
        return (
            self.status_code == other.status_code
            and self.headers == other.headers
            and self.body == other.body
        )

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code}, headers={self.headers!r}, body={self.body!r})"


def text_response(status_code: int, text: str) -> Response:
    """UTF-8 text response with Content-Type and Content-Length set."""
    body = text.encode("utf-8")
    return Response(
        status_code,
        [("Content-Type", "text/plain; charset=utf-8"), content_length(len(body))],
        body,
    )
