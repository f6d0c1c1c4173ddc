"""ASGI adapter: serve a Slice through Starlette."""
from __future__ import annotations

from typing import AsyncIterator, Callable
from urllib.parse import quote

from starlette.applications import Starlette
from starlette.requests import Request as StarletteRequest
from starlette.responses import Response as StarletteResponse
from starlette.routing import Route

from slicekit.core.protocol import Slice
from slicekit.core.request import Request
from slicekit.slices.metadata import BlobMetadataSlice
from slicekit.storage.key import Key, key_from_path
from slicekit.storage.protocol import Storage


def request_line(scope: dict) -> str:
    """Rebuild '<METHOD> <raw path>[?query] HTTP/<version>' from an ASGI scope."""
    raw_path = scope.get("raw_path")
    # some servers and test clients leave the query on raw_path
    target = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else quote(scope["path"])
    query = scope.get("query_string", b"")
    if query:
        target = f"{target}?{query.decode('latin-1')}"
    return f"{scope['method']} {target} HTTP/{scope.get('http_version', '1.1')}"


class SliceEndpoint:
    """Starlette endpoint forwarding start line, headers and body stream to a slice."""

    def __init__(self, slice: Slice) -> None:
        self._slice = slice

    async def handle(self, request: StarletteRequest) -> StarletteResponse:
        req = Request(
            request_line(request.scope),
            request.headers.items(),
            self._body(request),
        )
        rs = await self._slice.response(req.line, req.headers, req.body)
        response = StarletteResponse(content=rs.body, status_code=rs.status_code)
        # keep the slice's headers as-is; Starlette must not recompute Content-Length
        response.raw_headers = [
            (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in rs.headers
        ]
        return response

    @staticmethod
    async def _body(request: StarletteRequest) -> AsyncIterator[bytes]:
        async for chunk in request.stream():
            if chunk:
                yield chunk


def create_app(
    storage: Storage,
    transform: Callable[[str], Key] | None = None,
    *,
    debug: bool = False,
) -> Starlette:
    """Starlette app answering HEAD on any path with blob metadata from storage."""
    metadata = BlobMetadataSlice(storage, transform or key_from_path)
    routes = [
        Route("/{path:path}", SliceEndpoint(metadata).handle, methods=["HEAD"]),
    ]
    return Starlette(debug=debug, routes=routes)
