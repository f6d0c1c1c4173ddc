"""
BlobMetadataSlice — serves metadata of stored binaries, never their content.
200 with Content-Disposition and Content-Length when the key exists, 404 otherwise.
"""
from __future__ import annotations

import logging
from typing import AsyncIterable, Callable

from slicekit.core.headers import Headers, content_file_name, content_length
from slicekit.core.request import RequestLine
from slicekit.core.responses import NOT_FOUND, OK, Response, text_response
from slicekit.storage.key import Key, key_from_path
from slicekit.storage.protocol import Storage

logger = logging.getLogger(__name__)


class BlobMetadataSlice:
    """
    Slice by key from storage. transform maps the URI path to a Key
    (default key_from_path); pass your own to change the layout.
    Storage errors propagate to the caller; there is no retry.
    """

    def __init__(
        self,
        storage: Storage,
        transform: Callable[[str], Key] = key_from_path,
    ) -> None:
        self._storage = storage
        self._transform = transform

    async def response(
        self,
        line: str,
        headers: Headers,
        body: AsyncIterable[bytes],
    ) -> Response:
        path = RequestLine.parse(line).path
        key = self._transform(path)
        logger.debug("metadata lookup path=%s key=%s", path, key.string())
        # size is undefined for a missing key, so it is only asked after exists()
        if not await self._storage.exists(key):
            logger.debug("key %s not found", key.string())
            return text_response(NOT_FOUND, f"Key {key.string()} not found")
        size = await self._storage.size(key)
        return Response(
            OK,
            [content_file_name(path), content_length(size)],
            b"",
        )
