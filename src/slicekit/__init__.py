"""
slicekit — small async HTTP building blocks over key/value storage.
Query params on demand, and a slice answering with blob metadata only.
"""
from slicekit.core import (
    Config,
    QueryParams,
    Request,
    RequestLine,
    Response,
    Slice,
    create_app,
    load_config_from_env,
)
from slicekit.slices import BlobMetadataSlice
from slicekit.storage import FileStorage, InMemoryStorage, Key, Storage, key_from_path

__all__ = [
    "BlobMetadataSlice",
    "Config",
    "FileStorage",
    "InMemoryStorage",
    "Key",
    "QueryParams",
    "Request",
    "RequestLine",
    "Response",
    "Slice",
    "Storage",
    "create_app",
    "key_from_path",
    "load_config_from_env",
]
