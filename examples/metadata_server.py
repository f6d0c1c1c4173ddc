"""
Blob metadata over HTTP with an in-memory storage.
To run: uvicorn metadata_server:app --reload
Then: curl -I http://localhost:8000/docs/readme.txt
"""
from slicekit import InMemoryStorage, Key, create_app

storage = InMemoryStorage(
    {
        Key.of("docs/readme.txt"): b"slicekit serves metadata, not content\n",
        Key.of("images/logo.png"): b"\x89PNG\r\n\x1a\n" + b"\x00" * 120,
    }
)

app = create_app(storage)
