from slicekit.storage.file import FileStorage
from slicekit.storage.key import Key, key_from_path
from slicekit.storage.memory import InMemoryStorage
from slicekit.storage.protocol import Storage, WritableStorage

__all__ = [
    "FileStorage",
    "InMemoryStorage",
    "Key",
    "Storage",
    "WritableStorage",
    "key_from_path",
]
