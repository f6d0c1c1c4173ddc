"""Typed errors for slicekit."""


class SlicekitError(Exception):
    """Base exception for all slicekit errors."""


class QueryDecodeError(SlicekitError):
    """Raised when a query value is not valid percent-encoded UTF-8."""

    def __init__(self, encoded: str) -> None:
        self.encoded = encoded
        super().__init__(f"Malformed percent-encoding in query value: {encoded!r}")


class InvalidRequestLineError(SlicekitError):
    """Raised when an HTTP start line cannot be split into method, target and version."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Invalid request line: {line!r}")


class ValueNotFoundError(SlicekitError):
    """Raised when storage holds no value at a key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No value for key: {key}")


class InvalidKeyError(SlicekitError):
    """Raised when a key cannot address a value in a storage backend."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid key {key!r}: {reason}")


class ConfigError(SlicekitError):
    """Raised for invalid configuration values."""
