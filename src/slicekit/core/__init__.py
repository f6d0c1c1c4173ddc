from slicekit.core.app import SliceEndpoint, create_app
from slicekit.core.config import Config, Settings, load_config_from_env
from slicekit.core.errors import (
    ConfigError,
    InvalidKeyError,
    InvalidRequestLineError,
    QueryDecodeError,
    SlicekitError,
    ValueNotFoundError,
)
from slicekit.core.headers import Headers
from slicekit.core.protocol import Slice
from slicekit.core.query import QueryParams
from slicekit.core.request import Request, RequestLine
from slicekit.core.responses import Response

__all__ = [
    "Config",
    "ConfigError",
    "InvalidKeyError",
    "Headers",
    "InvalidRequestLineError",
    "QueryDecodeError",
    "QueryParams",
    "Request",
    "RequestLine",
    "Response",
    "Settings",
    "Slice",
    "SliceEndpoint",
    "SlicekitError",
    "ValueNotFoundError",
    "create_app",
    "load_config_from_env",
]
