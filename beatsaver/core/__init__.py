"""Core components."""

from .enums import BackendKind, ExecutionModel, MapSort, PageState
from .exceptions import (
    ApiError,
    ArgumentError,
    BeatSaverError,
    ConfigurationError,
    DeserializationError,
    MapIdError,
    NotFoundError,
    RateLimitError,
    TransportError,
)
from .request import Request, Response

__all__ = [
    "BackendKind",
    "ExecutionModel",
    "MapSort",
    "PageState",
    "Request",
    "Response",
    "BeatSaverError",
    "ApiError",
    "TransportError",
    "RateLimitError",
    "DeserializationError",
    "NotFoundError",
    "ArgumentError",
    "MapIdError",
    "ConfigurationError",
]
