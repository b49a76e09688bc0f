"""beatsaver - client library for the BeatSaver map-sharing API."""

from .api import BeatSaverAsync, BeatSaverSync
from .client import create_client
from .config import BEATSAVER_URL, ClientConfig, __version__
from .core import (
    ApiError,
    ArgumentError,
    BackendKind,
    BeatSaverError,
    ConfigurationError,
    DeserializationError,
    ExecutionModel,
    MapIdError,
    MapSort,
    NotFoundError,
    PageState,
    RateLimitError,
    Request,
    Response,
    TransportError,
)
from .models import (
    BeatSaverUser,
    Map,
    MapId,
    MapMetadata,
    MapStats,
    Page,
    RateLimitInfo,
)
from .runtime import (
    AsyncPageIterator,
    PageIterator,
    RateLimitInterpreter,
    available_backends,
)

__all__ = [
    "__version__",
    "BEATSAVER_URL",
    # Clients
    "BeatSaverAsync",
    "BeatSaverSync",
    "create_client",
    "ClientConfig",
    # Enums
    "BackendKind",
    "ExecutionModel",
    "MapSort",
    "PageState",
    # Models
    "BeatSaverUser",
    "Map",
    "MapId",
    "MapMetadata",
    "MapStats",
    "Page",
    "RateLimitInfo",
    "Request",
    "Response",
    # Runtime
    "AsyncPageIterator",
    "PageIterator",
    "RateLimitInterpreter",
    "available_backends",
    # Exceptions
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
