"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.rate_limit import RateLimitInfo
    from .request import Request


class BeatSaverError(Exception):
    """Base exception for all library errors."""

    pass


class ApiError(BeatSaverError):
    """A request to the BeatSaver API did not produce a usable response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        request: Request | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.request = request


class TransportError(ApiError):
    """Connection, DNS or timeout failure reported by the backend.

    The backend's own exception is kept as ``__cause__``.
    """

    pass


class RateLimitError(ApiError):
    """API rate limit hit.

    Recoverable: wait ``retry_after`` seconds and resubmit the same request.
    """

    def __init__(
        self,
        message: str,
        info: RateLimitInfo,
        request: Request | None = None,
        status_code: int = 429,
    ) -> None:
        super().__init__(message, status_code=status_code, request=request)
        self.info = info

    @property
    def retry_after(self) -> float:
        """Seconds to wait before resubmitting."""
        return self.info.reset_after


class DeserializationError(ApiError):
    """Response body could not be decoded into the expected model."""

    pass


class NotFoundError(ApiError):
    """The requested resource does not exist."""

    def __init__(self, message: str, request: Request | None = None) -> None:
        super().__init__(message, status_code=404, request=request)


class ArgumentError(BeatSaverError, ValueError):
    """Invalid argument supplied by the caller."""

    pass


class MapIdError(ArgumentError):
    """Map key or hash could not be parsed."""

    pass


class ConfigurationError(BeatSaverError):
    """Invalid client configuration or unavailable backend."""

    pass
