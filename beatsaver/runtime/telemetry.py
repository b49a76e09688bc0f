"""Structured logging for request dispatch and pagination.

Events are emitted as short snake_case messages with the details in
``extra``, so log handlers can route on the message and index the fields.
The library never installs handlers itself.
"""

from __future__ import annotations

import logging

from ..core.request import Request, Response
from ..models.rate_limit import RateLimitInfo

logger = logging.getLogger(__name__)


def log_request_completed(
    *,
    request: Request,
    response: Response,
    backend: str,
    latency_ms: float,
) -> None:
    """Log a request that produced a response (any status).

    Args:
        request: Request that was sent
        response: Response returned by the backend
        backend: Backend name
        latency_ms: Time spent inside the backend, in milliseconds
    """
    logger.debug(
        "request_completed",
        extra={
            "method": request.method,
            "url": request.url,
            "status": response.status,
            "backend": backend,
            "latency_ms": latency_ms,
            "bytes": len(response.body),
            "rate_limit_remaining": response.header("Rate-Limit-Remaining"),
        },
    )


def log_request_failed(
    *,
    request: Request,
    backend: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log a transport-level failure (no response was produced)."""
    logger.warning(
        "request_failed",
        extra={
            "method": request.method,
            "url": request.url,
            "backend": backend,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_rate_limited(*, request: Request, info: RateLimitInfo) -> None:
    logger.warning(
        "rate_limited",
        extra={
            "url": request.url,
            "reset_after": info.reset_after,
            "limit": info.limit,
            "remaining": info.remaining,
            "reset_at": info.reset_at.isoformat() if info.reset_at else None,
        },
    )


def log_page_fetched(*, page: int, items: int, next_page: int | None) -> None:
    """Log a page retrieved by a paginated iterator.

    Args:
        page: Cursor position that was fetched
        items: Number of entities on the page
        next_page: Cursor position the iterator will fetch next, if any
    """
    logger.debug(
        "page_fetched",
        extra={"page": page, "items": items, "next_page": next_page},
    )


def log_iterator_exhausted(*, page: int, reason: str) -> None:
    logger.debug("iterator_exhausted", extra={"page": page, "reason": reason})
