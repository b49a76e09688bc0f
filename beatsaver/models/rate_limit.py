"""Rate limit information derived from a throttled response."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RateLimitInfo:
    """Throttling details of a single response.

    Attributes:
        reset_after: Seconds to wait before resubmitting (never negative)
        limit: Request ceiling of the current window, if reported
        remaining: Requests left in the current window, if reported
        reset_at: Absolute UTC time the window resets, if reported
    """

    reset_after: float
    limit: int | None = None
    remaining: int | None = None
    reset_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.reset_after < 0:
            object.__setattr__(self, "reset_after", 0.0)

    def __str__(self) -> str:
        return f"rate limited, retry in {self.reset_after:g}s"
