"""Rate limit detection for API responses.

Architecture:
    The interpreter is a pure function of a Response (plus a clock), so it
    behaves identically whichever backend produced the response and never
    suspends.

Reset hint precedence:
    1. ``Retry-After`` header (delta seconds or HTTP date)
    2. ``Rate-Limit-Reset`` header (epoch seconds)
    3. JSON body ``{"reset": <epoch ms>, "resetAfter": <ms>}`` as sent by BeatSaver
    4. The configured default (conservative, 60 seconds unless overridden)

Malformed hints are skipped in favour of the next source.
"""

from __future__ import annotations

import json
import math
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

from ..config import DEFAULT_RESET_AFTER
from ..core.request import Response
from ..models.rate_limit import RateLimitInfo

RETRY_AFTER_HEADER = "Retry-After"
RESET_HEADER = "Rate-Limit-Reset"
LIMIT_HEADER = "Rate-Limit-Total"
REMAINING_HEADER = "Rate-Limit-Remaining"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _parse_float(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class RateLimitInterpreter:
    """Maps throttled responses to RateLimitInfo."""

    def __init__(
        self,
        default_reset_after: float = DEFAULT_RESET_AFTER,
        throttle_statuses: Iterable[int] = (429,),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the interpreter.

        Args:
            default_reset_after: Seconds to wait when a throttled response
                carries no usable reset hint
            throttle_statuses: Status codes treated as throttling
            clock: Returns the current UTC time (injectable for tests)
        """
        if default_reset_after < 0:
            raise ValueError("default_reset_after must be non-negative")
        self.default_reset_after = float(default_reset_after)
        self.throttle_statuses = frozenset(throttle_statuses)
        self._clock = clock

    def is_throttled(self, response: Response) -> bool:
        return response.status in self.throttle_statuses

    def interpret(self, response: Response) -> RateLimitInfo | None:
        """Return rate limit details if ``response`` signals throttling."""
        if not self.is_throttled(response):
            return None

        now = self._clock()
        reset_after, reset_at = self._reset_hint(response, now)
        return RateLimitInfo(
            reset_after=reset_after,
            limit=_parse_int(response.header(LIMIT_HEADER)),
            remaining=_parse_int(response.header(REMAINING_HEADER)),
            reset_at=reset_at,
        )

    def _reset_hint(self, response: Response, now: datetime) -> tuple[float, datetime | None]:
        for source in (self._from_retry_after, self._from_reset_header, self._from_body):
            hint = source(response, now)
            if hint is not None:
                return hint
        return self.default_reset_after, None

    def _from_retry_after(
        self, response: Response, now: datetime
    ) -> tuple[float, datetime | None] | None:
        raw = response.header(RETRY_AFTER_HEADER)
        if not raw:
            return None
        seconds = _parse_float(raw.strip())
        if seconds is not None:
            return max(seconds, 0.0), None
        try:
            reset_at = parsedate_to_datetime(raw)
        except (TypeError, ValueError):
            return None
        if reset_at.tzinfo is None:
            reset_at = reset_at.replace(tzinfo=UTC)
        return max((reset_at - now).total_seconds(), 0.0), reset_at

    def _from_reset_header(
        self, response: Response, now: datetime
    ) -> tuple[float, datetime | None] | None:
        epoch = _parse_float(response.header(RESET_HEADER))
        if epoch is None:
            return None
        try:
            reset_at = datetime.fromtimestamp(epoch, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
        return max((reset_at - now).total_seconds(), 0.0), reset_at

    def _from_body(
        self, response: Response, now: datetime
    ) -> tuple[float, datetime | None] | None:
        if not response.body:
            return None
        try:
            payload = json.loads(response.body)
        except (UnicodeDecodeError, ValueError):
            return None
        if not isinstance(payload, dict):
            return None

        reset_at = None
        reset_ms = _parse_float(payload.get("reset"))
        if reset_ms is not None:
            try:
                reset_at = datetime.fromtimestamp(reset_ms / 1000, tz=UTC)
            except (OverflowError, OSError, ValueError):
                reset_at = None

        reset_after_ms = _parse_float(payload.get("resetAfter"))
        if reset_after_ms is not None:
            return max(reset_after_ms / 1000, 0.0), reset_at
        if reset_at is not None:
            return max((reset_at - now).total_seconds(), 0.0), reset_at
        return None
