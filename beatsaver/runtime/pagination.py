"""Lazy iteration over paginated endpoints.

Architecture:
    PageIterator (blocking) and AsyncPageIterator (suspending) are explicit
    state machines sharing ``_PageIteratorBase``. The base owns the cursor,
    the buffered page and every state transition; the subclasses only decide
    how the page fetch is awaited. Plain generators are not used because a
    generator that raises is closed for good, while a rate-limited iterator
    must stay resumable.

State machine:
    FRESH --next()--> FETCHING
    FETCHING --non-empty page--> YIELDING --buffer drained--> FETCHING
    FETCHING --empty page / last page drained--> EXHAUSTED (terminal)
    FETCHING --RateLimitError--> FETCHING (error raised, cursor unchanged)
    FETCHING --any other error--> FAILED (error raised once, terminal)

Design Decisions:
    - No eager fetching: a page is requested only when the buffer is empty and
      the caller asks for another item
    - No retries: every error is surfaced to the caller exactly once
    - Cursor moves only after a successful fetch and never backwards; a
      ``nextPage`` that does not move forward ends the iteration

Concurrency:
    An iterator instance must not be advanced by several callers at once.
    AsyncPageIterator raises RuntimeError if a second ``__anext__`` starts
    while a fetch is in flight.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..core.enums import PageState
from ..core.exceptions import RateLimitError
from ..models.page import Page
from .telemetry import log_iterator_exhausted, log_page_fetched

T = TypeVar("T")


@dataclass
class PageCursor:
    """Page position owned by a single iterator."""

    page: int = 0

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page must be non-negative")

    def following(self, fetched: Page) -> int | None:
        """Page to request after ``fetched``, or None if it was the last one.

        Uses the server's ``nextPage`` when given, otherwise the next number.
        """
        if fetched.is_last:
            return None
        candidate = fetched.next_page if fetched.next_page is not None else self.page + 1
        if candidate <= self.page:
            return None
        return candidate


class _PageIteratorBase(Generic[T]):
    def __init__(self, start_page: int = 0) -> None:
        self._cursor = PageCursor(start_page)
        self._buffer: deque[T] = deque()
        self._state = PageState.FRESH
        self._final = False

    @property
    def state(self) -> PageState:
        return self._state

    @property
    def cursor(self) -> int:
        """Page the iterator will request next (or last requested, once terminal)."""
        return self._cursor.page

    def _take(self) -> tuple[bool, T | None]:
        """Advance the state machine without I/O.

        Returns:
            (True, item) if an item is ready, (False, None) if a fetch is needed.

        Raises:
            StopIteration: If the iterator is in a terminal state
        """
        while True:
            if self._state.is_terminal:
                raise StopIteration
            if self._state is PageState.YIELDING:
                if self._buffer:
                    return True, self._buffer.popleft()
                if self._final:
                    self._exhaust("last_page")
                    continue
                self._state = PageState.FETCHING
            if self._state is PageState.FRESH:
                self._state = PageState.FETCHING
            return False, None

    def _accept(self, page: Page[T]) -> None:
        if not page.docs:
            log_page_fetched(page=self._cursor.page, items=0, next_page=None)
            self._exhaust("empty_page")
            return

        following = self._cursor.following(page)
        log_page_fetched(page=self._cursor.page, items=len(page.docs), next_page=following)
        self._buffer.extend(page.docs)
        self._state = PageState.YIELDING
        if following is None:
            self._final = True
        else:
            self._cursor.page = following

    def _reject(self, error: Exception) -> None:
        if isinstance(error, RateLimitError):
            # stays FETCHING on the same page
            return
        self._state = PageState.FAILED

    def _exhaust(self, reason: str) -> None:
        self._state = PageState.EXHAUSTED
        self._buffer.clear()
        log_iterator_exhausted(page=self._cursor.page, reason=reason)


class PageIterator(_PageIteratorBase[T]):
    """Blocking iterator over every entity of a paginated endpoint.

    Example:
        >>> maps = client.maps_latest()
        >>> while True:
        ...     try:
        ...         beatmap = next(maps)
        ...     except RateLimitError as e:
        ...         time.sleep(e.retry_after)
        ...         continue
        ...     except StopIteration:
        ...         break
    """

    def __init__(self, fetch_page: Callable[[int], Page[T]], start_page: int = 0) -> None:
        super().__init__(start_page)
        self._fetch_page = fetch_page

    def __iter__(self) -> PageIterator[T]:
        return self

    def __next__(self) -> T:
        while True:
            ready, item = self._take()
            if ready:
                return item  # type: ignore[return-value]
            try:
                page = self._fetch_page(self._cursor.page)
            except Exception as e:
                self._reject(e)
                raise
            self._accept(page)


class AsyncPageIterator(_PageIteratorBase[T]):
    """Suspending iterator over every entity of a paginated endpoint.

    Use ``async for`` when errors should end the loop, or call
    ``await it.__anext__()`` / ``anext(it)`` directly to resume after a
    RateLimitError.
    """

    def __init__(
        self,
        fetch_page: Callable[[int], Awaitable[Page[T]]],
        start_page: int = 0,
    ) -> None:
        super().__init__(start_page)
        self._fetch_page = fetch_page
        self._in_flight = False

    def __aiter__(self) -> AsyncPageIterator[T]:
        return self

    async def __anext__(self) -> T:
        if self._in_flight:
            raise RuntimeError("AsyncPageIterator is already being advanced by another task")
        self._in_flight = True
        try:
            while True:
                try:
                    ready, item = self._take()
                except StopIteration:
                    raise StopAsyncIteration from None
                if ready:
                    return item  # type: ignore[return-value]
                try:
                    page = await self._fetch_page(self._cursor.page)
                except Exception as e:
                    self._reject(e)
                    raise
                self._accept(page)
        finally:
            self._in_flight = False
