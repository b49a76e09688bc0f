"""Core enumerations shared by the backends, dispatchers and iterators.

Key Types:
    - ExecutionModel: Blocking vs suspending request execution
    - BackendKind: The interchangeable HTTP transport backends
    - MapSort: Server-side orderings for map listings
    - PageState: Lifecycle states of a paginated iterator
"""

from enum import Enum


class ExecutionModel(str, Enum):
    """How a backend runs its network I/O.

    A client is bound to exactly one execution model, decided by the backend
    it was built with.
    """

    SYNC = "sync"
    ASYNC = "async"


class BackendKind(str, Enum):
    """Available transport backends."""

    AIOHTTP = "aiohttp"
    HTTPX = "httpx"
    REQUESTS = "requests"

    @property
    def execution_model(self) -> ExecutionModel:
        """Execution model implied by the backend."""
        if self == BackendKind.REQUESTS:
            return ExecutionModel.SYNC
        return ExecutionModel.ASYNC


class MapSort(str, Enum):
    """Orderings for the `api/maps/<sort>/<page>` listings."""

    HOT = "hot"
    RATING = "rating"
    LATEST = "latest"
    DOWNLOADS = "downloads"
    PLAYS = "plays"


class PageState(str, Enum):
    """States of a paginated iterator.

    FRESH -> FETCHING -> {YIELDING, EXHAUSTED, FAILED}. YIELDING returns to
    FETCHING once its buffered page is drained. EXHAUSTED and FAILED are
    terminal.
    """

    FRESH = "fresh"
    FETCHING = "fetching"
    YIELDING = "yielding"
    EXHAUSTED = "exhausted"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PageState.EXHAUSTED, PageState.FAILED)
