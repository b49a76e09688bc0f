"""Transport backend interfaces.

Architecture:
    A backend performs exactly one HTTP exchange per ``execute`` call and
    returns a Response, or raises one of its own ``transport_errors``. It does
    not interpret statuses and does not retry; that is left to the
    dispatchers. Two abstract bases exist, one per execution model, so a
    backend's I/O style is visible in its type.

Design Decisions:
    - Shared settings: every backend takes its timeout, redirect policy and
      user agent from ClientConfig so call sites are backend-agnostic
    - Native errors declared, not wrapped: ``transport_errors`` lets the
      dispatcher map them to TransportError in a single place
    - Context managers: ensure sessions/connection pools are released
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from ...config import ClientConfig
from ...core.enums import BackendKind, ExecutionModel
from ...core.request import Request, Response


class Backend:
    """Attributes shared by every transport backend."""

    kind: ClassVar[BackendKind]
    execution_model: ClassVar[ExecutionModel]
    transport_errors: ClassVar[tuple[type[BaseException], ...]] = ()

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig(backend=self.kind)

    @property
    def name(self) -> str:
        return self.kind.value

    def default_headers(self) -> dict[str, str]:
        return {"User-Agent": self.config.user_agent}


class AsyncBackend(Backend, ABC):
    """Backend whose network I/O suspends the calling coroutine."""

    execution_model = ExecutionModel.ASYNC

    @abstractmethod
    async def execute(self, request: Request) -> Response:
        """Send ``request`` and return the full response."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying session. Safe to call more than once."""
        pass

    async def __aenter__(self) -> AsyncBackend:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class SyncBackend(Backend, ABC):
    """Backend whose network I/O blocks the calling thread."""

    execution_model = ExecutionModel.SYNC

    @abstractmethod
    def execute(self, request: Request) -> Response:
        """Send ``request`` and return the full response."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying session. Safe to call more than once."""
        pass

    def __enter__(self) -> SyncBackend:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
