"""Dispatch adapters unifying blocking and suspending backends.

Architecture:
    ``SyncDispatcher.send`` and ``AsyncDispatcher.send`` share one contract:
    ``send(Request) -> Response``, raising only library errors. Everything
    after the backend call (status interpretation, rate-limit detection,
    decoding) lives in ``_Dispatcher`` and never suspends, so both execution
    models produce identical outcomes for identical responses.

Outcome mapping (exactly one per request):
    - backend ``transport_errors`` / timeouts -> TransportError
    - throttling status                     -> RateLimitError
    - 404                                   -> NotFoundError
    - any other status >= 400               -> ApiError
    - otherwise                             -> Response
"""

from __future__ import annotations

import asyncio
from functools import lru_cache
from time import perf_counter
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..core.enums import ExecutionModel
from ..core.exceptions import (
    ApiError,
    ConfigurationError,
    DeserializationError,
    NotFoundError,
    RateLimitError,
    TransportError,
)
from ..core.request import Request, Response
from .backends.base import AsyncBackend, Backend, SyncBackend
from .rate_limit import RateLimitInterpreter
from .telemetry import log_rate_limited, log_request_completed, log_request_failed

T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def decode(response: Response, model: type[T]) -> T:
    """Decode a JSON response body into ``model``.

    Raises:
        DeserializationError: If the body is not valid JSON for ``model``
    """
    try:
        return _adapter(model).validate_json(response.body)
    except (ValidationError, UnicodeDecodeError, ValueError) as e:
        raise DeserializationError(
            f"Could not decode response as {getattr(model, '__name__', model)}: {e}",
            status_code=response.status,
        ) from e


class _Dispatcher:
    """Backend-independent part of request dispatch."""

    execution_model: ExecutionModel

    def __init__(
        self,
        backend: Backend,
        interpreter: RateLimitInterpreter | None = None,
    ) -> None:
        if backend.execution_model != self.execution_model:
            raise ConfigurationError(
                f"{type(self).__name__} needs a {self.execution_model.value} backend, "
                f"got '{backend.name}' ({backend.execution_model.value})"
            )
        self._backend = backend
        self._interpreter = interpreter or RateLimitInterpreter(
            default_reset_after=backend.config.default_reset_after,
            throttle_statuses=backend.config.throttle_statuses,
        )

    @property
    def backend(self) -> Backend:
        return self._backend

    @property
    def interpreter(self) -> RateLimitInterpreter:
        return self._interpreter

    def _transport_failure(self, request: Request, error: BaseException) -> TransportError:
        message = str(error) or type(error).__name__
        log_request_failed(
            request=request,
            backend=self._backend.name,
            error_type=type(error).__name__,
            error_message=message,
        )
        return TransportError(
            f"{request.method} {request.url} failed: {message}",
            request=request,
        )

    def _resolve(self, request: Request, response: Response, started: float) -> Response:
        log_request_completed(
            request=request,
            response=response,
            backend=self._backend.name,
            latency_ms=(perf_counter() - started) * 1000.0,
        )

        info = self._interpreter.interpret(response)
        if info is not None:
            log_rate_limited(request=request, info=info)
            raise RateLimitError(
                f"API rate limit hit (retry in {info.reset_after:g} s)",
                info=info,
                request=request,
                status_code=response.status,
            )
        if response.status == 404:
            raise NotFoundError(f"Not found: {request.url}", request=request)
        if not response.ok:
            raise ApiError(
                f"{request.method} {request.url} returned HTTP {response.status}",
                status_code=response.status,
                request=request,
            )
        return response


class SyncDispatcher(_Dispatcher):
    """Blocking dispatch: occupies the calling thread for the whole exchange."""

    execution_model = ExecutionModel.SYNC
    _backend: SyncBackend

    def send(self, request: Request) -> Response:
        started = perf_counter()
        try:
            response = self._backend.execute(request)
        except self._backend.transport_errors as e:
            raise self._transport_failure(request, e) from e
        return self._resolve(request, response, started)

    def send_model(self, request: Request, model: type[T]) -> T:
        return decode(self.send(request), model)

    def send_bytes(self, request: Request) -> bytes:
        return self.send(request).body

    def close(self) -> None:
        self._backend.close()


class AsyncDispatcher(_Dispatcher):
    """Suspending dispatch: yields to the event loop only inside the backend call."""

    execution_model = ExecutionModel.ASYNC
    _backend: AsyncBackend

    async def send(self, request: Request) -> Response:
        started = perf_counter()
        try:
            response = await self._backend.execute(request)
        except (*self._backend.transport_errors, asyncio.TimeoutError) as e:
            raise self._transport_failure(request, e) from e
        return self._resolve(request, response, started)

    async def send_model(self, request: Request, model: type[T]) -> T:
        return decode(await self.send(request), model)

    async def send_bytes(self, request: Request) -> bytes:
        return (await self.send(request)).body

    async def close(self) -> None:
        await self._backend.close()
