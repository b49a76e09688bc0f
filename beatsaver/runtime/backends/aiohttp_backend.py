"""aiohttp transport backend (asynchronous, default)."""

from __future__ import annotations

import asyncio

import aiohttp

from ...config import ClientConfig
from ...core.enums import BackendKind
from ...core.request import Request, Response
from .base import AsyncBackend


class AiohttpBackend(AsyncBackend):
    """Async backend built on an ``aiohttp.ClientSession``."""

    kind = BackendKind.AIOHTTP
    transport_errors = (aiohttp.ClientError, asyncio.TimeoutError)

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        super().__init__(config)
        self.timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        self._session = session

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=self.default_headers(),
            )
        return self._session

    async def execute(self, request: Request) -> Response:
        async with self.session.request(
            request.method,
            request.url,
            data=request.body,
            headers=dict(request.headers),
            allow_redirects=self.config.follow_redirects,
            max_redirects=self.config.max_redirects,
            timeout=self.timeout,
        ) as response:
            body = await response.read()
            return Response(
                status=response.status,
                headers=dict(response.headers),
                body=body,
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()
