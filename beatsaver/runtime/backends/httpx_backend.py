"""httpx transport backend (asynchronous).

Requires the ``httpx`` extra.
"""

from __future__ import annotations

import httpx

from ...config import ClientConfig
from ...core.enums import BackendKind
from ...core.request import Request, Response
from .base import AsyncBackend


def build_async_client(config: ClientConfig, **kwargs) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` honouring the shared transport settings."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.timeout),
        follow_redirects=config.follow_redirects,
        max_redirects=config.max_redirects,
        headers={"User-Agent": config.user_agent},
        **kwargs,
    )


class HttpxBackend(AsyncBackend):
    """Async backend built on an ``httpx.AsyncClient``."""

    kind = BackendKind.HTTPX
    transport_errors = (httpx.HTTPError, httpx.InvalidURL)

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(config)
        if client is not None:
            # redirect ceiling is client-wide in httpx
            client.max_redirects = self.config.max_redirects
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = build_async_client(self.config)
        return self._client

    async def execute(self, request: Request) -> Response:
        response = await self.client.request(
            request.method,
            request.url,
            content=request.body,
            headers=dict(request.headers),
            follow_redirects=self.config.follow_redirects,
            timeout=httpx.Timeout(self.config.timeout),
        )
        return Response(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
