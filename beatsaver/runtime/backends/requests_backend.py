"""requests transport backend (synchronous).

Requires the ``requests`` extra.
"""

from __future__ import annotations

import requests

from ...config import ClientConfig
from ...core.enums import BackendKind
from ...core.request import Request, Response
from .base import SyncBackend


class RequestsBackend(SyncBackend):
    """Blocking backend built on a ``requests.Session``."""

    kind = BackendKind.REQUESTS
    transport_errors = (requests.RequestException,)

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(config)
        if session is not None:
            session.max_redirects = self.config.max_redirects
        self._session = session
        self._closed = False

    @property
    def session(self) -> requests.Session:
        if self._session is None or self._closed:
            self._session = requests.Session()
            self._session.headers.update(self.default_headers())
            self._session.max_redirects = self.config.max_redirects
            self._closed = False
        return self._session

    def execute(self, request: Request) -> Response:
        response = self.session.request(
            request.method,
            request.url,
            data=request.body,
            headers=dict(request.headers),
            timeout=self.config.timeout,
            allow_redirects=self.config.follow_redirects,
        )
        return Response(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        if self._session is not None and not self._closed:
            self._session.close()
            self._closed = True
