"""Request and response values exchanged with transport backends.

Architecture:
    Backends only ever see a Request and only ever hand back a Response, so
    endpoint bindings, the rate-limit interpreter and the paginated iterators
    stay independent of the HTTP library in use.

Design Decisions:
    - Frozen dataclasses: a Request is immutable once built, a Response is
      produced once per request and never reused
    - Query strings are encoded into the URL when the Request is built, so
      every backend sends byte-identical URLs
    - Response headers are stored with lower-cased names for
      case-insensitive lookup
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlencode


@dataclass(frozen=True)
class Request:
    """An HTTP request, immutable once built."""

    method: str
    url: str
    body: bytes | None = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def get(
        cls,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Request:
        """Build a GET request, encoding ``params`` into the query string.

        Example:
            >>> Request.get("https://beatsaver.com/api/search/text/0", {"q": "a b"}).url
            'https://beatsaver.com/api/search/text/0?q=a+b'
        """
        if params:
            separator = "&" if "?" in url else "?"
            url = f"{url}{separator}{urlencode(params)}"
        return cls(method="GET", url=url, headers=headers or {})


@dataclass(frozen=True)
class Response:
    """An HTTP response as returned by a backend."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        normalized = {str(k).lower(): str(v) for k, v in self.headers.items()}
        object.__setattr__(self, "headers", MappingProxyType(normalized))

    @property
    def ok(self) -> bool:
        return self.status < 400

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding)

    def json(self) -> Any:
        return json.loads(self.body)
