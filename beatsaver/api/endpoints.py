"""BeatSaver endpoint definitions.

Each endpoint is a small spec that turns call parameters into a Request.
The synchronous and asynchronous clients both build their requests here, so
an endpoint binding is written once regardless of execution model.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..config import ClientConfig
from ..core.enums import MapSort
from ..core.exceptions import ArgumentError
from ..core.request import Request
from ..models.map import Map
from ..models.map_id import MapId
from ..models.user import BeatSaverUser

USER_ID_LENGTH = 24
_HEX_DIGITS = frozenset(string.hexdigits)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EndpointSpec:
    id: str
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None

    def request(self, config: ClientConfig, **params: Any) -> Request:
        """Build the GET request for this endpoint."""
        query = self.build_query(params) if self.build_query else None
        request = Request.get(config.url(self.build_path(params)), params=query)
        logger.debug("Request built", extra={"endpoint": self.id, "url": request.url})
        return request


def _map_path(params: dict[str, Any]) -> str:
    map_id: MapId = params["map_id"]
    if map_id.hash is not None:
        return f"api/maps/by-hash/{map_id.hash}"
    return f"api/maps/detail/{map_id.key:x}"


def _download_path(params: dict[str, Any]) -> str:
    map_id: MapId = params["map_id"]
    if map_id.hash is not None:
        return f"api/download/hash/{map_id.hash}"
    return f"api/download/key/{map_id.key:x}"


def _search_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"q": params["query"]}


MAP = EndpointSpec(id="map", build_path=_map_path)

DOWNLOAD = EndpointSpec(id="download", build_path=_download_path)

MAPS_BY_UPLOADER = EndpointSpec(
    id="maps_by_uploader",
    build_path=lambda p: f"api/maps/uploader/{p['user_id']}/{p['page']}",
)

SORTED_MAPS = EndpointSpec(
    id="sorted_maps",
    build_path=lambda p: f"api/maps/{MapSort(p['sort']).value}/{p['page']}",
)

USER = EndpointSpec(id="user", build_path=lambda p: f"api/users/find/{p['user_id']}")

SEARCH_TEXT = EndpointSpec(
    id="search_text",
    build_path=lambda p: f"api/search/text/{p['page']}",
    build_query=_search_query,
)

# Lucene query syntax, passed through unvalidated.
SEARCH_ADVANCED = EndpointSpec(
    id="search_advanced",
    build_path=lambda p: f"api/search/advanced/{p['page']}",
    build_query=_search_query,
)


def coerce_map_id(value: MapId | Map | str | int) -> MapId:
    """Accept a MapId, a Map, a key/hash string or an integer key."""
    if isinstance(value, MapId):
        return value
    if isinstance(value, bool):
        raise ArgumentError("map id must be a MapId, string or integer key")
    if isinstance(value, int):
        return MapId(key=value)
    if isinstance(value, str):
        return MapId.parse(value)
    if isinstance(value, Map):
        return MapId.from_map(value)
    raise ArgumentError(f"unsupported map id: {value!r}")


def validate_user_id(user_id: str) -> str:
    """Check that ``user_id`` is a 24 character hex object id."""
    if len(user_id) != USER_ID_LENGTH or not _HEX_DIGITS.issuperset(user_id):
        raise ArgumentError(f"Invalid argument: user id {user_id!r}")
    return user_id


def uploader_id(user: BeatSaverUser | str) -> str:
    return user.id if isinstance(user, BeatSaverUser) else validate_user_id(user)


def validate_page(page: int) -> int:
    if isinstance(page, bool) or not isinstance(page, int) or page < 0:
        raise ArgumentError(f"Invalid argument: page must be a non-negative integer, got {page!r}")
    return page
