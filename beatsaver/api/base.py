"""Request construction shared by the synchronous and asynchronous clients."""

from __future__ import annotations

from ..config import ClientConfig
from ..core.enums import MapSort
from ..core.request import Request
from ..models.map import Map
from ..models.map_id import MapId
from ..models.user import BeatSaverUser
from . import endpoints


class BaseClient:
    """Builds the Request for every BeatSaver operation.

    Subclasses decide how requests are sent (blocking or suspending); they
    never build URLs themselves.
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def _map_request(self, map_id: MapId | Map | str | int) -> Request:
        return endpoints.MAP.request(self.config, map_id=endpoints.coerce_map_id(map_id))

    def _download_request(self, map_id: MapId | Map | str | int) -> Request:
        return endpoints.DOWNLOAD.request(self.config, map_id=endpoints.coerce_map_id(map_id))

    def _uploader_request(self, user: BeatSaverUser | str, page: int) -> Request:
        return endpoints.MAPS_BY_UPLOADER.request(
            self.config,
            user_id=endpoints.uploader_id(user),
            page=endpoints.validate_page(page),
        )

    def _sorted_request(self, sort: MapSort, page: int) -> Request:
        return endpoints.SORTED_MAPS.request(
            self.config, sort=sort, page=endpoints.validate_page(page)
        )

    def _user_request(self, user_id: str) -> Request:
        return endpoints.USER.request(self.config, user_id=endpoints.validate_user_id(user_id))

    def _search_request(self, query: str, page: int, *, advanced: bool = False) -> Request:
        endpoint = endpoints.SEARCH_ADVANCED if advanced else endpoints.SEARCH_TEXT
        return endpoint.request(self.config, query=query, page=endpoints.validate_page(page))
