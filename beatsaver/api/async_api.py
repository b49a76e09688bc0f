"""Asynchronous BeatSaver client."""

from __future__ import annotations

from ..config import ClientConfig
from ..core.enums import MapSort
from ..models.map import Map
from ..models.map_id import MapId
from ..models.page import Page
from ..models.user import BeatSaverUser
from ..runtime.backends import AsyncBackend, load_backend
from ..runtime.dispatch import AsyncDispatcher
from ..runtime.pagination import AsyncPageIterator
from ..runtime.rate_limit import RateLimitInterpreter
from .base import BaseClient
from .endpoints import validate_page


class BeatSaverAsync(BaseClient):
    """BeatSaver API client for suspending backends (aiohttp, httpx).

    Example:
        >>> async with BeatSaverAsync() as client:
        ...     beatmap = await client.map("2144")
        ...     async for recent in client.maps_latest():
        ...         print(recent.name)
    """

    def __init__(
        self,
        backend: AsyncBackend | None = None,
        *,
        config: ClientConfig | None = None,
        interpreter: RateLimitInterpreter | None = None,
    ) -> None:
        if backend is None:
            config = config or ClientConfig()
            backend = load_backend(config)  # type: ignore[assignment]
        super().__init__(config or backend.config)
        self._dispatcher = AsyncDispatcher(backend, interpreter)

    @property
    def dispatcher(self) -> AsyncDispatcher:
        return self._dispatcher

    async def map(self, map_id: MapId | Map | str | int) -> Map:
        """Get a map by key or hash.

        Raises:
            NotFoundError: If no map matches
        """
        return await self._dispatcher.send_model(self._map_request(map_id), Map)

    async def maps_by_page(self, user: BeatSaverUser | str, page: int) -> Page[Map]:
        """Get one page of the maps uploaded by ``user``."""
        return await self._dispatcher.send_model(self._uploader_request(user, page), Page[Map])

    def maps_by(self, user: BeatSaverUser | str, page: int = 0) -> AsyncPageIterator[Map]:
        """Iterate over the maps uploaded by ``user``, starting at ``page``."""
        return AsyncPageIterator(lambda p: self.maps_by_page(user, p), validate_page(page))

    async def maps_sorted_page(self, sort: MapSort, page: int) -> Page[Map]:
        return await self._dispatcher.send_model(self._sorted_request(sort, page), Page[Map])

    def maps_sorted(self, sort: MapSort, page: int = 0) -> AsyncPageIterator[Map]:
        return AsyncPageIterator(lambda p: self.maps_sorted_page(sort, p), validate_page(page))

    async def maps_hot_page(self, page: int) -> Page[Map]:
        return await self.maps_sorted_page(MapSort.HOT, page)

    def maps_hot(self, page: int = 0) -> AsyncPageIterator[Map]:
        """Iterate over the currently hot maps."""
        return self.maps_sorted(MapSort.HOT, page)

    async def maps_rating_page(self, page: int) -> Page[Map]:
        return await self.maps_sorted_page(MapSort.RATING, page)

    def maps_rating(self, page: int = 0) -> AsyncPageIterator[Map]:
        """Iterate over all maps sorted by rating."""
        return self.maps_sorted(MapSort.RATING, page)

    async def maps_latest_page(self, page: int) -> Page[Map]:
        return await self.maps_sorted_page(MapSort.LATEST, page)

    def maps_latest(self, page: int = 0) -> AsyncPageIterator[Map]:
        """Iterate over all maps, newest upload first."""
        return self.maps_sorted(MapSort.LATEST, page)

    async def maps_downloads_page(self, page: int) -> Page[Map]:
        return await self.maps_sorted_page(MapSort.DOWNLOADS, page)

    def maps_downloads(self, page: int = 0) -> AsyncPageIterator[Map]:
        return self.maps_sorted(MapSort.DOWNLOADS, page)

    async def maps_plays_page(self, page: int) -> Page[Map]:
        return await self.maps_sorted_page(MapSort.PLAYS, page)

    def maps_plays(self, page: int = 0) -> AsyncPageIterator[Map]:
        return self.maps_sorted(MapSort.PLAYS, page)

    async def user(self, user_id: str) -> BeatSaverUser:
        """Get a user by its 24 character hex id.

        Raises:
            ArgumentError: If ``user_id`` is malformed (no request is sent)
        """
        return await self._dispatcher.send_model(self._user_request(user_id), BeatSaverUser)

    async def search_page(self, query: str, page: int) -> Page[Map]:
        return await self._dispatcher.send_model(self._search_request(query, page), Page[Map])

    def search(self, query: str, page: int = 0) -> AsyncPageIterator[Map]:
        """Iterate over the maps matching a text query."""
        return AsyncPageIterator(lambda p: self.search_page(query, p), validate_page(page))

    async def search_advanced_page(self, query: str, page: int) -> Page[Map]:
        return await self._dispatcher.send_model(
            self._search_request(query, page, advanced=True), Page[Map]
        )

    def search_advanced(self, query: str, page: int = 0) -> AsyncPageIterator[Map]:
        """Iterate over the maps matching a Lucene query."""
        return AsyncPageIterator(
            lambda p: self.search_advanced_page(query, p), validate_page(page)
        )

    async def download(self, map_id: MapId | Map | str | int) -> bytes:
        """Download the zipped map."""
        return await self._dispatcher.send_bytes(self._download_request(map_id))

    async def close(self) -> None:
        await self._dispatcher.close()

    async def __aenter__(self) -> BeatSaverAsync:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
