"""Unit tests for BeatSaverAsync against a scripted backend."""

from __future__ import annotations

import pytest

from beatsaver import BeatSaverAsync
from beatsaver.core import ConfigurationError, NotFoundError, PageState, RateLimitError, Response

USER_ID = "5cff0b7298cc5a672c84e98d"


@pytest.mark.asyncio
async def test_map_by_key(async_backend, respond, map_payload):
    backend = async_backend([respond(map_payload("2144"))])
    async with BeatSaverAsync(backend) as client:
        beatmap = await client.map("2144")
    assert beatmap.metadata.song_name == "Shut Up and Dance"
    assert backend.requests[0].url == "https://beatsaver.com/api/maps/detail/2144"
    assert backend.closed


@pytest.mark.asyncio
async def test_map_not_found(async_backend):
    client = BeatSaverAsync(async_backend([Response(status=404)]))
    with pytest.raises(NotFoundError):
        await client.map("ffff")


@pytest.mark.asyncio
async def test_user(async_backend, respond):
    backend = async_backend([respond({"_id": USER_ID, "username": "someone"})])
    user = await BeatSaverAsync(backend).user(USER_ID)
    assert str(user) == "someone"


@pytest.mark.asyncio
async def test_download(async_backend):
    backend = async_backend([Response(status=200, body=b"zip")])
    assert await BeatSaverAsync(backend).download("2144") == b"zip"


@pytest.mark.asyncio
async def test_maps_latest_iterates_all_pages(async_backend, respond, page_payload):
    backend = async_backend(
        [
            respond(page_payload(["1", "2"])),
            respond(page_payload(["3"], page=1)),
            respond(page_payload([], page=2)),
        ]
    )
    keys = [m.key async for m in BeatSaverAsync(backend).maps_latest()]
    assert keys == ["1", "2", "3"]
    assert len(backend.requests) == 3


@pytest.mark.asyncio
async def test_rate_limited_listing_resumes(async_backend, respond, page_payload):
    """The iterator surfaces the RateLimitError and then refetches the same page."""
    backend = async_backend(
        [
            Response(status=429, body=b'{"resetAfter": 5000}'),
            respond(page_payload(["a", "b"])),
            respond(page_payload([], page=1)),
        ]
    )
    maps = BeatSaverAsync(backend).maps_downloads()

    with pytest.raises(RateLimitError) as exc_info:
        await maps.__anext__()
    assert exc_info.value.retry_after == 5.0
    assert maps.state is PageState.FETCHING

    assert [m.key async for m in maps] == ["a", "b"]
    assert backend.requests[0].url == backend.requests[1].url


@pytest.mark.asyncio
async def test_search_and_plays(async_backend, respond, page_payload):
    backend = async_backend(
        [
            respond(page_payload(["1"], next_page=None)),
            respond(page_payload(["2"], next_page=None)),
        ]
    )
    client = BeatSaverAsync(backend)
    assert [m.key async for m in client.search("dance")] == ["1"]
    assert [m.key async for m in client.maps_plays(page=1)] == ["2"]
    assert backend.requests[0].url.endswith("/api/search/text/0?q=dance")
    assert backend.requests[1].url.endswith("/api/maps/plays/1")


def test_rejects_sync_backend(sync_backend):
    with pytest.raises(ConfigurationError):
        BeatSaverAsync(sync_backend([]))
