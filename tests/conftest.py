"""Shared fixtures: scripted backends and BeatSaver payloads."""

from __future__ import annotations

import json
from collections import deque
from typing import Any

import pytest

from beatsaver.config import ClientConfig
from beatsaver.core import BackendKind, Request, Response
from beatsaver.runtime.backends import AsyncBackend, SyncBackend


class _Script:
    """Replays a fixed list of outcomes (Response or exception), one per request."""

    def __init__(self, outcomes: list[Response | BaseException]) -> None:
        self.outcomes = deque(outcomes)
        self.requests: list[Request] = []
        self.closed = False

    def next_outcome(self, request: Request) -> Response:
        self.requests.append(request)
        if not self.outcomes:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        outcome = self.outcomes.popleft()
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class ScriptedSyncBackend(SyncBackend, _Script):
    kind = BackendKind.REQUESTS
    transport_errors = (ConnectionError,)

    def __init__(self, outcomes, config: ClientConfig | None = None) -> None:
        SyncBackend.__init__(self, config)
        _Script.__init__(self, outcomes)

    def execute(self, request: Request) -> Response:
        return self.next_outcome(request)

    def close(self) -> None:
        self.closed = True


class ScriptedAsyncBackend(AsyncBackend, _Script):
    kind = BackendKind.AIOHTTP
    transport_errors = (ConnectionError,)

    def __init__(self, outcomes, config: ClientConfig | None = None) -> None:
        AsyncBackend.__init__(self, config)
        _Script.__init__(self, outcomes)

    async def execute(self, request: Request) -> Response:
        return self.next_outcome(request)

    async def close(self) -> None:
        self.closed = True


def make_map_payload(key: str = "2144", **overrides: Any) -> dict[str, Any]:
    payload = {
        "metadata": {
            "difficulties": {
                "easy": False,
                "normal": True,
                "hard": True,
                "expert": True,
                "expertPlus": True,
            },
            "duration": 0,
            "automapper": None,
            "characteristics": [
                {
                    "name": "Standard",
                    "difficulties": {
                        "easy": None,
                        "normal": {
                            "duration": 417,
                            "length": 195,
                            "bombs": 4,
                            "notes": 301,
                            "obstacles": 24,
                            "njs": 10,
                            "njsOffset": 0,
                        },
                        "hard": None,
                        "expert": {
                            "duration": 417.5,
                            "length": 195,
                            "bombs": 4,
                            "notes": 620,
                            "obstacles": 24,
                            "njs": 10,
                            "njsOffset": 0,
                        },
                        "expertPlus": None,
                    },
                }
            ],
            "songName": "Shut Up and Dance",
            "songSubName": "WALK THE MOON",
            "songAuthorName": "BennyDaBeast",
            "levelAuthorName": "bennydabeast",
            "bpm": 128,
        },
        "stats": {
            "downloads": 418854,
            "plays": 558,
            "downVotes": 133,
            "upVotes": 10763,
            "heat": 395.8225333,
            "rating": 0.9580848467461356,
        },
        "description": "Difficulties: Expert+, Expert, Hard, Normal",
        "deletedAt": None,
        "_id": f"5cff621148229f7d88fc{int(key, 16) % 0xFFFF:04x}",
        "key": key,
        "name": f"Map {key}",
        "uploader": {"_id": "5cff0b7298cc5a672c84e98d", "username": "bennydabeast"},
        "uploaded": "2018-11-21T01:27:00.000Z",
        "hash": f"{int(key, 16):040x}",
        "directDownload": f"/cdn/{key}/{int(key, 16):040x}.zip",
        "downloadURL": f"/api/download/key/{key}",
        "coverURL": f"/cdn/{key}/{int(key, 16):040x}.png",
    }
    payload.update(overrides)
    return payload


_OMIT = object()


def make_page_payload(keys: list[str], page: int = 0, next_page: Any = _OMIT) -> dict:
    """Page body with ``keys`` as docs; ``nextPage`` is only sent when given."""
    body: dict[str, Any] = {
        "docs": [make_map_payload(k) for k in keys],
        "totalDocs": len(keys),
        "lastPage": page,
        "prevPage": page - 1 if page > 0 else None,
    }
    if next_page is not _OMIT:
        body["nextPage"] = next_page
    return body


def json_response(payload: Any, status: int = 200, headers: dict[str, str] | None = None) -> Response:
    return Response(
        status=status,
        headers={"Content-Type": "application/json", **(headers or {})},
        body=json.dumps(payload).encode(),
    )


@pytest.fixture
def sync_backend():
    """Factory for a scripted blocking backend."""
    return ScriptedSyncBackend


@pytest.fixture
def async_backend():
    """Factory for a scripted suspending backend."""
    return ScriptedAsyncBackend


@pytest.fixture
def map_payload():
    return make_map_payload


@pytest.fixture
def page_payload():
    return make_page_payload


@pytest.fixture
def respond():
    """Build a JSON Response from a payload."""
    return json_response
