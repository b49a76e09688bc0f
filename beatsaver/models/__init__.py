"""Data models returned by the BeatSaver API.

Architecture:
    Entities (Map, BeatSaverUser) and the Page envelope are frozen Pydantic v2
    models, so callers own what they receive and nothing mutates it
    afterwards. MapId and RateLimitInfo are plain frozen dataclasses built by
    the library itself rather than decoded from JSON.
"""

from .map import (
    DifficultyCharacteristic,
    DifficultyCharacteristics,
    Map,
    MapCharacteristic,
    MapDifficulties,
    MapMetadata,
    MapStats,
)
from .map_id import MapId
from .page import Page
from .rate_limit import RateLimitInfo
from .user import BeatSaverUser

__all__ = [
    "BeatSaverUser",
    "DifficultyCharacteristic",
    "DifficultyCharacteristics",
    "Map",
    "MapCharacteristic",
    "MapDifficulties",
    "MapId",
    "MapMetadata",
    "MapStats",
    "Page",
    "RateLimitInfo",
]
