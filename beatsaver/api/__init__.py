"""Endpoint bindings for the BeatSaver API."""

from .async_api import BeatSaverAsync
from .endpoints import EndpointSpec, coerce_map_id
from .sync_api import BeatSaverSync

__all__ = ["BeatSaverAsync", "BeatSaverSync", "EndpointSpec", "coerce_map_id"]
