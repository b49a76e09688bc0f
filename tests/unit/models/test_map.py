"""Unit tests for the Map model."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from beatsaver.models import BeatSaverUser, Map


class TestMapParsing:
    """Test decoding of map documents."""

    def test_parses_api_document(self, map_payload):
        """camelCase API keys map onto snake_case attributes."""
        beatmap = Map.model_validate(map_payload("2144"))

        assert beatmap.key == "2144"
        assert beatmap.name == "Map 2144"
        assert beatmap.uploader == BeatSaverUser(_id="5cff0b7298cc5a672c84e98d", username="x")
        assert beatmap.uploaded == datetime(2018, 11, 21, 1, 27, tzinfo=UTC)
        assert beatmap.metadata.song_name == "Shut Up and Dance"
        assert beatmap.metadata.song_sub_name == "WALK THE MOON"
        assert beatmap.metadata.level_author == "bennydabeast"
        assert beatmap.metadata.bpm == 128.0
        assert beatmap.metadata.difficulties.expert_plus is True
        assert beatmap.metadata.difficulties.easy is False
        assert beatmap.stats.upvotes == 10763
        assert beatmap.stats.downvotes == 133
        assert beatmap.download == "/api/download/key/2144"

    def test_parses_characteristics(self, map_payload):
        beatmap = Map.model_validate(map_payload())
        standard = beatmap.metadata.characteristics[0]

        assert standard.name == "Standard"
        assert standard.difficulties.easy is None
        assert standard.difficulties.expert.notes == 620
        assert standard.difficulties.expert.duration == 417.5
        assert standard.difficulties.normal.njs_offset == 0

    def test_missing_required_field(self, map_payload):
        payload = map_payload()
        del payload["hash"]
        with pytest.raises(ValidationError):
            Map.model_validate(payload)

    def test_is_frozen(self, map_payload):
        """Returned maps cannot be mutated."""
        beatmap = Map.model_validate(map_payload())
        with pytest.raises(ValidationError):
            beatmap.name = "changed"  # type: ignore[misc]

    def test_str_is_name(self, map_payload):
        assert str(Map.model_validate(map_payload("ff"))) == "Map ff"


class TestBeatSaverUser:
    """Test user identity."""

    def test_equality_by_id(self):
        a = BeatSaverUser(_id="5cff0b7298cc5a672c84e98d", username="old")
        b = BeatSaverUser(id="5cff0b7298cc5a672c84e98d", username="new")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_str(self):
        assert str(BeatSaverUser(_id="5cff0b7298cc5a672c84e98d", username="bennydabeast")) == "bennydabeast"

    def test_requires_id(self):
        with pytest.raises(ValidationError):
            BeatSaverUser(_id="", username="nobody")
