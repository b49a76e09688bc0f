"""Beat map data models.

Incoming documents use camelCase keys (``songName``, ``downloadURL``, ``_id``);
they are accepted through aliases while the Python attributes stay snake_case.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import BeatSaverUser

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class MapDifficulties(BaseModel):
    """Which difficulties a map provides."""

    easy: bool = False
    normal: bool = False
    hard: bool = False
    expert: bool = False
    expert_plus: bool = Field(default=False, alias="expertPlus")

    model_config = _MODEL_CONFIG


class DifficultyCharacteristic(BaseModel):
    """Note statistics of one difficulty."""

    duration: float
    length: int
    njs: float
    njs_offset: float = Field(alias="njsOffset")
    bombs: int
    notes: int
    obstacles: int

    model_config = _MODEL_CONFIG


class DifficultyCharacteristics(BaseModel):
    easy: DifficultyCharacteristic | None = None
    normal: DifficultyCharacteristic | None = None
    hard: DifficultyCharacteristic | None = None
    expert: DifficultyCharacteristic | None = None
    expert_plus: DifficultyCharacteristic | None = Field(default=None, alias="expertPlus")

    model_config = _MODEL_CONFIG


class MapCharacteristic(BaseModel):
    """A play mode (``Standard``, ``OneSaber``...) and its difficulties."""

    name: str
    difficulties: DifficultyCharacteristics

    model_config = _MODEL_CONFIG


class MapMetadata(BaseModel):
    difficulties: MapDifficulties
    duration: int = 0
    automapper: str | None = None
    characteristics: list[MapCharacteristic] = Field(default_factory=list)
    level_author: str = Field(alias="levelAuthorName")
    song_author: str = Field(alias="songAuthorName")
    song_name: str = Field(alias="songName")
    song_sub_name: str = Field(default="", alias="songSubName")
    bpm: float

    model_config = _MODEL_CONFIG


class MapStats(BaseModel):
    downloads: int = 0
    plays: int = 0
    downvotes: int = Field(default=0, alias="downVotes")
    upvotes: int = Field(default=0, alias="upVotes")
    heat: float = 0.0
    rating: float = 0.0

    model_config = _MODEL_CONFIG


class Map(BaseModel):
    """A beat map as returned by the map detail and listing endpoints.

    Maps are identified by ``key`` (hexadecimal) and ``hash`` (SHA-1 of the
    map contents); either can be turned into a MapId.
    """

    id: str = Field(alias="_id")
    key: str
    hash: str
    name: str
    description: str = ""
    uploader: BeatSaverUser
    uploaded: datetime
    metadata: MapMetadata
    stats: MapStats
    direct_download: str = Field(alias="directDownload")
    download: str = Field(alias="downloadURL")
    cover: str = Field(alias="coverURL")

    model_config = _MODEL_CONFIG

    def __str__(self) -> str:
        return self.name
