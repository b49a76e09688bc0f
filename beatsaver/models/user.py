"""BeatSaver user model."""

from pydantic import BaseModel, ConfigDict, Field


class BeatSaverUser(BaseModel):
    """A BeatSaver uploader, identified by its id."""

    id: str = Field(..., alias="_id", min_length=1)
    username: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BeatSaverUser):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.username
