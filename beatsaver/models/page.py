"""Page envelope for paginated endpoints."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a paginated listing.

    ``prev_page`` is None on the first page; ``next_page`` is None on the last
    one. Servers that omit ``nextPage`` entirely leave the end of the listing
    to be detected by an empty page.
    """

    docs: list[T] = Field(default_factory=list)
    total_docs: int = Field(default=0, alias="totalDocs")
    last_page: int = Field(default=0, alias="lastPage")
    prev_page: int | None = Field(default=None, alias="prevPage")
    next_page: int | None = Field(default=None, alias="nextPage")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_last(self) -> bool:
        """True when the server explicitly reported that no page follows."""
        return "next_page" in self.model_fields_set and self.next_page is None
