"""Map identifiers.

A map can be addressed either by its key (a hexadecimal number such as
``2144``) or by its 40-character SHA-1 hash.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.exceptions import MapIdError

if TYPE_CHECKING:
    from .map import Map

HASH_LENGTH = 40
_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class MapId:
    """Either a map key or a map hash, never both."""

    key: int | None = None
    hash: str | None = None

    def __post_init__(self) -> None:
        if (self.key is None) == (self.hash is None):
            raise MapIdError("MapId needs exactly one of key or hash")
        if self.key is not None and self.key < 0:
            raise MapIdError(f"map key must be non-negative, got {self.key}")
        if self.hash is not None:
            if len(self.hash) != HASH_LENGTH or not _HEX_DIGITS.issuperset(self.hash):
                raise MapIdError(f"specified hash is invalid: {self.hash!r}")
            object.__setattr__(self, "hash", self.hash.lower())

    @classmethod
    def parse(cls, value: str) -> MapId:
        """Parse a key or hash from text.

        Example:
            >>> MapId.parse("2144")
            MapId(key=8516, hash=None)
            >>> MapId.parse("fda568fc27c20d21f8dc6f3709b49b5cc96723be").hash
            'fda568fc27c20d21f8dc6f3709b49b5cc96723be'
        """
        value = value.strip()
        if len(value) == HASH_LENGTH:
            return cls(hash=value)
        # digits only: no sign, "0x" prefix or underscores
        if not value or not _HEX_DIGITS.issuperset(value):
            raise MapIdError(f"invalid map key: {value!r}")
        return cls(key=int(value, 16))

    @classmethod
    def from_map(cls, beatmap: Map) -> MapId:
        return cls(hash=beatmap.hash)

    @property
    def is_hash(self) -> bool:
        return self.hash is not None

    def __str__(self) -> str:
        if self.hash is not None:
            return f"map hash {self.hash}"
        return f"map key {self.key:x}"
