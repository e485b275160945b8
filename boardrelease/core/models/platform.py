"""
Platform record — one installable release in a board-manager index.

Field names follow the board-manager JSON schema; ``archiveFileName``
is exposed as ``archive_file_name`` in Python.  Serialize with
``to_index_entry()`` to get the exact key order the index uses.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Board(BaseModel):
    """A board listed under a platform (display name only)."""

    name: str


class HelpLinks(BaseModel):
    online: str = ""


class PlatformRecord(BaseModel):
    """A single platform entry.  Immutable once built."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    architecture: str
    version: str
    category: str
    url: str
    archive_file_name: str = Field(alias="archiveFileName")
    checksum: str
    size: str
    help: HelpLinks = Field(default_factory=HelpLinks)
    boards: list[Board] = Field(default_factory=list)

    def to_index_entry(self) -> dict:
        """Serialize with index key names, in index key order."""
        return self.model_dump(mode="json", by_alias=True)
