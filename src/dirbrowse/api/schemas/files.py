# Directory listing schemas.
# Created: 2026-10-19

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EntryKind(str, Enum):
    """How the browser page should present an entry."""

    FOLDER = "folder"
    FOLDER_BACK = "folder-back"  # Synthetic ".." link to the parent
    MEDIA = "media"  # Video file, playable inline
    FILE = "file"


class Entry(BaseModel):
    """A single row of a directory listing.

    Snapshot of one filesystem child at listing time. ``kind`` is exposed as
    ``type`` in the JSON payload handed to the page.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    url: str
    last_modified: str = ""
    size: str = ""
    kind: EntryKind = Field(alias="type")


PARENT_ENTRY = Entry(name="..", url="..", kind=EntryKind.FOLDER_BACK)
