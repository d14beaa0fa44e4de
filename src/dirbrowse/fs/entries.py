# Directory entry -> listing Entry.
# Created: 2026-10-19

from __future__ import annotations

import os
from datetime import datetime
from urllib.parse import quote

import humanize

from dirbrowse.api.schemas.files import Entry, EntryKind

# Suffix match, case-sensitive.
MEDIA_EXTENSIONS = (".mp4", ".mkv", ".avi")


class EntryMetadataError(OSError):
    """Metadata for a directory entry could not be read."""

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"cannot read metadata for {path}: {cause}")
        self.path = path
        self.cause = cause


def is_media_file(name: str) -> bool:
    return name.endswith(MEDIA_EXTENSIONS)


def entry_kind(is_dir: bool, name: str) -> EntryKind:
    """Classify an entry from its type bit and name alone."""
    if is_dir:
        return EntryKind.FOLDER
    if is_media_file(name):
        return EntryKind.MEDIA
    return EntryKind.FILE


def classify_entry(entry: os.DirEntry) -> Entry:
    """Build the listing Entry for one ``os.scandir`` result.

    Symlinks are not followed: a link is described by its own metadata, so a
    dangling link still lists instead of failing the whole directory.

    Raises:
        EntryMetadataError: if the entry's metadata cannot be read, e.g. it was
            removed while the directory was being scanned.
    """
    try:
        info = entry.stat(follow_symlinks=False)
        is_dir = entry.is_dir(follow_symlinks=False)
    except OSError as exc:
        raise EntryMetadataError(entry.path, exc) from exc

    kind = entry_kind(is_dir, entry.name)
    raw_name = os.fsencode(entry.name)
    name = raw_name.decode("utf-8", "replace")
    if kind is EntryKind.FOLDER:
        # Linked as-is unless the name is not valid UTF-8, which only escaping can carry.
        url = name if name == entry.name else quote(raw_name, safe="")
        name, url = name + "/", url + "/"
    else:
        url = quote(raw_name, safe="")

    return Entry(
        name=name,
        url=url,
        last_modified=humanize.naturaltime(datetime.fromtimestamp(info.st_mtime)),
        size=humanize.naturalsize(info.st_size, binary=True),
        kind=kind,
    )
