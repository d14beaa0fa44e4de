# Directory enumeration.
# Created: 2026-10-19

from __future__ import annotations

import logging
import os

from dirbrowse.api.schemas.files import Entry
from dirbrowse.fs.entries import classify_entry

logger = logging.getLogger(__name__)


def list_directory(path: str) -> list[Entry]:
    """Return the entries of *path*'s immediate children, ordered by name.

    Any failure, whether opening the directory or reading one child's
    metadata, propagates as ``OSError``. There is no partial result.
    """
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)
    logger.debug("Listing %s (%d entries)", path, len(entries))
    return [classify_entry(entry) for entry in entries]
