# Request path -> filesystem path under the served root.
# Created: 2026-10-19

from __future__ import annotations

import os

# Leading empty segment plus the mount prefix ("/files/...").
_PREFIX_SEGMENTS = 2


def resolve_request_path(root: str, url_path: str) -> str:
    """Map *url_path* to a path inside *root*.

    Parent-directory segments are dropped rather than rejected, so the result
    is always *root* itself or something below it.
    """
    segments = url_path.split("/")[_PREFIX_SEGMENTS:]
    parts = [segment for segment in segments if segment != ".."]
    return os.path.normpath(os.path.join(root, *parts))


def is_served_root(root: str, path: str) -> bool:
    return os.path.normpath(root) == os.path.normpath(path)
