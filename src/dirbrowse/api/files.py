# File browser router: directory listing and file download.
# Created: 2026-10-19

from __future__ import annotations

import logging
import mimetypes
import os
import stat
from collections.abc import Mapping
from email.utils import parsedate
from urllib.parse import quote, unquote_to_bytes

from fastapi import APIRouter, Request
from fastapi.responses import (
    FileResponse,
    PlainTextResponse,
    RedirectResponse,
    Response,
)
from jinja2 import TemplateError

from dirbrowse.api.schemas.files import PARENT_ENTRY
from dirbrowse.fs import is_served_root, list_directory, resolve_request_path
from dirbrowse.rendering import render_listing

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Files"])

FILES_PREFIX = "/files/"


def _error(message: str, status_code: int) -> PlainTextResponse:
    # Filesystem names that are not valid UTF-8 go back out as their original bytes.
    return PlainTextResponse(
        message.encode("utf-8", "surrogateescape"), status_code=status_code
    )


def _request_path(request: Request, path: str) -> str:
    """The URL path as a filesystem string, decoded from the raw request bytes.

    Percent-escapes may encode bytes that are not UTF-8; ``os.fsdecode`` keeps
    them so the name still matches the file on disk.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return os.fsdecode(unquote_to_bytes(raw_path))
    return FILES_PREFIX + path


def _is_not_modified(
    request_headers: Mapping[str, str], response_headers: Mapping[str, str]
) -> bool:
    """Conditional GET check.

    ``If-Modified-Since`` only counts when the request carries no ``If-None-Match``.
    """
    if "if-none-match" in request_headers:
        etag = response_headers.get("etag")
        tags = [tag.strip(" W/") for tag in request_headers["if-none-match"].split(",")]
        return etag is not None and (etag in tags or "*" in tags)

    try:
        if_modified_since = parsedate(request_headers["if-modified-since"])
        last_modified = parsedate(response_headers["last-modified"])
    except KeyError:
        return False
    return (
        if_modified_since is not None
        and last_modified is not None
        and if_modified_since >= last_modified
    )


@router.api_route("/files/{path:path}", methods=["GET", "HEAD"])
def browse(request: Request, path: str):
    """Serve a file, redirect a directory to its slash form, or list a directory."""
    root: str = request.app.state.settings.served_root
    url_path = _request_path(request, path)
    resolved = resolve_request_path(root, url_path)

    try:
        stat_result = os.stat(resolved)
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Not found: %r -> %r", url_path, resolved)
        return _error(f"{resolved} not found", 404)
    except OSError as exc:
        logger.warning("Cannot stat %r: %s", resolved, exc)
        return _error(str(exc), 500)

    if not stat.S_ISDIR(stat_result.st_mode):
        return _serve_file(request, resolved, stat_result)

    if not url_path.endswith("/"):
        logger.debug("Redirecting %r to trailing slash", url_path)
        return RedirectResponse(quote(os.fsencode(url_path + "/")), status_code=307)

    try:
        entries = list_directory(resolved)
    except OSError as exc:
        logger.warning("Failed to list %r: %s", resolved, exc)
        return _error(str(exc), 500)

    if not is_served_root(root, resolved):
        entries.insert(0, PARENT_ENTRY)

    try:
        return render_listing(request.app.state.templates, request, entries)
    except TemplateError as exc:
        logger.exception("Failed to render listing for %r", resolved)
        return _error(str(exc), 500)


@router.get("/{rest:path}", include_in_schema=False)
def index_redirect(rest: str):
    """Send every other path to the root listing."""
    return RedirectResponse(FILES_PREFIX, status_code=307)


def _serve_file(request: Request, path: str, stat_result: os.stat_result) -> Response:
    # Pre-flight check only: FileResponse reopens the file lazily while streaming,
    # so open errors must surface here to become a plain-text 500.
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        logger.warning("Cannot open %r: %s", path, exc)
        return _error(str(exc), 500)

    media_type = mimetypes.guess_type(path)[0] or "application/octet-stream"
    response = FileResponse(path, stat_result=stat_result, media_type=media_type)
    if _is_not_modified(request.headers, response.headers):
        return Response(
            status_code=304,
            headers={
                name: value
                for name, value in response.headers.items()
                if name in ("etag", "last-modified", "cache-control")
            },
        )
    return response
