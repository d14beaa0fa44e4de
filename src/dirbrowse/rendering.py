# Listing payload serialization and HTML page rendering.
# Created: 2026-10-19
#
# The page receives the listing as a JSON string literal inlined into a
# <script> block and renders it client-side (frontend/static/script.js).

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from dirbrowse.api.schemas.files import Entry

FRONTEND_DIR = Path(__file__).parent / "frontend"
TEMPLATES_DIR = FRONTEND_DIR / "templates"
STATIC_DIR = FRONTEND_DIR / "static"

LISTING_TEMPLATE = "index.html"

# Keeps "</script>" and friends out of the inlined payload.
_HTML_UNSAFE = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def create_templates() -> Jinja2Templates:
    return Jinja2Templates(directory=str(TEMPLATES_DIR))


def serialize_entries(entries: Iterable[Entry]) -> str:
    """Serialize *entries* into text that is safe inside a double-quoted JS string.

    ``<``, ``>`` and ``&`` become ``\\u`` escapes in the JSON array, then
    backslashes and double quotes are escaped so that ``JSON.parse("<payload>")``
    gets the original JSON back.
    """
    data = json.dumps(
        [entry.model_dump(mode="json", by_alias=True) for entry in entries],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    for char, escaped in _HTML_UNSAFE.items():
        data = data.replace(char, escaped)
    return data.replace("\\", "\\\\").replace('"', '\\"')


def render_listing(
    templates: Jinja2Templates, request: Request, entries: list[Entry]
) -> HTMLResponse:
    """Render the listing page.

    Raises ``jinja2.TemplateError`` if the template is missing or fails to render.
    """
    return templates.TemplateResponse(
        request,
        LISTING_TEMPLATE,
        {"entries": serialize_entries(entries), "path": request.url.path},
    )
