"""HTTP server for ``dirbrowse``.

Builds the FastAPI application (browser routes plus bundled static assets)
and runs it under uvicorn. The application holds two read-only values for
its whole lifetime: the Settings it was created with and the Jinja2
template set used to render listings.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from dirbrowse import __version__
from dirbrowse.api import mount_routers
from dirbrowse.config import Settings, get_settings
from dirbrowse.rendering import STATIC_DIR, create_templates

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application serving *settings*' root (environment settings by default)."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="dirbrowse",
        description="Minimal HTTP directory browser.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.templates = create_templates()

    # Static assets first: the browser router ends in a catch-all redirect.
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    mount_routers(app)

    return app


def _export_settings(settings: Settings) -> None:
    # The reloader re-imports the app in a child process, which only sees the environment.
    os.environ["DIRBROWSE_ADDR"] = settings.addr
    os.environ["DIRBROWSE_PORT"] = str(settings.port)
    os.environ["DIRBROWSE_DIR"] = settings.served_root
    os.environ["DIRBROWSE_LOG_LEVEL"] = settings.log_level


def run_server(settings: Settings, dev: bool = False) -> None:
    """Serve until interrupted."""
    import uvicorn

    logger.info("Server started at http://%s:%d", settings.addr, settings.port)
    logger.info("Serving %s", settings.served_root)

    if dev:
        _export_settings(settings)
        src_dir = str(Path(__file__).resolve().parent.parent)
        uvicorn.run(
            "dirbrowse.server:create_app",
            factory=True,
            host=settings.addr,
            port=settings.port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py", "*.html", "*.css", "*.js"],
            log_config=None,
            log_level="debug",
        )
    else:
        uvicorn.run(
            create_app(settings),
            host=settings.addr,
            port=settings.port,
            log_config=None,
            log_level=settings.log_level.lower(),
            access_log=settings.log_level == "DEBUG",
        )
