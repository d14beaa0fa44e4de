# API router aggregation.
# Created: 2026-10-19
#
# mount_routers(app) registers the browser routes on the application.

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)


def mount_routers(app: FastAPI) -> None:
    """Mount the ``/files/`` browser and the catch-all redirect on *app*."""
    # Imported here so the schemas package can be used without pulling in FastAPI routing.
    from dirbrowse.api.files import router

    app.include_router(router)
    logger.debug("Mounted router: dirbrowse.api.files")
