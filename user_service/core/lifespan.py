"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (tables, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from user_service.core.config import get_settings
from user_service.infrastructure.persistence import database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables if configured, yield, then dispose the SQL engine."""
    settings = get_settings()

    # ---- Startup ----
    if settings.database_create_tables:
        await database.create_tables()
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    await database.dispose_engine()
    logger.info("%s stopped", settings.app_name)
