"""Application lifespan: startup and shutdown.

Wiring only: a startup log line and SQL engine dispose on shutdown.
Schema is managed by Alembic, not created here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from filekeeper.core.config import get_settings
from filekeeper.infrastructure.persistence.database import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the SQL engine."""
    settings = get_settings()
    storage = getattr(app.state, "storage", None)
    logger.info(
        "Starting %s %s (storage backend: %s)",
        settings.app_name,
        settings.app_version,
        storage.backend_name if storage is not None else settings.storage_backend,
    )

    yield

    await dispose_engine()
