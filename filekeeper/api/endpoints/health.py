"""Health check endpoints for liveness and readiness probes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from filekeeper.api.dependencies import get_storage_service
from filekeeper.domain.exceptions import SqlNotConfiguredException
from filekeeper.infrastructure.external.storage import StorageProtocol
from filekeeper.infrastructure.persistence.database import get_engine
from filekeeper.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Metadata database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    storage: Annotated[StorageProtocol, Depends(get_storage_service)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 if the metadata database answers SELECT 1; 503 otherwise."""
    backend = storage.backend_name
    engine = get_engine()
    if engine is None:
        return _not_ready(SqlNotConfiguredException().message)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Readiness check failed: %s", e)
        return _not_ready("Metadata database unreachable")
    return ReadinessResponse(storage_backend=backend)


def _not_ready(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content=ReadinessErrorResponse(message=message).model_dump(),
    )
