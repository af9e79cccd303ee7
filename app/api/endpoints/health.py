"""Liveness and readiness checks for the coach API."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.deps import get_app_settings
from app.core.config import Settings
from app.db.session import Database

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health(settings: Settings = Depends(get_app_settings)):
    return {"status": "ok", "app": settings.app_name, "environment": settings.environment}


@router.get("/ready")
async def readiness(request: Request):
    """Round-trip to the application's database; 503 until it answers."""
    database: Database = request.app.state.db
    try:
        await database.ping()
    except Exception as e:
        logger.exception("Readiness check against %s failed: %s", database.backend, e)
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": "unavailable", "backend": database.backend},
        )
    return {"status": "ok", "database": "connected", "backend": database.backend}
