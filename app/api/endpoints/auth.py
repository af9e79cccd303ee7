"""Registration and login."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_app_settings
from app.core.config import Settings
from app.core.exceptions import AppError, InternalError
from app.db.session import get_db
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.services import auth as auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """Create a trainer account and return it with a bearer token."""
    try:
        return await auth_service.register(db, payload, settings)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Registration failed: %s", e)
        raise InternalError("Registration failed") from e


@router.post("/login", response_model=AuthResponse)
async def login(
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    try:
        return await auth_service.login(db, payload, settings)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Login failed: %s", e)
        raise InternalError("Login failed") from e
