"""User preferences."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user_id
from app.core.exceptions import AppError, InternalError
from app.db.session import get_db
from app.schemas.auth import PreferencesRead, PreferencesUpdate
from app.services import auth as auth_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.put("/preferences", response_model=PreferencesRead)
async def update_preferences(
    payload: PreferencesUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Store the UI language; unknown values fall back to English."""
    try:
        language = await auth_service.update_language(db, user_id, payload.language)
    except AppError:
        raise
    except Exception as e:
        logger.exception("PUT /users/preferences failed: %s", e)
        raise InternalError("Failed to update preferences") from e
    return PreferencesRead(language=language)
