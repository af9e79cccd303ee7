"""Workout templates - trainer-owned blueprints of exercises and sets."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import PathId, get_current_user_id
from app.core.exceptions import AppError, InternalError
from app.db.session import get_db
from app.schemas.template import WorkoutTemplateCreate, WorkoutTemplateRead
from app.services import templates as templates_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[WorkoutTemplateRead])
async def list_templates(
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """List the trainer's templates, newest first, with exercises and sets."""
    try:
        return await templates_service.list_templates(db, user_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("GET /templates failed: %s", e)
        raise InternalError("Failed to load templates") from e


@router.post("", response_model=WorkoutTemplateRead, status_code=201)
async def create_template(
    payload: WorkoutTemplateCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Create a template together with its exercises and sets."""
    try:
        return await templates_service.create_template(db, user_id, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("POST /templates failed: %s", e)
        raise InternalError("Failed to create template") from e


@router.get("/{template_id}", response_model=WorkoutTemplateRead)
async def get_template(
    template_id: PathId,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        return await templates_service.get_template(db, user_id, template_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("GET /templates/%s failed: %s", template_id, e)
        raise InternalError("Failed to load template") from e


@router.delete("/{template_id}", status_code=204)
async def delete_template(
    template_id: PathId,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Delete a template. Client workouts made from it survive with templateId = null."""
    try:
        await templates_service.delete_template(db, user_id, template_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("DELETE /templates/%s failed: %s", template_id, e)
        raise InternalError("Failed to delete template") from e
    return None
