"""Client workout read / full replacement / delete."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import PathId, get_current_user_id
from app.core.exceptions import AppError, InternalError
from app.db.session import get_db
from app.schemas.client import ClientWorkoutRead, ClientWorkoutUpdate
from app.services import client_workouts as workouts_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{workout_id}", response_model=ClientWorkoutRead)
async def get_client_workout(
    workout_id: PathId,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        return await workouts_service.get_client_workout(db, user_id, workout_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("GET /client-workouts/%s failed: %s", workout_id, e)
        raise InternalError("Failed to load workout") from e


@router.put("/{workout_id}", response_model=ClientWorkoutRead)
async def update_client_workout(
    workout_id: PathId,
    payload: ClientWorkoutUpdate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Replace name, description, exercises and sets in one transaction."""
    try:
        return await workouts_service.update_client_workout(db, user_id, workout_id, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("PUT /client-workouts/%s failed: %s", workout_id, e)
        raise InternalError("Failed to update workout") from e


@router.delete("/{workout_id}", status_code=204)
async def delete_client_workout(
    workout_id: PathId,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        await workouts_service.delete_client_workout(db, user_id, workout_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("DELETE /client-workouts/%s failed: %s", workout_id, e)
        raise InternalError("Failed to delete workout") from e
    return None
