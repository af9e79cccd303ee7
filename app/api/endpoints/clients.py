"""Clients, with their workouts nested; template assignment."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import PathId, get_current_user_id
from app.core.exceptions import AppError, InternalError
from app.db.session import get_db
from app.schemas.client import AssignTemplateRequest, ClientCreate, ClientRead, ClientWorkoutRead
from app.services import client_workouts as workouts_service
from app.services import clients as clients_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=list[ClientRead])
async def list_clients(
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """List the trainer's clients (newest first) with workouts, exercises and sets."""
    try:
        return await clients_service.list_clients(db, user_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("GET /clients failed: %s", e)
        raise InternalError("Failed to load clients") from e


@router.post("", response_model=ClientRead, status_code=201)
async def create_client(
    payload: ClientCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        return await clients_service.create_client(db, user_id, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("POST /clients failed: %s", e)
        raise InternalError("Failed to create client") from e


@router.get("/{client_id}", response_model=ClientRead)
async def get_client(
    client_id: PathId,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        return await clients_service.get_client(db, user_id, client_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("GET /clients/%s failed: %s", client_id, e)
        raise InternalError("Failed to load client") from e


@router.delete("/{client_id}", status_code=204)
async def delete_client(
    client_id: PathId,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Delete a client with all workouts, messages and metrics."""
    try:
        await clients_service.delete_client(db, user_id, client_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("DELETE /clients/%s failed: %s", client_id, e)
        raise InternalError("Failed to delete client") from e
    return None


@router.post("/{client_id}/assign-template", response_model=ClientWorkoutRead, status_code=201)
async def assign_template(
    client_id: PathId,
    payload: AssignTemplateRequest,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Copy one of the trainer's templates into a new workout for this client."""
    try:
        return await workouts_service.assign_template(db, user_id, client_id, payload.template_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("POST /clients/%s/assign-template failed: %s", client_id, e)
        raise InternalError("Failed to assign template") from e
