"""Client messages and metrics: /clients/{client_id}/messages and /metrics."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import PathId, get_current_user_id
from app.core.exceptions import AppError, InternalError
from app.db.session import get_db
from app.schemas.client_log import (
    ClientMessageCreate,
    ClientMessageRead,
    ClientMetricCreate,
    ClientMetricRead,
)
from app.services import client_logs as logs_service

logger = logging.getLogger(__name__)
router = APIRouter()


# ── Messages ─────────────────────────────────────────────────────────────

@router.get("/{client_id}/messages", response_model=list[ClientMessageRead])
async def list_messages(
    client_id: PathId,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        return await logs_service.list_messages(db, user_id, client_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to load messages for client %s: %s", client_id, e)
        raise InternalError("Failed to load messages") from e


@router.post("/{client_id}/messages", response_model=ClientMessageRead, status_code=201)
async def create_message(
    client_id: PathId,
    payload: ClientMessageCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        return await logs_service.create_message(db, user_id, client_id, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to create message for client %s: %s", client_id, e)
        raise InternalError("Failed to create message") from e


# ── Metrics ──────────────────────────────────────────────────────────────

@router.get("/{client_id}/metrics", response_model=list[ClientMetricRead])
async def list_metrics(
    client_id: PathId,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    try:
        return await logs_service.list_metrics(db, user_id, client_id)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to load metrics for client %s: %s", client_id, e)
        raise InternalError("Failed to load metrics") from e


@router.post("/{client_id}/metrics", response_model=ClientMetricRead, status_code=201)
async def create_metric(
    client_id: PathId,
    payload: ClientMetricCreate,
    db: AsyncSession = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Record a metric; recordedAt defaults to now."""
    try:
        return await logs_service.create_metric(db, user_id, client_id, payload)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Failed to create metric for client %s: %s", client_id, e)
        raise InternalError("Failed to create metric") from e
