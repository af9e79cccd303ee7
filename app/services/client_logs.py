"""Client messages and metrics (append-only, owner-scoped)."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.client_log import ClientMessage, ClientMetric
from app.schemas.client_log import (
    ClientMessageCreate,
    ClientMessageRead,
    ClientMetricCreate,
    ClientMetricRead,
)
from app.schemas.common import as_utc
from app.services.ownership import owns_client


async def _require_client(db: AsyncSession, user_id: int, client_id: int) -> None:
    if not await owns_client(db, user_id, client_id):
        raise NotFoundError("Client not found")


async def list_messages(db: AsyncSession, user_id: int, client_id: int) -> list[ClientMessageRead]:
    """Newest first."""
    await _require_client(db, user_id, client_id)
    result = await db.execute(
        select(ClientMessage)
        .where(ClientMessage.client_id == client_id)
        .order_by(ClientMessage.created_at.desc(), ClientMessage.id.desc())
    )
    return [ClientMessageRead.model_validate(m) for m in result.scalars().all()]


async def create_message(
    db: AsyncSession, user_id: int, client_id: int, payload: ClientMessageCreate
) -> ClientMessageRead:
    await _require_client(db, user_id, client_id)
    message = ClientMessage(client_id=client_id, content=payload.content)
    db.add(message)
    await db.flush()
    await db.refresh(message)
    return ClientMessageRead.model_validate(message)


async def list_metrics(db: AsyncSession, user_id: int, client_id: int) -> list[ClientMetricRead]:
    """Most recently recorded first."""
    await _require_client(db, user_id, client_id)
    result = await db.execute(
        select(ClientMetric)
        .where(ClientMetric.client_id == client_id)
        .order_by(ClientMetric.recorded_at.desc(), ClientMetric.id.desc())
    )
    return [ClientMetricRead.model_validate(m) for m in result.scalars().all()]


async def create_metric(
    db: AsyncSession, user_id: int, client_id: int, payload: ClientMetricCreate
) -> ClientMetricRead:
    await _require_client(db, user_id, client_id)
    metric = ClientMetric(
        client_id=client_id,
        name=payload.name,
        value=payload.value,
        unit=payload.unit or None,
        recorded_at=as_utc(payload.recorded_at) if payload.recorded_at else datetime.now(timezone.utc),
    )
    db.add(metric)
    await db.flush()
    await db.refresh(metric)
    return ClientMetricRead.model_validate(metric)
