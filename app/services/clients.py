"""Client reads and writes (client -> workouts -> exercises -> sets)."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.models.client import Client, ClientExercise, ClientSet, ClientWorkout
from app.schemas.client import ClientCreate, ClientRead
from app.services.assembler import assemble_client


async def fetch_workout_rows(
    db: AsyncSession,
    *,
    client_ids: Sequence[int] = (),
    workout_ids: Sequence[int] = (),
) -> tuple[list[ClientWorkout], list[ClientExercise], list[ClientSet]]:
    """Flat workout/exercise/set rows for the given clients or workouts."""
    stmt = select(ClientWorkout).order_by(ClientWorkout.id)
    if client_ids:
        stmt = stmt.where(ClientWorkout.client_id.in_(client_ids))
    elif workout_ids:
        stmt = stmt.where(ClientWorkout.id.in_(workout_ids))
    else:
        return [], [], []
    workouts = list((await db.execute(stmt)).scalars().all())

    ids = [w.id for w in workouts]
    exercises: list[ClientExercise] = []
    if ids:
        exercises = list(
            (
                await db.execute(
                    select(ClientExercise)
                    .where(ClientExercise.client_workout_id.in_(ids))
                    .order_by(ClientExercise.id)
                )
            ).scalars().all()
        )
    exercise_ids = [e.id for e in exercises]
    sets: list[ClientSet] = []
    if exercise_ids:
        sets = list(
            (
                await db.execute(
                    select(ClientSet)
                    .where(ClientSet.client_exercise_id.in_(exercise_ids))
                    .order_by(ClientSet.id)
                )
            ).scalars().all()
        )
    return workouts, exercises, sets


async def fetch_client_with_workouts(db: AsyncSession, client_id: int) -> ClientRead | None:
    result = await db.execute(select(Client).where(Client.id == client_id))
    client = result.scalar_one_or_none()
    if client is None:
        return None
    workouts, exercises, sets = await fetch_workout_rows(db, client_ids=[client.id])
    return assemble_client(client, workouts, exercises, sets)


async def list_clients(db: AsyncSession, user_id: int) -> list[ClientRead]:
    result = await db.execute(
        select(Client)
        .where(Client.user_id == user_id)
        .order_by(Client.created_at.desc(), Client.id.desc())
    )
    clients = list(result.scalars().all())
    if not clients:
        return []
    workouts, exercises, sets = await fetch_workout_rows(db, client_ids=[c.id for c in clients])
    return [assemble_client(c, workouts, exercises, sets) for c in clients]


async def get_client(db: AsyncSession, user_id: int, client_id: int) -> ClientRead:
    result = await db.execute(
        select(Client).where(Client.id == client_id, Client.user_id == user_id)
    )
    client = result.scalar_one_or_none()
    if client is None:
        raise NotFoundError("Client not found")
    workouts, exercises, sets = await fetch_workout_rows(db, client_ids=[client.id])
    return assemble_client(client, workouts, exercises, sets)


async def create_client(db: AsyncSession, user_id: int, payload: ClientCreate) -> ClientRead:
    client = Client(user_id=user_id, name=payload.name, email=payload.email)
    db.add(client)
    await db.flush()
    return assemble_client(client, [], [], [])


async def delete_client(db: AsyncSession, user_id: int, client_id: int) -> None:
    """Delete a client and, through FK cascades, everything under it."""
    result = await db.execute(
        select(Client).where(Client.id == client_id, Client.user_id == user_id)
    )
    client = result.scalar_one_or_none()
    if client is None:
        raise NotFoundError("Client not found")
    await db.delete(client)
    await db.flush()
