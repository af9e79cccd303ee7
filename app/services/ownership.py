"""Ownership checks: does this user own that client / workout / template?

Callers turn a False into NotFoundError so that "not yours" and "does not
exist" look the same from outside.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.client import Client, ClientWorkout
from app.models.template import WorkoutTemplate


async def owns_client(db: AsyncSession, user_id: int, client_id: int) -> bool:
    result = await db.execute(
        select(Client.id).where(Client.id == client_id, Client.user_id == user_id)
    )
    return result.scalar_one_or_none() is not None


async def owns_client_workout(db: AsyncSession, user_id: int, client_workout_id: int) -> bool:
    """True iff the workout's parent client belongs to ``user_id``."""
    result = await db.execute(
        select(ClientWorkout.id)
        .join(Client, Client.id == ClientWorkout.client_id)
        .where(ClientWorkout.id == client_workout_id, Client.user_id == user_id)
    )
    return result.scalar_one_or_none() is not None


async def owns_template(db: AsyncSession, user_id: int, template_id: int) -> bool:
    result = await db.execute(
        select(WorkoutTemplate.id).where(
            WorkoutTemplate.id == template_id, WorkoutTemplate.user_id == user_id
        )
    )
    return result.scalar_one_or_none() is not None
