"""Insert exercise/set children for a template or a client workout."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.workout import ExerciseInput, SetInput


def ordered_sets(sets: Sequence[SetInput]) -> list[SetInput]:
    """Stable sort by the submitted set number; the writer renumbers from 1."""
    return sorted(sets, key=lambda s: s.set_number)


async def write_exercises(
    db: AsyncSession,
    exercises: Sequence[ExerciseInput],
    *,
    exercise_model: type,
    set_model: type,
    parent_field: str,
    parent_id: int,
    set_parent_field: str,
) -> None:
    """Positions follow list order (0..n-1); set numbers are contiguous (1..m)."""
    for position, payload in enumerate(exercises):
        exercise = exercise_model(
            **{parent_field: parent_id},
            name=payload.name,
            muscle_group=payload.muscle_group,
            difficulty_level=payload.difficulty_level,
            position=position,
        )
        db.add(exercise)
        await db.flush()
        for number, s in enumerate(ordered_sets(payload.sets), start=1):
            db.add(
                set_model(
                    **{set_parent_field: exercise.id},
                    set_number=number,
                    weight=s.weight,
                    reps=s.reps,
                )
            )
    await db.flush()
