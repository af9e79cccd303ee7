"""Nest flat template / client rows into API response trees.

Pure functions: callers fetch the rows, these only filter, order and map them.
Rows may be ORM instances or anything exposing the same attributes.

Ordering rules:
    exercises by ``position`` ascending, sets by ``set_number`` ascending,
    client workouts by ``created_at`` descending. Every sort is stable, so rows
    that tie keep the order they were handed in.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import Any

from app.schemas.client import ClientRead, ClientWorkoutRead
from app.schemas.common import as_utc
from app.schemas.template import WorkoutTemplateRead
from app.schemas.workout import ExerciseRead, SetRead

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _timestamp(value: datetime | None) -> datetime:
    return _EPOCH if value is None else as_utc(value)


def _exercises(
    exercise_rows: Iterable[Any],
    set_rows: Sequence[Any],
    parent_id: int,
    parent_key: str,
    set_parent_key: str,
) -> list[ExerciseRead]:
    owned = [e for e in exercise_rows if getattr(e, parent_key) == parent_id]
    out: list[ExerciseRead] = []
    for exercise in sorted(owned, key=lambda e: e.position):
        sets = sorted(
            (s for s in set_rows if getattr(s, set_parent_key) == exercise.id),
            key=lambda s: s.set_number,
        )
        out.append(
            ExerciseRead(
                id=exercise.id,
                name=exercise.name,
                muscle_group=exercise.muscle_group,
                difficulty_level=exercise.difficulty_level,
                position=exercise.position,
                sets=[
                    SetRead(id=s.id, set_number=s.set_number, weight=s.weight, reps=s.reps)
                    for s in sets
                ],
            )
        )
    return out


def assemble_template(
    template_row: Any | None,
    exercise_rows: Iterable[Any],
    set_rows: Iterable[Any],
) -> WorkoutTemplateRead | None:
    """Template -> exercises -> sets. Returns None when the template row is missing."""
    if template_row is None:
        return None
    return WorkoutTemplateRead(
        id=template_row.id,
        user_id=template_row.user_id,
        name=template_row.name,
        description=template_row.description or "",
        created_at=template_row.created_at,
        exercises=_exercises(exercise_rows, list(set_rows), template_row.id, "template_id", "exercise_id"),
    )


def assemble_client_workout(
    workout_row: Any | None,
    exercise_rows: Iterable[Any],
    set_rows: Iterable[Any],
) -> ClientWorkoutRead | None:
    """Client workout -> exercises -> sets, keyed by ``client_workout_id``."""
    if workout_row is None:
        return None
    return ClientWorkoutRead(
        id=workout_row.id,
        client_id=workout_row.client_id,
        template_id=workout_row.template_id,
        name=workout_row.name,
        description=workout_row.description or "",
        created_at=workout_row.created_at,
        exercises=_exercises(
            exercise_rows, list(set_rows), workout_row.id, "client_workout_id", "client_exercise_id"
        ),
    )


def assemble_client(
    client_row: Any | None,
    workout_rows: Iterable[Any],
    exercise_rows: Iterable[Any],
    set_rows: Iterable[Any],
) -> ClientRead | None:
    """Client -> workouts (newest first) -> exercises -> sets."""
    if client_row is None:
        return None
    exercise_rows = list(exercise_rows)
    set_rows = list(set_rows)
    workouts = sorted(
        (w for w in workout_rows if w.client_id == client_row.id),
        key=lambda w: _timestamp(w.created_at),
        reverse=True,
    )
    return ClientRead(
        id=client_row.id,
        user_id=client_row.user_id,
        name=client_row.name,
        email=client_row.email,
        created_at=client_row.created_at,
        workouts=[assemble_client_workout(w, exercise_rows, set_rows) for w in workouts],
    )
