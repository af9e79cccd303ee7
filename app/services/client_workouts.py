"""Client workouts: assign from a template, read, replace, delete."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.db.session import atomic
from app.models.client import ClientExercise, ClientSet, ClientWorkout
from app.models.template import TemplateExercise, TemplateSet, WorkoutTemplate
from app.schemas.client import ClientWorkoutRead, ClientWorkoutUpdate
from app.services.assembler import assemble_client_workout
from app.services.clients import fetch_workout_rows
from app.services.exercise_writer import write_exercises
from app.services.ownership import owns_client, owns_client_workout, owns_template

logger = logging.getLogger(__name__)


async def fetch_client_workout(db: AsyncSession, workout_id: int) -> ClientWorkoutRead | None:
    workouts, exercises, sets = await fetch_workout_rows(db, workout_ids=[workout_id])
    if not workouts:
        return None
    return assemble_client_workout(workouts[0], exercises, sets)


async def get_client_workout(db: AsyncSession, user_id: int, workout_id: int) -> ClientWorkoutRead:
    if not await owns_client_workout(db, user_id, workout_id):
        raise NotFoundError("Workout not found")
    workout = await fetch_client_workout(db, workout_id)
    if workout is None:
        raise NotFoundError("Workout not found")
    return workout


async def assign_template(
    db: AsyncSession, user_id: int, client_id: int, template_id: int
) -> ClientWorkoutRead:
    """Copy a template (exercises, sets, positions) into a new workout for the client."""
    if not await owns_client(db, user_id, client_id):
        raise NotFoundError("Client not found")
    if not await owns_template(db, user_id, template_id):
        raise NotFoundError("Template not found")

    async with atomic(db):
        template = (
            await db.execute(select(WorkoutTemplate).where(WorkoutTemplate.id == template_id))
        ).scalar_one()
        workout = ClientWorkout(
            client_id=client_id,
            template_id=template.id,
            name=template.name,
            description=template.description or "",
        )
        db.add(workout)
        await db.flush()

        template_exercises = (
            await db.execute(
                select(TemplateExercise)
                .where(TemplateExercise.template_id == template.id)
                .order_by(TemplateExercise.position, TemplateExercise.id)
            )
        ).scalars().all()
        for te in template_exercises:
            exercise = ClientExercise(
                client_workout_id=workout.id,
                template_exercise_id=te.id,
                name=te.name,
                muscle_group=te.muscle_group,
                difficulty_level=te.difficulty_level,
                position=te.position,
            )
            db.add(exercise)
            await db.flush()
            template_sets = (
                await db.execute(
                    select(TemplateSet)
                    .where(TemplateSet.exercise_id == te.id)
                    .order_by(TemplateSet.set_number, TemplateSet.id)
                )
            ).scalars().all()
            for ts in template_sets:
                db.add(
                    ClientSet(
                        client_exercise_id=exercise.id,
                        set_number=ts.set_number,
                        weight=ts.weight,
                        reps=ts.reps,
                    )
                )
        await db.flush()
        assigned = await fetch_client_workout(db, workout.id)

    logger.info("Assigned template %s to client %s as workout %s", template_id, client_id, workout.id)
    return assigned


async def update_client_workout(
    db: AsyncSession, user_id: int, workout_id: int, payload: ClientWorkoutUpdate
) -> ClientWorkoutRead:
    """Rename and replace every exercise/set of a workout; all or nothing.

    No version check: concurrent editors overwrite each other (last write wins).
    """
    if not await owns_client_workout(db, user_id, workout_id):
        raise NotFoundError("Workout not found")

    async with atomic(db):
        workout = (
            await db.execute(select(ClientWorkout).where(ClientWorkout.id == workout_id))
        ).scalar_one()
        workout.name = payload.name
        workout.description = payload.description

        old_exercise_ids = list(
            (
                await db.execute(
                    select(ClientExercise.id).where(ClientExercise.client_workout_id == workout_id)
                )
            ).scalars().all()
        )
        if old_exercise_ids:
            await db.execute(delete(ClientSet).where(ClientSet.client_exercise_id.in_(old_exercise_ids)))
            await db.execute(delete(ClientExercise).where(ClientExercise.id.in_(old_exercise_ids)))

        await write_exercises(
            db,
            payload.exercises,
            exercise_model=ClientExercise,
            set_model=ClientSet,
            parent_field="client_workout_id",
            parent_id=workout.id,
            set_parent_field="client_exercise_id",
        )
        updated = await fetch_client_workout(db, workout.id)
    return updated


async def delete_client_workout(db: AsyncSession, user_id: int, workout_id: int) -> None:
    if not await owns_client_workout(db, user_id, workout_id):
        raise NotFoundError("Workout not found")
    workout = (
        await db.execute(select(ClientWorkout).where(ClientWorkout.id == workout_id))
    ).scalar_one()
    await db.delete(workout)
    await db.flush()
