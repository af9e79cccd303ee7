"""Workout template reads and writes."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError
from app.db.session import atomic
from app.models.template import TemplateExercise, TemplateSet, WorkoutTemplate
from app.schemas.template import WorkoutTemplateCreate, WorkoutTemplateRead
from app.services.assembler import assemble_template
from app.services.exercise_writer import write_exercises
from app.services.ownership import owns_template


async def _children(
    db: AsyncSession, template_ids: Sequence[int]
) -> tuple[list[TemplateExercise], list[TemplateSet]]:
    if not template_ids:
        return [], []
    exercises = list(
        (
            await db.execute(
                select(TemplateExercise)
                .where(TemplateExercise.template_id.in_(template_ids))
                .order_by(TemplateExercise.id)
            )
        ).scalars().all()
    )
    exercise_ids = [e.id for e in exercises]
    sets: list[TemplateSet] = []
    if exercise_ids:
        sets = list(
            (
                await db.execute(
                    select(TemplateSet)
                    .where(TemplateSet.exercise_id.in_(exercise_ids))
                    .order_by(TemplateSet.id)
                )
            ).scalars().all()
        )
    return exercises, sets


async def fetch_template_with_details(db: AsyncSession, template_id: int) -> WorkoutTemplateRead | None:
    result = await db.execute(select(WorkoutTemplate).where(WorkoutTemplate.id == template_id))
    template = result.scalar_one_or_none()
    if template is None:
        return None
    exercises, sets = await _children(db, [template.id])
    return assemble_template(template, exercises, sets)


async def list_templates(db: AsyncSession, user_id: int) -> list[WorkoutTemplateRead]:
    """All of a user's templates, newest first, fully nested."""
    result = await db.execute(
        select(WorkoutTemplate)
        .where(WorkoutTemplate.user_id == user_id)
        .order_by(WorkoutTemplate.created_at.desc(), WorkoutTemplate.id.desc())
    )
    templates = list(result.scalars().all())
    exercises, sets = await _children(db, [t.id for t in templates])
    return [assemble_template(t, exercises, sets) for t in templates]


async def get_template(db: AsyncSession, user_id: int, template_id: int) -> WorkoutTemplateRead:
    if not await owns_template(db, user_id, template_id):
        raise NotFoundError("Template not found")
    template = await fetch_template_with_details(db, template_id)
    if template is None:
        raise NotFoundError("Template not found")
    return template


async def create_template(
    db: AsyncSession, user_id: int, payload: WorkoutTemplateCreate
) -> WorkoutTemplateRead:
    """Template, exercises and sets in one transaction, read back before commit."""
    async with atomic(db):
        template = WorkoutTemplate(user_id=user_id, name=payload.name, description=payload.description)
        db.add(template)
        await db.flush()
        await write_exercises(
            db,
            payload.exercises,
            exercise_model=TemplateExercise,
            set_model=TemplateSet,
            parent_field="template_id",
            parent_id=template.id,
            set_parent_field="exercise_id",
        )
        created = await fetch_template_with_details(db, template.id)
    return created


async def delete_template(db: AsyncSession, user_id: int, template_id: int) -> None:
    """Delete a template; client workouts built from it keep their copy with templateId nulled."""
    result = await db.execute(
        select(WorkoutTemplate).where(
            WorkoutTemplate.id == template_id, WorkoutTemplate.user_id == user_id
        )
    )
    template = result.scalar_one_or_none()
    if template is None:
        raise NotFoundError("Template not found")
    await db.delete(template)
    await db.flush()
