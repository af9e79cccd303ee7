"""Workout template schemas."""

from pydantic import Field

from app.schemas.common import CamelModel, UtcDatetime
from app.schemas.workout import ExerciseInput, ExerciseRead


class WorkoutTemplateCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    exercises: list[ExerciseInput] = []


class WorkoutTemplateRead(CamelModel):
    id: int
    user_id: int
    name: str
    description: str
    created_at: UtcDatetime | None = None
    exercises: list[ExerciseRead] = []
