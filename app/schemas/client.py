"""Client and client workout schemas."""

from pydantic import Field, field_validator

from app.schemas.common import CamelModel, RecordId, UtcDatetime
from app.schemas.workout import ExerciseInput, ExerciseRead


class ClientCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)

    @field_validator("email")
    @classmethod
    def blank_email_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class AssignTemplateRequest(CamelModel):
    template_id: RecordId


class ClientWorkoutUpdate(CamelModel):
    """Full replacement of a client workout: exercises and sets are rewritten."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    exercises: list[ExerciseInput]


class ClientWorkoutRead(CamelModel):
    id: int
    client_id: int
    template_id: int | None = None
    name: str
    description: str
    created_at: UtcDatetime | None = None
    exercises: list[ExerciseRead] = []


class ClientRead(CamelModel):
    id: int
    user_id: int
    name: str
    email: str | None = None
    created_at: UtcDatetime | None = None
    workouts: list[ClientWorkoutRead] = []
