"""Exercise and set schemas shared by templates and client workouts."""

from pydantic import Field

from app.schemas.common import MAX_INT, CamelModel


class SetInput(CamelModel):
    id: int | None = None  # echoed back by the dashboard; ignored on write
    set_number: int = Field(default=1, ge=1, le=MAX_INT)
    weight: float = Field(default=0, ge=0)
    reps: int = Field(default=0, ge=0, le=MAX_INT)


class ExerciseInput(CamelModel):
    id: int | None = None
    name: str = Field(..., min_length=1, max_length=255)
    muscle_group: str = Field(..., max_length=100)
    difficulty_level: str = Field(..., max_length=50)
    position: int | None = None
    sets: list[SetInput] = []


class SetRead(CamelModel):
    id: int
    set_number: int
    weight: float
    reps: int


class ExerciseRead(CamelModel):
    id: int
    name: str
    muscle_group: str
    difficulty_level: str
    position: int
    sets: list[SetRead] = []
