"""ORM models - import all so Base.metadata is complete for migrations."""

from app.models.client import Client, ClientExercise, ClientSet, ClientWorkout
from app.models.client_log import ClientMessage, ClientMetric
from app.models.template import TemplateExercise, TemplateSet, WorkoutTemplate
from app.models.user import User

__all__ = [
    "Client",
    "ClientExercise",
    "ClientMessage",
    "ClientMetric",
    "ClientSet",
    "ClientWorkout",
    "TemplateExercise",
    "TemplateSet",
    "User",
    "WorkoutTemplate",
]
