"""Workout template - a trainer-owned blueprint of exercises and sets."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class WorkoutTemplate(Base):
    """Reusable workout structure, not tied to any client."""

    __tablename__ = "workout_templates"
    __table_args__ = (Index("ix_workout_templates_user_created", "user_id", "created_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped["User"] = relationship("User", back_populates="templates")
    exercises: Mapped[list["TemplateExercise"]] = relationship(
        "TemplateExercise", back_populates="template", cascade="all, delete-orphan", passive_deletes=True
    )


class TemplateExercise(Base):
    """Exercise in a template; ``position`` gives its order."""

    __tablename__ = "template_exercises"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    template_id: Mapped[int] = mapped_column(
        ForeignKey("workout_templates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    muscle_group: Mapped[str] = mapped_column(String(100), nullable=False)
    difficulty_level: Mapped[str] = mapped_column(String(50), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    template: Mapped["WorkoutTemplate"] = relationship("WorkoutTemplate", back_populates="exercises")
    sets: Mapped[list["TemplateSet"]] = relationship(
        "TemplateSet", back_populates="exercise", cascade="all, delete-orphan", passive_deletes=True
    )


class TemplateSet(Base):
    """Planned set: weight x reps, ordered by ``set_number``."""

    __tablename__ = "template_sets"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    exercise_id: Mapped[int] = mapped_column(
        ForeignKey("template_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    exercise: Mapped["TemplateExercise"] = relationship("TemplateExercise", back_populates="sets")
