"""Client, ClientWorkout, ClientExercise and ClientSet models."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Client(Base):
    """A trainee managed by one trainer (user)."""

    __tablename__ = "clients"
    __table_args__ = (Index("ix_clients_user_created", "user_id", "created_at"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped["User"] = relationship("User", back_populates="clients")
    workouts: Mapped[list["ClientWorkout"]] = relationship(
        "ClientWorkout", back_populates="client", cascade="all, delete-orphan", passive_deletes=True
    )
    messages: Mapped[list["ClientMessage"]] = relationship(
        "ClientMessage", back_populates="client", cascade="all, delete-orphan", passive_deletes=True
    )
    metrics: Mapped[list["ClientMetric"]] = relationship(
        "ClientMetric", back_populates="client", cascade="all, delete-orphan", passive_deletes=True
    )


class ClientWorkout(Base):
    """Per-client copy of a workout; ``template_id`` is nulled if the source template goes away."""

    __tablename__ = "client_workouts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"), nullable=False, index=True
    )
    template_id: Mapped[int | None] = mapped_column(
        ForeignKey("workout_templates.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    client: Mapped["Client"] = relationship("Client", back_populates="workouts")
    exercises: Mapped[list["ClientExercise"]] = relationship(
        "ClientExercise", back_populates="workout", cascade="all, delete-orphan", passive_deletes=True
    )


class ClientExercise(Base):
    __tablename__ = "client_exercises"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client_workout_id: Mapped[int] = mapped_column(
        ForeignKey("client_workouts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    template_exercise_id: Mapped[int | None] = mapped_column(
        ForeignKey("template_exercises.id", ondelete="SET NULL"), nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    muscle_group: Mapped[str] = mapped_column(String(100), nullable=False)
    difficulty_level: Mapped[str] = mapped_column(String(50), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    workout: Mapped["ClientWorkout"] = relationship("ClientWorkout", back_populates="exercises")
    sets: Mapped[list["ClientSet"]] = relationship(
        "ClientSet", back_populates="exercise", cascade="all, delete-orphan", passive_deletes=True
    )


class ClientSet(Base):
    __tablename__ = "client_sets"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    client_exercise_id: Mapped[int] = mapped_column(
        ForeignKey("client_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    reps: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    exercise: Mapped["ClientExercise"] = relationship("ClientExercise", back_populates="sets")
