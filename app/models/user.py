"""User model - a trainer account that owns templates and clients."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import DEFAULT_LANGUAGE
from app.db.base import Base


class User(Base):
    """Trainer account. ``password`` holds the bcrypt hash, never the plaintext."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    language: Mapped[str] = mapped_column(String(10), nullable=False, default=DEFAULT_LANGUAGE.value)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    templates: Mapped[list["WorkoutTemplate"]] = relationship(
        "WorkoutTemplate", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    clients: Mapped[list["Client"]] = relationship(
        "Client", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
