"""Registration, login, token verification and language preference."""

from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.enums import Language, normalize_language
from app.core.exceptions import AuthError, ConflictError
from app.core.security import create_access_token, decode_access_token, hash_password, verify_password
from app.models.user import User
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserRead

logger = logging.getLogger(__name__)


def _user_read(user: User) -> UserRead:
    return UserRead(id=user.id, username=user.username, language=normalize_language(user.language))


async def register(db: AsyncSession, payload: RegisterRequest, settings: Settings) -> AuthResponse:
    """Create the user (password hashed) and hand back a signed token."""
    existing = await db.execute(select(User.id).where(User.username == payload.username))
    if existing.scalar_one_or_none() is not None:
        raise ConflictError("Username already exists")

    user = User(
        username=payload.username,
        password=hash_password(payload.password),
        language=normalize_language(payload.language).value,
    )
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        # Lost a race with a concurrent registration of the same name
        await db.rollback()
        raise ConflictError("Username already exists") from e

    logger.info("Registered user %s (id=%s)", user.username, user.id)
    return AuthResponse(
        message="User registered successfully",
        user=_user_read(user),
        token=create_access_token(user.id, settings),
    )


async def login(db: AsyncSession, payload: LoginRequest, settings: Settings) -> AuthResponse:
    result = await db.execute(select(User).where(User.username == payload.username))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(payload.password, user.password):
        raise AuthError("Invalid credentials")
    return AuthResponse(
        message="Login successful",
        user=_user_read(user),
        token=create_access_token(user.id, settings),
    )


def verify_token(token: str | None, settings: Settings) -> int:
    """User id carried by a valid bearer token; AuthError otherwise."""
    return decode_access_token(token, settings)


async def update_language(db: AsyncSession, user_id: int, language: str | None) -> Language:
    normalized = normalize_language(language)
    await db.execute(update(User).where(User.id == user_id).values(language=normalized.value))
    return normalized
