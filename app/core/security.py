"""Security utilities (passwords, JWT)."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings
from app.core.exceptions import AuthError, InternalError

logger = logging.getLogger(__name__)

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return password_context.verify(plain, hashed)
    except ValueError:
        # Stored value is not a recognisable hash
        return False


def require_secret(settings: Settings) -> str:
    if not settings.jwt_secret:
        logger.error("JWT_SECRET is not set in the environment variables")
        raise InternalError()
    return settings.jwt_secret


def create_access_token(user_id: int, settings: Settings, expires_delta: timedelta | None = None) -> str:
    """Sign a token carrying ``userId``; defaults to the configured expiry (one day)."""
    secret = require_secret(settings)
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({"userId": user_id, "exp": expire}, secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str | None, settings: Settings) -> int:
    """Return the user id in a valid token, or raise AuthError."""
    secret = require_secret(settings)
    if not token:
        raise AuthError("Bearer token is missing")
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise AuthError("Invalid or expired token") from e
    user_id = payload.get("userId")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise AuthError("Invalid or expired token")
    return user_id
