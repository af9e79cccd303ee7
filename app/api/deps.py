"""Shared request dependencies: settings, DB session, authenticated user."""

from typing import Annotated

from fastapi import Depends, Path, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings
from app.core.exceptions import AuthError
from app.core.security import require_secret
from app.schemas.common import MAX_INT
from app.services.auth import verify_token

bearer_scheme = HTTPBearer(auto_error=False)

# Out-of-range ids are rejected with 400 before they reach the driver
PathId = Annotated[int, Path(ge=1, le=MAX_INT)]


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_current_user_id(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
) -> int:
    """Resolve ``Authorization: Bearer <token>`` to a user id (401 otherwise).

    A missing JWT secret is a server fault and wins over a missing header.
    """
    require_secret(settings)
    if not request.headers.get("Authorization"):
        raise AuthError("Authorization header is required")
    return verify_token(credentials.credentials if credentials else None, settings)
