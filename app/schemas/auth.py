"""Auth and user preference schemas."""

from pydantic import Field

from app.core.enums import Language
from app.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)
    language: str | None = None  # unknown values fall back to "en"


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserRead(CamelModel):
    id: int
    username: str
    language: Language


class AuthResponse(CamelModel):
    message: str
    user: UserRead
    token: str


class PreferencesUpdate(CamelModel):
    language: str | None = None


class PreferencesRead(CamelModel):
    language: Language
