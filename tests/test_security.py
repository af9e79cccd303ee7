from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from app.core.config import Settings
from app.core.exceptions import AuthError, InternalError
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


@pytest.fixture
def token_settings():
    return Settings(_env_file=None, jwt_secret="unit-secret")


def test_password_is_hashed_and_salted():
    first = hash_password("x")
    second = hash_password("x")
    assert first != "x"
    assert first != second
    assert verify_password("x", first)
    assert not verify_password("y", first)


def test_verify_password_rejects_garbage_hash():
    assert verify_password("x", "not-a-hash") is False


def test_token_round_trip(token_settings):
    token = create_access_token(42, token_settings)
    assert decode_access_token(token, token_settings) == 42


def test_token_expires_after_one_day(token_settings):
    token = create_access_token(1, token_settings)
    claims = jwt.get_unverified_claims(token)
    expires = datetime.fromtimestamp(claims["exp"], tz=timezone.utc)
    remaining = expires - datetime.now(timezone.utc)
    assert timedelta(hours=23) < remaining <= timedelta(days=1)


def test_expired_token_is_rejected(token_settings):
    token = create_access_token(1, token_settings, expires_delta=timedelta(seconds=-10))
    with pytest.raises(AuthError):
        decode_access_token(token, token_settings)


def test_token_signed_with_other_secret_is_rejected(token_settings):
    other = Settings(_env_file=None, jwt_secret="someone-else")
    token = create_access_token(1, other)
    with pytest.raises(AuthError):
        decode_access_token(token, token_settings)


@pytest.mark.parametrize("token", [None, "", "not.a.jwt"])
def test_absent_or_malformed_token_is_rejected(token_settings, token):
    with pytest.raises(AuthError):
        decode_access_token(token, token_settings)


def test_token_without_user_id_is_rejected(token_settings):
    token = jwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        token_settings.jwt_secret,
        algorithm="HS256",
    )
    with pytest.raises(AuthError):
        decode_access_token(token, token_settings)


def test_missing_secret_is_a_server_error():
    with pytest.raises(InternalError):
        create_access_token(1, Settings(_env_file=None, jwt_secret=""))
