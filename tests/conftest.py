import uuid

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_application


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        environment="test",
        jwt_secret="test-secret",
        database_url=None,
        sqlite_db_file_test=str(tmp_path / "test.sqlite3"),
        auto_create_tables=True,
    )


@pytest.fixture
def client(settings):
    app = create_application(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    """Register a fresh trainer; returns token, user id and auth headers."""

    def _register(username=None, password="super-secret", **extra):
        username = username or f"tester-{uuid.uuid4().hex[:8]}"
        response = client.post("/register", json={"username": username, "password": password, **extra})
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "token": body["token"],
            "user_id": body["user"]["id"],
            "username": username,
            "password": password,
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }

    return _register


UPPER_BODY = {
    "name": "Upper Body",
    "description": "Push focus",
    "exercises": [
        {
            "name": "Bench Press",
            "muscleGroup": "Chest",
            "difficultyLevel": "Intermediate",
            "sets": [
                {"setNumber": 1, "weight": 80, "reps": 8},
                {"setNumber": 2, "weight": 82.5, "reps": 6},
            ],
        },
        {
            "name": "Pull Up",
            "muscleGroup": "Back",
            "difficultyLevel": "Advanced",
            "sets": [{"setNumber": 1, "weight": 0, "reps": 10}],
        },
    ],
}


@pytest.fixture
def upper_body():
    return UPPER_BODY
