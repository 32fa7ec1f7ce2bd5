import pytest

from config import TestConfig
from habit_tracker import create_app, db


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(client):
    """Register a user and return (auth headers, user dict)."""

    def _register(name="Ada", email="ada@example.com", password="secret123"):
        resp = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert resp.status_code == 201, resp.get_json()
        body = resp.get_json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]

    return _register


@pytest.fixture
def create_habit(client):
    def _create(headers, **fields):
        payload = {"title": "Read"}
        payload.update(fields)
        resp = client.post("/api/habits", json=payload, headers=headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["habit"]

    return _create
