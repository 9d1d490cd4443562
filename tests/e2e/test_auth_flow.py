"""End-to-end tests for registration, login and health."""

import pytest
from fastapi.testclient import TestClient

from quotevote.interface.api.app import create_app
from quotevote.util.di.container import setup_di
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


class TestAuthEndpoints:
    def test_register_and_login(self, client):
        # Act
        response = client.post(
            "/auth/register", json={"username": "alice", "password": "s3cret-pass"}
        )

        # Assert
        assert response.status_code == 201
        assert response.json() == {"message": "User registered", "username": "alice"}

        response = client.post(
            "/auth/login", json={"username": "alice", "password": "s3cret-pass"}
        )
        assert response.status_code == 200
        assert response.json()["token"]

    def test_duplicate_registration_conflicts(self, client):
        body = {"username": "alice", "password": "s3cret-pass"}
        client.post("/auth/register", json=body)

        response = client.post("/auth/register", json=body)

        assert response.status_code == 409
        assert response.json() == {"error": "username already exists"}

    def test_invalid_registration_input(self, client):
        response = client.post(
            "/auth/register", json={"username": "alice", "password": "abc"}
        )

        assert response.status_code == 400

    def test_wrong_password_unauthorized(self, client):
        client.post(
            "/auth/register", json={"username": "alice", "password": "s3cret-pass"}
        )

        response = client.post(
            "/auth/login", json={"username": "alice", "password": "wrong-pass"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "incorrect username or password"}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
