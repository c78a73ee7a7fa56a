from datetime import timedelta

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from shared.core.auth import create_access_token, decode_token
from shared.core.database import get_db
from inventory_service.app.main import app


@pytest.fixture
def raw_client(session_factory):
    """Client with the real token check in place."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


def test_token_round_trip():
    token = create_access_token(
        {"user_id": "u1", "workspace_id": "w1", "role": "ADMIN"})

    decoded = decode_token(token)

    assert decoded.user_id == "u1"
    assert decoded.workspace_id == "w1"
    assert decoded.role == "ADMIN"
    assert decoded.exp is not None


def test_expired_token_is_rejected():
    token = create_access_token({"user_id": "u1"}, expires_delta=timedelta(minutes=-5))

    with pytest.raises(HTTPException) as exc_info:
        decode_token(token)

    assert exc_info.value.status_code == 401


def test_token_without_user_is_rejected():
    with pytest.raises(HTTPException):
        decode_token(create_access_token({"sub": "someone"}))


def test_missing_token_is_refused(raw_client):
    response = raw_client.get("/api/type/")

    assert response.status_code in (401, 403)


def test_garbage_token_is_refused(raw_client):
    response = raw_client.get(
        "/api/type/", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


def test_valid_token_is_accepted(raw_client):
    token = create_access_token({"user_id": "u1"})

    response = raw_client.get(
        "/api/type/", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json() == []


def test_health_needs_no_token(raw_client):
    response = raw_client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
