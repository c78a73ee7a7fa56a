"""Shared fixtures: an in-memory SQLite database per test and a TestClient
wired to it through dependency overrides."""

import os

# Must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient

from shared.core.auth import validate_current_token
from shared.core.database import Base, build_engine, build_session_factory, get_db
from shared.core.schemas import UserToken
from inventory_service.app.main import app
from inventory_service.app.schemas.category_schemas import CategoryCreate
from inventory_service.app.schemas.location_schemas import LocationCreate
from inventory_service.app.schemas.type_schemas import TypeCreate
from inventory_service.app.schemas.user_schemas import UserCreate
from inventory_service.app.schemas.workspace_schemas import WorkspaceCreate
from inventory_service.app.services import (
    category_service,
    location_service,
    type_service,
    user_service,
    workspace_service,
)


@pytest.fixture
def session_factory():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    try:
        yield build_session_factory(engine)
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[validate_current_token] = lambda: UserToken(
        user_id="test-user")
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def user_id(db):
    user = user_service.create_user(db, UserCreate(
        name="owner", email="owner@example.com", password="s3cret"))
    return user.id


@pytest.fixture
def workspace_id(db, user_id):
    workspace = workspace_service.create_workspace(
        db, WorkspaceCreate(name="Main", owner_id=user_id))
    return workspace.id


@pytest.fixture
def type_id(db):
    return type_service.create_type(db, TypeCreate(name="Tool")).id


@pytest.fixture
def category_id(db, workspace_id):
    category = category_service.create_category(
        db, CategoryCreate(workspace_id=workspace_id, name="Hardware"))
    return category.id


@pytest.fixture
def location_id(db, workspace_id):
    location = location_service.create_location(
        db, LocationCreate(workspace_id=workspace_id, name="Warehouse A"))
    return location.id
