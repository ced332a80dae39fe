from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from aroundtheus.core.config import Settings, get_settings
from aroundtheus.main import app
from aroundtheus.services.database import get_db


@pytest.fixture()
def settings():
    return Settings(public_base_url="http://test.local")


@pytest.fixture()
def db():
    """Fresh in-memory Mongo database per test."""
    return AsyncMongoMockClient()["aroundtheus_test"]


@pytest.fixture()
def client(db, settings):
    """TestClient with the database and settings dependencies swapped out.

    Used without a `with` block so the lifespan (real Motor client) is not run.
    """
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
