from __future__ import annotations

import asyncio

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from aroundtheus.main import app
from aroundtheus.models.user import UserCreate
from aroundtheus.services import database
from aroundtheus.services.users import (
    SlugConflictError,
    UserError,
    UserExistsError,
    create_user,
    get_user_by_slug,
    pwd_ctx,
)

PAYLOAD = UserCreate(
    name="Jacques Cousteau",
    about="Sailor, researcher",
    email="bob@yandex.com",
    avatar="https://pictures.s3.yandex.net/avatar.jpg",
    password="1amAp0k3m0n%",
)


def test_password_is_stored_hashed(db, settings):
    asyncio.run(create_user(db, PAYLOAD, settings))
    doc = asyncio.run(db.users.find_one({"email": PAYLOAD.email}))
    assert doc["hashed_pw"] != PAYLOAD.password
    assert pwd_ctx.verify(PAYLOAD.password, doc["hashed_pw"])


def test_lookup_by_slug(db, settings):
    created = asyncio.run(create_user(db, PAYLOAD, settings))
    found = asyncio.run(get_user_by_slug(db, created.slug))
    assert found.model_dump(exclude={"created_at"}) == created.model_dump(exclude={"created_at"})
    assert asyncio.run(get_user_by_slug(db, "missing")) is None


def test_duplicate_email_raises(db, settings):
    async def scenario():
        await database.ensure_indexes(db)
        await create_user(db, PAYLOAD, settings)
        await create_user(db, PAYLOAD, settings)

    with pytest.raises(UserExistsError):
        asyncio.run(scenario())


_real_insert_one = mongomock.collection.Collection.insert_one


def _failing_inserts(failures: int, on_fail=None):
    """insert_one replacement raising DuplicateKeyError for the first `failures` calls."""
    calls = {"n": 0}

    def insert_one(self, document, *args, **kwargs):
        calls["n"] += 1
        if calls["n"] <= failures:
            if on_fail is not None:
                on_fail(self)
            raise DuplicateKeyError(f"E11000 duplicate key slug {document['slug']}")
        return _real_insert_one(self, document, *args, **kwargs)

    return insert_one


def test_slug_taken_during_insert_is_retried(db, settings, monkeypatch):
    monkeypatch.setattr(mongomock.collection.Collection, "insert_one", _failing_inserts(1))

    created = asyncio.run(create_user(db, PAYLOAD, settings))

    assert created.slug.startswith("jacques-cousteau-")
    assert created.url == f"http://test.local/{created.slug}"
    assert asyncio.run(get_user_by_slug(db, created.slug)) is not None


def test_every_insert_losing_the_slug_raises_user_error(db, settings, monkeypatch):
    monkeypatch.setattr(mongomock.collection.Collection, "insert_one", _failing_inserts(99))

    with pytest.raises(SlugConflictError) as info:
        asyncio.run(create_user(db, PAYLOAD, settings))
    assert isinstance(info.value, UserError)


def test_email_taken_during_insert_raises_user_exists(db, settings, monkeypatch):
    def other_request_wins(collection):
        _real_insert_one(collection, {"email": PAYLOAD.email, "slug": "someone-else"})

    monkeypatch.setattr(
        mongomock.collection.Collection,
        "insert_one",
        _failing_inserts(1, on_fail=other_request_wins),
    )

    with pytest.raises(UserExistsError):
        asyncio.run(create_user(db, PAYLOAD, settings))


def test_slug_conflict_is_409(client, monkeypatch):
    monkeypatch.setattr(mongomock.collection.Collection, "insert_one", _failing_inserts(99))

    res = client.post("/users", json=PAYLOAD.model_dump())
    assert res.status_code == 409
    assert res.json()["detail"] == "Could not allocate a free profile slug"


class _FakeClient:
    def __init__(self, db):
        self.db = db
        self.closed = False

    def get_default_database(self):
        return self.db

    def close(self):
        self.closed = True


def test_lifespan_opens_and_closes_client(db, monkeypatch):
    fake = _FakeClient(db)
    monkeypatch.setattr(database, "connect", lambda settings: fake)

    with TestClient(app) as client:
        assert app.state.db is db
        assert client.get("/").text == "Hello, world!"
    assert fake.closed
