"""
database.py – Motor client lifecycle

The client is created once in the app lifespan (`connect`) and closed on
shutdown (`close`); request handlers receive the database through the
`get_db` dependency instead of a module-level singleton.
"""

import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..core.config import Settings

log = logging.getLogger("database")


def connect(settings: Settings) -> AsyncIOMotorClient:
    """
    Build a Motor client for settings.mongo_uri.

    • settings.mongo_uri is a pydantic MongoDsn → cast to str.
    • uuidRepresentation="standard" keeps UUIDs driver-default.
    """
    log.info("Opening Mongo client")
    return AsyncIOMotorClient(str(settings.mongo_uri), uuidRepresentation="standard")


def close(client: AsyncIOMotorClient) -> None:
    client.close()
    log.info("Mongo client closed")


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Uniqueness lives in the store; the service pre-checks are best effort."""
    await db.users.create_index("email", unique=True)
    await db.users.create_index("slug", unique=True)


def get_db(request: Request) -> AsyncIOMotorDatabase:
    """FastAPI dependency – the database opened by the lifespan."""
    return request.app.state.db
