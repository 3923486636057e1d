"""
MongoDB access helpers using motor.

The client is created once per process in the FastAPI lifespan (see
`api/main.py`) and the database handle is stored on `app.state.db`. Routes get
it through the `get_db` dependency and pass it explicitly to services and
repositories.

Collections:
- users
- categories
- recipes
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_MONGO_DB = "recipes"

USERS = "users"
CATEGORIES = "categories"
RECIPES = "recipes"

logger = logging.getLogger(__name__)


def mongo_uri() -> str:
    return os.environ.get("MONGO_URI", DEFAULT_MONGO_URI).strip() or DEFAULT_MONGO_URI


def mongo_db_name() -> str:
    return os.environ.get("MONGO_DB", DEFAULT_MONGO_DB).strip() or DEFAULT_MONGO_DB


def create_client(uri: str | None = None) -> AsyncIOMotorClient:
    # Motor connects lazily; the first operation opens the pool.
    return AsyncIOMotorClient(uri or mongo_uri(), tz_aware=True)


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    await database[USERS].create_index("email", unique=True)
    await database[CATEGORIES].create_index("title")
    await database[RECIPES].create_index("date_published")


def get_db(request: Request) -> AsyncIOMotorDatabase:
    database = getattr(request.app.state, "db", None)
    if database is None:
        raise RuntimeError("Database is not initialized. Connect it in the app lifespan.")
    return database


def as_object_id(value: str | ObjectId) -> ObjectId:
    """
    Convert a path/payload identifier into an ObjectId.

    Raises `bson.errors.InvalidId` for malformed values; the error handlers in
    `core.errors` turn that into a 400 response.
    """
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        # Stored dates come back naive unless the client is tz_aware; both are UTC.
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return value


def serialize_document(document: dict[str, Any]) -> dict[str, Any]:
    """
    Render a stored document as a JSON-safe dict (ObjectIds as hex strings).
    """
    return {key: _serialize_value(value) for key, value in document.items()}
