"""
Auth persistence helpers (`users` collection).
"""

from __future__ import annotations

from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase

from core.db import USERS


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def create_user(
    db: AsyncIOMotorDatabase,
    *,
    name: str,
    email: str,
    password_hash: str,
) -> dict:
    document = {
        "name": name,
        "email": normalize_email(email),
        "password": password_hash,
        "date": datetime.now(timezone.utc),
    }
    result = await db[USERS].insert_one(document)
    document["_id"] = result.inserted_id
    return document


async def get_user_by_email(db: AsyncIOMotorDatabase, email: str) -> dict | None:
    return await db[USERS].find_one({"email": normalize_email(email)})
