"""
Category persistence (`categories` collection).
"""

from __future__ import annotations

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from core.db import CATEGORIES, as_object_id


async def list_categories(db: AsyncIOMotorDatabase) -> list[dict]:
    cursor = db[CATEGORIES].find({}, sort=[("title", ASCENDING), ("_id", ASCENDING)])
    return await cursor.to_list(length=None)


async def get_category_by_id(db: AsyncIOMotorDatabase, category_id: str | ObjectId) -> dict | None:
    return await db[CATEGORIES].find_one({"_id": as_object_id(category_id)})


async def insert_category(db: AsyncIOMotorDatabase, *, title: str, user_id: str) -> dict:
    document = {
        "title": title,
        "user": as_object_id(user_id),
    }
    result = await db[CATEGORIES].insert_one(document)
    document["_id"] = result.inserted_id
    return document


async def update_category(db: AsyncIOMotorDatabase, category_id: str | ObjectId, *, title: str) -> dict | None:
    return await db[CATEGORIES].find_one_and_update(
        {"_id": as_object_id(category_id)},
        {"$set": {"title": title}},
        return_document=ReturnDocument.AFTER,
    )


async def delete_category(db: AsyncIOMotorDatabase, category_id: str | ObjectId) -> dict | None:
    return await db[CATEGORIES].find_one_and_delete({"_id": as_object_id(category_id)})
