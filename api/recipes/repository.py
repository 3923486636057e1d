"""
Recipe persistence (`recipes` collection).
"""

from __future__ import annotations

from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument

from core.db import RECIPES, as_object_id


def _mutable_fields(
    *,
    category_id: str | ObjectId,
    title: str,
    ingredients: str,
    directions: str,
    image_url: str | None,
) -> dict:
    return {
        "category": as_object_id(category_id),
        "title": title,
        "ingredients": ingredients,
        "directions": directions,
        "imageUrl": image_url,
    }


def _utc_now_ms() -> datetime:
    # BSON dates keep millisecond precision.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


async def list_recipes(db: AsyncIOMotorDatabase) -> list[dict]:
    cursor = db[RECIPES].find({}, sort=[("date_published", ASCENDING), ("_id", ASCENDING)])
    return await cursor.to_list(length=None)


async def get_recipe_by_id(db: AsyncIOMotorDatabase, recipe_id: str | ObjectId) -> dict | None:
    return await db[RECIPES].find_one({"_id": as_object_id(recipe_id)})


async def insert_recipe(
    db: AsyncIOMotorDatabase,
    *,
    user_id: str,
    category_id: str | ObjectId,
    title: str,
    ingredients: str,
    directions: str,
    image_url: str | None = None,
) -> dict:
    document = {
        "user": as_object_id(user_id),
        **_mutable_fields(
            category_id=category_id,
            title=title,
            ingredients=ingredients,
            directions=directions,
            image_url=image_url,
        ),
        "date_published": _utc_now_ms(),
    }
    result = await db[RECIPES].insert_one(document)
    document["_id"] = result.inserted_id
    return document


async def replace_recipe_fields(
    db: AsyncIOMotorDatabase,
    recipe_id: str | ObjectId,
    *,
    category_id: str | ObjectId,
    title: str,
    ingredients: str,
    directions: str,
    image_url: str | None = None,
) -> dict | None:
    """
    Overwrite every mutable field. `user` and `date_published` are never touched.
    """
    return await db[RECIPES].find_one_and_update(
        {"_id": as_object_id(recipe_id)},
        {
            "$set": _mutable_fields(
                category_id=category_id,
                title=title,
                ingredients=ingredients,
                directions=directions,
                image_url=image_url,
            )
        },
        return_document=ReturnDocument.AFTER,
    )


async def delete_recipe(db: AsyncIOMotorDatabase, recipe_id: str | ObjectId) -> dict | None:
    return await db[RECIPES].find_one_and_delete({"_id": as_object_id(recipe_id)})
