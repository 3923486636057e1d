"""
Recipe business logic.

Every write re-checks that the referenced category exists; nothing in the
store enforces it.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from auth.permissions import ensure_owner
from categories import repository as category_repository
from categories.service import NOT_FOUND_MESSAGE as CATEGORY_NOT_FOUND_MESSAGE
from core.db import serialize_document

from . import repository, schemas

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Recipe not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)


async def _require_category(db: AsyncIOMotorDatabase, category_id: str) -> dict:
    category = await category_repository.get_category_by_id(db, category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CATEGORY_NOT_FOUND_MESSAGE)
    return category


async def list_recipes(db: AsyncIOMotorDatabase) -> list[dict]:
    rows = await repository.list_recipes(db)
    return [serialize_document(row) for row in rows]


async def get_recipe(db: AsyncIOMotorDatabase, recipe_id: str) -> dict:
    row = await repository.get_recipe_by_id(db, recipe_id)
    if row is None:
        raise _not_found()
    return serialize_document(row)


async def create_recipe(
    db: AsyncIOMotorDatabase,
    payload: schemas.RecipeRequest,
    *,
    user_id: str,
) -> dict:
    category = await _require_category(db, payload.category)
    row = await repository.insert_recipe(
        db,
        user_id=user_id,
        category_id=category["_id"],
        title=payload.title,
        ingredients=payload.ingredients,
        directions=payload.directions,
        image_url=payload.imageUrl,
    )
    logger.info("recipe_created recipe_id=%s user_id=%s", row["_id"], user_id)
    return serialize_document(row)


async def update_recipe(
    db: AsyncIOMotorDatabase,
    recipe_id: str,
    payload: schemas.RecipeRequest,
    *,
    user_id: str,
) -> dict:
    current = await repository.get_recipe_by_id(db, recipe_id)
    if current is None:
        raise _not_found()
    ensure_owner(current, user_id)

    category = await _require_category(db, payload.category)
    row = await repository.replace_recipe_fields(
        db,
        current["_id"],
        category_id=category["_id"],
        title=payload.title,
        ingredients=payload.ingredients,
        directions=payload.directions,
        image_url=payload.imageUrl,
    )
    if row is None:
        raise _not_found()

    logger.info("recipe_updated recipe_id=%s user_id=%s", row["_id"], user_id)
    return serialize_document(row)


async def delete_recipe(db: AsyncIOMotorDatabase, recipe_id: str, *, user_id: str) -> dict:
    current = await repository.get_recipe_by_id(db, recipe_id)
    if current is None:
        raise _not_found()
    ensure_owner(current, user_id)

    row = await repository.delete_recipe(db, current["_id"])
    if row is None:
        raise _not_found()

    logger.info("recipe_deleted recipe_id=%s user_id=%s", row["_id"], user_id)
    return serialize_document(row)
