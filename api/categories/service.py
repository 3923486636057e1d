"""
Category business logic.

Reads are public. Create/update/delete run with the authenticated user id;
update and delete are limited to the category owner.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from auth.permissions import ensure_owner
from core.db import serialize_document

from . import repository, schemas

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Category not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_MESSAGE)


async def list_categories(db: AsyncIOMotorDatabase) -> list[dict]:
    rows = await repository.list_categories(db)
    return [serialize_document(row) for row in rows]


async def get_category(db: AsyncIOMotorDatabase, category_id: str) -> dict:
    row = await repository.get_category_by_id(db, category_id)
    if row is None:
        raise _not_found()
    return serialize_document(row)


async def create_category(
    db: AsyncIOMotorDatabase,
    payload: schemas.CategoryRequest,
    *,
    user_id: str,
) -> dict:
    row = await repository.insert_category(db, title=payload.title, user_id=user_id)
    logger.info("category_created category_id=%s user_id=%s", row["_id"], user_id)
    return serialize_document(row)


async def update_category(
    db: AsyncIOMotorDatabase,
    category_id: str,
    payload: schemas.CategoryRequest,
    *,
    user_id: str,
) -> dict:
    current = await repository.get_category_by_id(db, category_id)
    if current is None:
        raise _not_found()
    ensure_owner(current, user_id)

    row = await repository.update_category(db, current["_id"], title=payload.title)
    if row is None:
        # Deleted between the ownership check and the write.
        raise _not_found()

    logger.info("category_updated category_id=%s user_id=%s", row["_id"], user_id)
    return serialize_document(row)


async def delete_category(db: AsyncIOMotorDatabase, category_id: str, *, user_id: str) -> dict:
    current = await repository.get_category_by_id(db, category_id)
    if current is None:
        raise _not_found()
    ensure_owner(current, user_id)

    row = await repository.delete_category(db, current["_id"])
    if row is None:
        raise _not_found()

    logger.info("category_deleted category_id=%s user_id=%s", row["_id"], user_id)
    return serialize_document(row)
