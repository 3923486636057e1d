"""
Category API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from auth import dependencies as auth_dependencies
from core.db import get_db
from core.validation import validated_body

from . import schemas, service

router = APIRouter(prefix="/api/categories")


@router.get("")
async def list_categories(db: AsyncIOMotorDatabase = Depends(get_db)) -> dict:
    return {"categories": await service.list_categories(db)}


@router.get("/{category_id}")
async def get_category(category_id: str, db: AsyncIOMotorDatabase = Depends(get_db)) -> dict:
    return {"category": await service.get_category(db, category_id)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: schemas.CategoryRequest = Depends(validated_body(schemas.CategoryRequest)),
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> dict:
    category = await service.create_category(db, payload, user_id=current_user["id"])
    return {"msg": "Category registered successfully", "category": category}


@router.put("/{category_id}")
async def update_category(
    category_id: str,
    payload: schemas.CategoryRequest = Depends(validated_body(schemas.CategoryRequest)),
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> dict:
    category = await service.update_category(db, category_id, payload, user_id=current_user["id"])
    return {"msg": "Category updated successfully", "category": category}


@router.delete("/{category_id}")
async def delete_category(
    category_id: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> dict:
    category = await service.delete_category(db, category_id, user_id=current_user["id"])
    return {"msg": "Category deleted successfully", "category": category}
