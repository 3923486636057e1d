"""
Recipe API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from auth import dependencies as auth_dependencies
from core.db import get_db
from core.validation import validated_body

from . import schemas, service

router = APIRouter(prefix="/api/recipes")


@router.get("")
async def list_recipes(db: AsyncIOMotorDatabase = Depends(get_db)) -> dict:
    return {"recipes": await service.list_recipes(db)}


@router.get("/{recipe_id}")
async def get_recipe(recipe_id: str, db: AsyncIOMotorDatabase = Depends(get_db)) -> dict:
    return {"recipe": await service.get_recipe(db, recipe_id)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(
    payload: schemas.RecipeRequest = Depends(validated_body(schemas.RecipeRequest)),
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> dict:
    recipe = await service.create_recipe(db, payload, user_id=current_user["id"])
    return {"msg": "Recipe registered successfully", "recipe": recipe}


@router.put("/{recipe_id}")
async def update_recipe(
    recipe_id: str,
    payload: schemas.RecipeRequest = Depends(validated_body(schemas.RecipeRequest)),
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> dict:
    recipe = await service.update_recipe(db, recipe_id, payload, user_id=current_user["id"])
    return {"msg": "Recipe updated successfully", "recipe": recipe}


@router.delete("/{recipe_id}")
async def delete_recipe(
    recipe_id: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> dict:
    recipe = await service.delete_recipe(db, recipe_id, user_id=current_user["id"])
    return {"msg": "Recipe deleted successfully", "recipe": recipe}
