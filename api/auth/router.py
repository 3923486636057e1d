"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from core.db import get_db
from core.validation import validated_body

from . import schemas, service

router = APIRouter(prefix="/api/auth")


@router.post("/register", response_model=schemas.TokenResponse)
async def register(
    payload: schemas.RegisterRequest = Depends(validated_body(schemas.RegisterRequest)),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> schemas.TokenResponse:
    return await service.register(db, payload)


@router.post("/login", response_model=schemas.TokenResponse)
async def login(
    payload: schemas.LoginRequest = Depends(validated_body(schemas.LoginRequest)),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> schemas.TokenResponse:
    return await service.login(db, payload)
