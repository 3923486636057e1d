"""
Auth business logic: registration and login.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from . import repository, schemas, security

logger = logging.getLogger(__name__)


def _issue_token(user_row: dict, msg: str) -> schemas.TokenResponse:
    token = security.build_access_token(user_id=str(user_row["_id"]))
    return schemas.TokenResponse(msg=msg, token=token)


async def register(db: AsyncIOMotorDatabase, payload: schemas.RegisterRequest) -> schemas.TokenResponse:
    existing = await repository.get_user_by_email(db, payload.email)
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )

    password_hash = security.hash_password(payload.password)
    try:
        user_row = await repository.create_user(
            db,
            name=payload.name,
            email=payload.email,
            password_hash=password_hash,
        )
    except DuplicateKeyError as exc:
        # Lost a race against a concurrent registration with the same email.
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        ) from exc

    logger.info("user_registered user_id=%s", user_row["_id"])
    return _issue_token(user_row, "User registered successfully")


async def login(db: AsyncIOMotorDatabase, payload: schemas.LoginRequest) -> schemas.TokenResponse:
    user_row = await repository.get_user_by_email(db, payload.email)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    is_valid = security.verify_password(payload.password, str(user_row.get("password") or ""))
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials",
        )

    logger.info("user_logged_in user_id=%s", user_row["_id"])
    return _issue_token(user_row, "User logged in successfully")
