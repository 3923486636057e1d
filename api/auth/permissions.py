"""
Ownership checks shared by the category and recipe services.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

FORBIDDEN_MESSAGE = "You're not authorized to perform this action"


def is_owner(document: dict[str, Any], user_id: str) -> bool:
    owner = document.get("user")
    if owner is None or not user_id:
        return False
    return str(owner) == str(user_id)


def ensure_owner(document: dict[str, Any], user_id: str) -> None:
    if not is_owner(document, user_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=FORBIDDEN_MESSAGE,
        )
