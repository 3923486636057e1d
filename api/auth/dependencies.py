"""
Auth dependencies for protected FastAPI routes.

The token travels in the `x-auth-token` header (not an Authorization bearer
scheme). Only create/update/delete routes depend on `get_current_user`.
"""

from __future__ import annotations

from fastapi import Header, HTTPException, status

from . import security

TOKEN_HEADER = "x-auth-token"


def _extract_token(raw_token: str | None) -> str:
    token = (raw_token or "").strip()
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )
    return token


async def get_current_user(x_auth_token: str | None = Header(default=None, alias=TOKEN_HEADER)) -> dict:
    token = _extract_token(x_auth_token)
    try:
        payload = security.decode_access_token(token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        ) from exc

    return {"id": str(payload["sub"])}
