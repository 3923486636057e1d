"""
Auth security helpers: password hashing and identity tokens.
"""

from __future__ import annotations

import os
import time
from typing import Any

import bcrypt
import jwt


BCRYPT_MAX_BYTES = 72


class AuthSecurityError(RuntimeError):
    pass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def jwt_secret() -> str:
    # Local default keeps development simple.
    # In production, set JWT_SECRET in environment.
    return os.environ.get("JWT_SECRET", "dev-change-this-secret").strip() or "dev-change-this-secret"


def jwt_algorithm() -> str:
    return os.environ.get("JWT_ALG", "HS256").strip() or "HS256"


def token_expire_seconds() -> int:
    return _env_int("TOKEN_EXPIRE_SECONDS", 360000)


def bcrypt_rounds() -> int:
    return _env_int("BCRYPT_ROUNDS", 10)


def now_epoch_s() -> int:
    return int(time.time())


def _password_bytes(plain_password: str) -> bytes:
    # bcrypt only reads the first 72 bytes; newer releases refuse longer input.
    return (plain_password or "").encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    password = _password_bytes(plain_password)
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt(rounds=bcrypt_rounds())).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = _password_bytes(plain_password)
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_access_token(*, user_id: str) -> str:
    """
    Sign a token carrying only the user id (`sub`) and its lifetime.
    """
    subject = (user_id or "").strip()
    if not subject:
        raise AuthSecurityError("Token subject is empty.")

    issued_at = now_epoch_s()
    payload = {
        "sub": subject,
        "iat": issued_at,
        "exp": issued_at + token_expire_seconds(),
    }
    return jwt.encode(payload, jwt_secret(), algorithm=jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(
            raw,
            jwt_secret(),
            algorithms=[jwt_algorithm()],
            options={"require": ["sub", "exp"]},
        )
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    subject = str(payload.get("sub") or "").strip()
    if not subject:
        raise AuthSecurityError("Access token has no subject.")

    return payload
