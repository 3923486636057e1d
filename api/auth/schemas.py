"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError("must be a valid email") from exc
    return value


class RegisterRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=3, max_length=25)
    email: str = Field(..., min_length=5, max_length=50)
    password: str = Field(..., min_length=5, max_length=255)

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        return _check_email(value)


class LoginRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: str = Field(..., min_length=5, max_length=50)
    password: str = Field(..., min_length=5, max_length=255)

    @field_validator("email")
    @classmethod
    def email_format(cls, value: str) -> str:
        return _check_email(value)


class TokenResponse(BaseModel):
    msg: str
    token: str
