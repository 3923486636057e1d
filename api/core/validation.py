"""
Request payload validation.

Mutating routes declare their body through `validated_body(...)` as the first
dependency. FastAPI resolves dependencies in declaration order, so a bad
payload is rejected before the auth dependency or any store access runs.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def first_error_message(errors: list[dict[str, Any]]) -> str:
    """
    Describe the first failing constraint, e.g. `title: String should have at least 3 characters`.
    """
    if not errors:
        return "Invalid request payload."
    error = errors[0]
    field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = str(error.get("msg") or "Invalid value.")
    return f"{field}: {message}" if field else message


def validated_body(schema: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    async def dependency(request: Request) -> ModelT:
        try:
            payload = await request.json()
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body must be valid JSON.",
            ) from exc

        try:
            return schema.model_validate(payload)
        except ValidationError as exc:
            raise RequestValidationError(exc.errors(include_url=False), body=payload) from exc

    dependency.__name__ = f"validated_{schema.__name__}"
    return dependency
