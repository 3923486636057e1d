"""
Pydantic schemas for recipe endpoints.
"""

from __future__ import annotations

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"

_uri_adapter = TypeAdapter(AnyUrl)


class RecipeRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    category: str = Field(..., pattern=OBJECT_ID_PATTERN)
    title: str = Field(..., min_length=3, max_length=100)
    ingredients: str = Field(..., min_length=3, max_length=1024)
    directions: str = Field(..., min_length=3, max_length=1024)
    imageUrl: str | None = None

    @field_validator("imageUrl")
    @classmethod
    def image_url_is_uri(cls, value: str | None) -> str | None:
        # Checked as a URI but stored exactly as sent. Omitting the key is
        # allowed; an explicit null is not.
        if value is None:
            raise ValueError("must be a valid uri")
        try:
            _uri_adapter.validate_python(value)
        except ValidationError as exc:
            raise ValueError("must be a valid uri") from exc
        return value
