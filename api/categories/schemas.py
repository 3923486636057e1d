"""
Pydantic schemas for category endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CategoryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=3, max_length=100)
