"""Pydantic-schemas for the resource library.
"""
# app/schemas/resource.py
from pydantic import BaseModel, field_validator

from src.app.schemas.catalog import ResourceCategory, ResourceType


class ResourceCreateIn(BaseModel):
    title: str
    content: str
    type: ResourceType = "article"
    category: ResourceCategory = "mental"
    duration: str = "5 min"
    thumbnail: str = "📄"

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v
