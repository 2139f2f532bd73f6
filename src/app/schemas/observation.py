"""Pydantic-schemas for field observations.
"""
# app/schemas/observation.py
from datetime import date as date_type, datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

Sentiment = Literal['positive', 'neutral', 'negative']


class ObservationCreateIn(BaseModel):
    author: str
    date: date_type | None = None
    category: str = "psicossocial"
    sentiment: Sentiment = "neutral"
    checklist: dict[str, str] = Field(default_factory=dict)
    summary: str = ""

    @field_validator("author")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("author is required")
        return v


class ObservationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    observation_id: str
    date: date_type
    author: str
    category: str
    content: str
    sentiment: Sentiment
    created_at: datetime | None = None
