"""Pydantic-schemas for strategic planning: SWOT, goals and budget items.
"""
# app/schemas/strategy.py
from datetime import date, datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

SwotType = Literal['strength', 'weakness', 'opportunity', 'threat']


def required_text(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("must not be blank")
    return v


class SwotIn(BaseModel):
    text: str
    type: SwotType

    @field_validator("text")
    @classmethod
    def _text_required(cls, v: str) -> str:
        return required_text(v)


class SwotOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    swot_id: str
    text: str
    type: SwotType
    created_at: datetime | None = None


class GoalIn(BaseModel):
    text: str
    deadline: date
    kpi_target: str | None = None

    @field_validator("text")
    @classmethod
    def _text_required(cls, v: str) -> str:
        return required_text(v)


class GoalOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    goal_id: str
    text: str
    status: str
    deadline: date
    kpi_target: str
    created_at: datetime | None = None


class StrategicResourceIn(BaseModel):
    item: str
    cost: float = Field(..., ge=0)

    @field_validator("item")
    @classmethod
    def _item_required(cls, v: str) -> str:
        return required_text(v)


class StrategicResourceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    strategic_resource_id: str
    item: str
    cost: float
    allocated: bool
    created_at: datetime | None = None
