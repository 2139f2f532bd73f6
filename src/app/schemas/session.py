"""Pydantic-schemas for coaching sessions.
"""
# app/schemas/session.py
from datetime import date as date_type, datetime
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.db.models.coaching import SessionStatus, SessionType


class ActionPlanItem(BaseModel):
    id: str
    goal: str
    deadline: str = ""
    status: Literal['pending', 'in_progress', 'done'] = 'pending'


class SessionCreateIn(BaseModel):
    type: SessionType = SessionType.individual
    date: date_type
    participant_or_group: str

    @field_validator("participant_or_group")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("participant or group name is required")
        return v


class SessionSaveIn(BaseModel):
    private_notes: str = ""
    guide_answers: dict[str, str] = Field(default_factory=dict)
    action_plan: list[ActionPlanItem] = Field(default_factory=list)


class SessionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    session_id: str
    type: SessionType
    date: date_type
    participant_or_group: str
    status: SessionStatus
    private_notes: str | None = None
    guide_answers: dict[str, str] = Field(default_factory=dict)
    action_plan: list[ActionPlanItem] = Field(default_factory=list)
    created_at: datetime | None = None
