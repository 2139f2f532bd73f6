"""Pydantic-schemas for per-owner application settings.
"""
# app/schemas/settings.py
from typing import Literal
from pydantic import BaseModel, ConfigDict, field_validator

SettingsField = Literal['departments', 'report_categories', 'custom_guide_questions']


class SettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    departments: list[str]
    report_categories: list[str]
    custom_guide_questions: list[str]


class SettingsUpdateIn(BaseModel):
    field: SettingsField
    action: Literal['add', 'remove']
    value: str

    @field_validator("value")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value must not be blank")
        return v
