"""Pydantic-schemas for ad-hoc reports.
"""
# app/schemas/report.py
from typing import Literal
from pydantic import BaseModel, Field, model_validator

from src.app.core.config import settings

ReportMode = Literal['general', 'department', 'category', 'kpi', 'specific_survey']


class ReportFilters(BaseModel):
    mode: ReportMode = 'general'
    days: int = Field(settings.REPORT_DEFAULT_DAYS, ge=1)
    department: str = 'all'
    survey_id: str | None = None

    @model_validator(mode="after")
    def _survey_required_for_specific(self):
        if self.mode == 'specific_survey' and not self.survey_id:
            raise ValueError("survey_id is required for specific_survey reports")
        return self


class ReportRow(BaseModel):
    item: str
    metric: str
    value: int
    count: int


class ReportOut(BaseModel):
    mode: ReportMode
    rows: list[ReportRow]
