"""Pydantic-schemas for dashboard sections.
"""
# app/schemas/dashboard.py
from typing import Generic, Literal, TypeVar
from pydantic import BaseModel

from src.llm_insights.schemas.analysis import AnalysisReport

T = TypeVar("T")


class KPIMetric(BaseModel):
    id: str
    label: str
    value: int
    unit: str
    change: int = 0
    trend: Literal['up', 'down', 'neutral']
    color: str
    inverse: bool | None = None


class ChartDataPoint(BaseModel):
    name: str
    mental: int
    fisico: int
    social: int
    material: int
    participacao: int


class DepartmentData(BaseModel):
    name: str
    mental: int
    fisico: int
    social: int
    material: int
    stress: int


class CategoryScore(BaseModel):
    name: str
    score: int
    color: str


class MoodSlice(BaseModel):
    name: str
    value: int
    color: str


class Section(BaseModel, Generic[T]):
    """One independently computed dashboard block."""
    data: list[T] = []
    error: str | None = None


class DashboardOut(BaseModel):
    metrics: Section[KPIMetric]
    charts: Section[ChartDataPoint]
    departments: Section[DepartmentData]
    categories: Section[CategoryScore]
    mood: Section[MoodSlice]
    responses_count: int


class AnalysisOut(BaseModel):
    report: AnalysisReport | None = None
