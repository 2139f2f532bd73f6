"""Pydantic-schemas for the static survey and resource catalogs.
"""
# app/schemas/catalog.py
from typing import Literal
from pydantic import BaseModel, Field

QuestionType = Literal['scale', 'text', 'choice', 'boolean', 'multi-choice', 'date', 'info']
SurveyCategory = Literal['mental', 'physical', 'social', 'org', 'preferences', 'initiatives']
ResourceType = Literal['article', 'video', 'guide']
ResourceCategory = Literal['mental', 'physical', 'nutrition', 'ergonomics']


class ScaleLabels(BaseModel):
    start: str
    end: str


class QuestionDefinition(BaseModel):
    id: str
    text: str
    type: QuestionType
    category: str
    options: list[str] | None = None
    scale_labels: ScaleLabels | None = None
    placeholder: str | None = None


class SurveyDefinition(BaseModel):
    id: str
    title: str
    description: str
    category: SurveyCategory
    estimated_time: str
    questions: list[QuestionDefinition] = Field(default_factory=list)

    def question_text(self, question_id: str) -> str:
        for question in self.questions:
            if question.id == question_id:
                return question.text
        return question_id


class SurveySummary(BaseModel):
    id: str
    title: str
    description: str
    category: SurveyCategory
    estimated_time: str
    questions_count: int


class ResourceDefinition(BaseModel):
    id: str
    title: str
    type: ResourceType
    category: ResourceCategory
    duration: str
    thumbnail: str
    content: str | None = None
    is_custom: bool = False


class GuideQuestion(BaseModel):
    id: str
    section: str
    text: str


class ChecklistItem(BaseModel):
    id: str
    question: str


class ChecklistSection(BaseModel):
    id: str
    title: str
    items: list[ChecklistItem]
