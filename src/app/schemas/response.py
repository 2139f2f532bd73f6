"""Pydantic-schemas for survey submissions and stored responses.
"""
# app/schemas/response.py
from datetime import datetime
from typing import Union
from pydantic import BaseModel, ConfigDict, Field, model_validator

AnswerValue = Union[int, float, str, list[str], bool, None]


class Participant(BaseModel):
    name: str = ""
    age: str = ""
    gender: str = ""
    department: str = ""
    tenure: str = ""
    is_anonymous: bool = False

    @property
    def display_name(self) -> str:
        return "Anônimo" if self.is_anonymous else self.name


class ParticipantIn(Participant):
    @model_validator(mode="after")
    def _name_and_department_unless_anonymous(self):
        if not self.is_anonymous and (not self.name.strip() or not self.department.strip()):
            raise ValueError("name and department are required unless the participant is anonymous")
        return self


class SubmitResponseIn(BaseModel):
    participant: ParticipantIn
    answers: dict[str, AnswerValue] = Field(default_factory=dict)


class SurveyResponseOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    response_id: str
    survey_id: str
    survey_title: str
    survey_category: str
    participant: Participant
    answers: dict[str, AnswerValue]
    score: int
    timestamp: datetime
    user_id: str | None = None


class CompletedSurveysOut(BaseModel):
    survey_ids: list[str]
