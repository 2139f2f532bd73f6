from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

RiskLevel = Literal['low', 'medium', 'high']


class AnalysisReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str = Field(..., description="Executive summary, 2-3 sentences")
    recommendations: list[str] = Field(default_factory=list, description="Actionable recommendations")
    risk_level: RiskLevel = Field('low', alias="riskLevel", description="Overall wellbeing risk")
