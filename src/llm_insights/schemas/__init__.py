from src.llm_insights.schemas.analysis import AnalysisReport, RiskLevel
