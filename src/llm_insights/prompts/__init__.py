from src.llm_insights.prompts.analysis import ANALYSIS_PROMPT, SYSTEM_PROMPT
