"""Ad-hoc tabular reports over the response set.

Reports are computed on the fly, never persisted, and keep groups in the
order they are first seen.
"""
# app/services/reports.py
from datetime import datetime, timedelta
from typing import Callable, Sequence

from src.app.schemas.report import ReportFilters, ReportRow
from src.app.schemas.response import SurveyResponseOut
from src.app.services.catalog import question_text
from src.app.services.responses import utcnow
from src.app.services.scoring import SCALE_FACTOR, mean_score, round_half_up

QUESTION_TEXT_LIMIT = 50
MISSING_DEPARTMENT = "N/A"
MISSING_CATEGORY = "GERAL"

BURNOUT_KPI = "Risco de Burnout"
SOCIAL_KPI = "Bem-Estar Social"
KPI_BY_SURVEY = {
    "A-mental-wellbeing": "Saúde Mental",
    "B-physical-wellbeing": "Saúde Física",
    "C-social-wellbeing": SOCIAL_KPI,
    "H-financial": "Bem-Estar Financeiro",
    "G-burnout": BURNOUT_KPI,
    "F-leadership": "Liderança",
    "I-dei": "Diversidade & Inclusão",
}


def filter_responses(
    responses: Sequence[SurveyResponseOut],
    filters: ReportFilters,
    now: datetime | None = None,
) -> list[SurveyResponseOut]:
    cutoff = (now or utcnow()) - timedelta(days=filters.days)
    selected = [r for r in responses if r.timestamp >= cutoff]
    if filters.department != 'all':
        selected = [r for r in selected if r.participant.department == filters.department]
    if filters.mode == 'specific_survey':
        selected = [r for r in selected if r.survey_id == filters.survey_id]
    return selected


def _grouped(
    responses: Sequence[SurveyResponseOut],
    key: Callable[[SurveyResponseOut], str | None],
    metric: Callable[[str], str],
) -> list[ReportRow]:
    groups: dict[str, list[int]] = {}
    for r in responses:
        name = key(r)
        if name is None:
            continue
        groups.setdefault(name, []).append(r.score)
    return [
        ReportRow(item=name, metric=metric(name), value=mean_score(scores), count=len(scores))
        for name, scores in groups.items()
    ]


def _kpi_name(r: SurveyResponseOut) -> str | None:
    name = KPI_BY_SURVEY.get(r.survey_id)
    if name is None and r.survey_category == "social":
        return SOCIAL_KPI
    return name


def truncate_question(text: str) -> str:
    if len(text) > QUESTION_TEXT_LIMIT:
        return text[:QUESTION_TEXT_LIMIT] + "..."
    return text


def is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def question_rows(responses: Sequence[SurveyResponseOut], survey_id: str) -> list[ReportRow]:
    """Per-question mean of numeric answers, times 20.

    Every number counts, not only answers on the 1-5 scale.
    """
    values: dict[str, list[float]] = {}
    for r in responses:
        for qid, answer in r.answers.items():
            if is_number(answer):
                values.setdefault(qid, []).append(answer)
    return [
        ReportRow(
            item=truncate_question(question_text(survey_id, qid)),
            metric="Média da Resposta",
            value=round_half_up(sum(nums) / len(nums) * SCALE_FACTOR),
            count=len(nums),
        )
        for qid, nums in values.items()
    ]


def generate_report(
    responses: Sequence[SurveyResponseOut],
    filters: ReportFilters,
    now: datetime | None = None,
) -> list[ReportRow]:
    """Build the report rows for the requested mode.

    Args:
        responses: Response set visible to the caller.
        filters: Mode, time window, department and survey.
        now: Reference time for the window, defaults to the current UTC time.

    Returns:
        list[ReportRow]: One row per group, in first-seen order.
    """
    selected = filter_responses(responses, filters, now)
    mode = filters.mode
    if mode == 'general':
        return _grouped(selected, lambda r: r.survey_title, lambda _: "Média de Score")
    if mode == 'department':
        return _grouped(
            selected,
            lambda r: r.participant.department or MISSING_DEPARTMENT,
            lambda _: "Bem-Estar Geral",
        )
    if mode == 'category':
        return _grouped(
            selected,
            lambda r: (r.survey_category or MISSING_CATEGORY).upper(),
            lambda _: "Score Médio",
        )
    if mode == 'kpi':
        return _grouped(
            selected,
            _kpi_name,
            lambda name: "Índice de Risco" if name == BURNOUT_KPI else "Índice de Saúde",
        )
    return question_rows(selected, filters.survey_id)
