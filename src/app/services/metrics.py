"""Dashboard aggregations over an in-memory list of responses.

All functions are pure: they never mutate the input and return 0 for groups
without members.
"""
# app/services/metrics.py
import unicodedata
from typing import Callable, Iterable, Sequence

from src.app.schemas.dashboard import (
    CategoryScore,
    ChartDataPoint,
    DepartmentData,
    KPIMetric,
    MoodSlice,
)
from src.app.schemas.response import SurveyResponseOut
from src.app.services.scoring import mean_score

MENTAL_SURVEY = "A-mental-wellbeing"
PHYSICAL_SURVEY = "B-physical-wellbeing"
FINANCIAL_SURVEY = "H-financial"
PULSE_SURVEY = "G-checkin"

TOTAL_METRIC_ID = "6"
TREND_THRESHOLD = 60

MOOD_HIGH = 70
MOOD_MEDIUM = 40

# pt-BR short month names, as rendered by the dashboards
MONTH_LABELS = ["jan.", "fev.", "mar.", "abr.", "mai.", "jun.",
                "jul.", "ago.", "set.", "out.", "nov.", "dez."]

CATEGORY_SURVEYS = [
    ("F-leadership", "Liderança", "#8884d8"),
    ("D-org-practices", "Práticas Org.", "#82ca9d"),
    (PHYSICAL_SURVEY, "Físico", "#ffc658"),
    ("C-social-wellbeing", "Social", "#ff8042"),
    (MENTAL_SURVEY, "Mental", "#a4de6c"),
    ("I-dei", "DEI", "#d0ed57"),
    (FINANCIAL_SURVEY, "Material/Fin.", "#83a6ed"),
    (PULSE_SURVEY, "Pulse/Humor", "#14b8a6"),
]

Predicate = Callable[[SurveyResponseOut], bool]


def _average(responses: Iterable[SurveyResponseOut], predicate: Predicate) -> int:
    return mean_score(r.score for r in responses if predicate(r))


def _is_mental(r: SurveyResponseOut) -> bool:
    return r.survey_category == "mental" or r.survey_id == MENTAL_SURVEY


def _is_physical(r: SurveyResponseOut) -> bool:
    return r.survey_category == "physical" or r.survey_id == PHYSICAL_SURVEY


def _trend(value: int) -> str:
    return "up" if value > TREND_THRESHOLD else "down"


def dashboard_metrics(responses: Sequence[SurveyResponseOut], owner_scoped: bool = False) -> list[KPIMetric]:
    """KPI cards. Owner-scoped views drop empty cards but keep the total count."""
    mental = _average(responses, _is_mental)
    physical = _average(responses, _is_physical)
    financial = _average(responses, lambda r: r.survey_id == FINANCIAL_SURVEY)
    pulse = _average(responses, lambda r: r.survey_id == PULSE_SURVEY)
    social = _average(responses, lambda r: r.survey_category == "social")

    metrics = [
        KPIMetric(id="1", label="Saúde Mental", value=mental, unit="/100", trend=_trend(mental), color="text-purple-600"),
        KPIMetric(id="2", label="Saúde Física", value=physical, unit="/100", trend="neutral", color="text-green-600"),
        KPIMetric(id="3", label="Bem-Estar Material", value=financial, unit="/100", trend="neutral", color="text-blue-600"),
        KPIMetric(id="4", label="Clima Social", value=social, unit="/100", trend="neutral", color="text-orange-600"),
        KPIMetric(id="5", label="Engajamento", value=pulse, unit="/100", trend=_trend(pulse), color="text-teal-600", inverse=False),
        KPIMetric(id=TOTAL_METRIC_ID, label="Total Respostas", value=len(responses), unit="", trend="neutral", color="text-slate-600"),
    ]
    if owner_scoped:
        return [m for m in metrics if m.value > 0 or m.id == TOTAL_METRIC_ID]
    return metrics


def category_scores(responses: Sequence[SurveyResponseOut], owner_scoped: bool = False) -> list[CategoryScore]:
    if not responses:
        return []
    scores = [
        CategoryScore(name=label, score=_average(responses, lambda r, sid=survey_id: r.survey_id == sid), color=color)
        for survey_id, label, color in CATEGORY_SURVEYS
    ]
    if owner_scoped:
        return [s for s in scores if s.score > 0]
    return scores


def month_label(response: SurveyResponseOut) -> str:
    label = MONTH_LABELS[response.timestamp.month - 1]
    return label[:1].upper() + label[1:]


class _Buckets:
    def __init__(self):
        self.mental: list[int] = []
        self.fisico: list[int] = []
        self.social: list[int] = []
        self.material: list[int] = []
        self.pulse: list[int] = []
        self.count = 0

    def add(self, r: SurveyResponseOut) -> None:
        if r.survey_category == "mental":
            self.mental.append(r.score)
        if r.survey_category == "physical":
            self.fisico.append(r.score)
        if r.survey_category == "social":
            self.social.append(r.score)
        if r.survey_id == FINANCIAL_SURVEY:
            self.material.append(r.score)
        if r.survey_id == PULSE_SURVEY:
            self.pulse.append(r.score)
        self.count += 1


def monthly_series(responses: Sequence[SurveyResponseOut]) -> list[ChartDataPoint]:
    """Per-month means for the mental, physical, social and financial tags.

    Buckets are keyed by month label only and ordered by their earliest
    response.
    """
    grouped: dict[str, _Buckets] = {}
    for r in sorted(responses, key=lambda r: r.timestamp):
        grouped.setdefault(month_label(r), _Buckets()).add(r)

    return [
        ChartDataPoint(
            name=name,
            mental=mean_score(b.mental),
            fisico=mean_score(b.fisico),
            social=mean_score(b.social),
            material=mean_score(b.material),
            participacao=b.count,
        )
        for name, b in grouped.items()
    ]


def sort_key(name: str) -> str:
    """Accent- and case-insensitive ordering key."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()


def department_breakdown(responses: Sequence[SurveyResponseOut]) -> list[DepartmentData]:
    grouped: dict[str, _Buckets] = {}
    for r in responses:
        grouped.setdefault(r.participant.department or "Geral", _Buckets()).add(r)

    rows = [
        DepartmentData(
            name=name,
            mental=mean_score(b.mental),
            fisico=mean_score(b.fisico),
            social=mean_score(b.social),
            material=mean_score(b.material),
            stress=mean_score(b.pulse),
        )
        for name, b in grouped.items()
    ]
    return sorted(rows, key=lambda d: sort_key(d.name))


def mood_distribution(responses: Sequence[SurveyResponseOut]) -> list[MoodSlice]:
    """Three-bucket histogram of the weekly check-in; empty buckets omitted."""
    high = medium = low = 0
    for r in responses:
        if r.survey_id != PULSE_SURVEY:
            continue
        if r.score >= MOOD_HIGH:
            high += 1
        elif r.score >= MOOD_MEDIUM:
            medium += 1
        else:
            low += 1

    slices = [
        MoodSlice(name="Energizado/Feliz", value=high, color="#10b981"),
        MoodSlice(name="Estável/Neutro", value=medium, color="#f59e0b"),
        MoodSlice(name="Baixo Ânimo", value=low, color="#ef4444"),
    ]
    return [s for s in slices if s.value > 0]
