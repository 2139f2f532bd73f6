"""REST API endpoints for responses, dashboards, reports and exports.

Provides:
- profile (the caller);
- responses (list, read, delete, CSV export);
- dashboard (KPI cards, charts, breakdowns, AI analysis);
- reports (ad-hoc tables and their CSV download).

Supervisors see the whole response set; operators see only their own.
"""
# app/routers/api.py
from datetime import date
from typing import Callable
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from src.app.core.config import settings, OPENAI_CLIENT
from src.app.core.logging import get_logs_writer_logger
from src.app.core.security import get_current_profile, require_supervisor
from src.app.schemas.dashboard import (
    AnalysisOut,
    CategoryScore,
    ChartDataPoint,
    DashboardOut,
    DepartmentData,
    KPIMetric,
    MoodSlice,
)
from src.app.schemas.report import ReportFilters, ReportOut
from src.app.schemas.response import SurveyResponseOut
from src.app.schemas.user import ProfileOut
from src.app.services import export, metrics
from src.app.services.catalog import get_survey
from src.app.services.reports import generate_report
from src.app.services.responses import ResponseRepository
from src.db.models import Profile
from src.db.session import get_db
from src.llm_insights.predict import analyze_wellbeing

logger = get_logs_writer_logger()

router = APIRouter()

SECTION_ERROR = "Não foi possível calcular esta seção."


def visible_responses(db: Session, profile: Profile) -> list[SurveyResponseOut]:
    owner_id = None if profile.is_supervisor else profile.user_id
    return ResponseRepository(db).get_all(owner_id)


def csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )


def section(name: str, compute: Callable[[], list]) -> dict:
    """Run one dashboard aggregation, turning a failure into an error state."""
    try:
        return {"data": compute(), "error": None}
    except Exception as e:
        logger.error(f"Dashboard section {name} failed: {e!r}")
        return {"data": [], "error": SECTION_ERROR}


@router.get("/api/me", response_model=ProfileOut)
async def me(profile: Profile = Depends(get_current_profile)):
    """Return the authenticated profile."""
    return profile


# ---------- responses ----------

@router.get("/api/responses", response_model=list[SurveyResponseOut])
async def list_responses(
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """List responses visible to the caller, newest first.

    Returns:
        list[SurveyResponseOut]: Responses; empty when the store is unavailable.
    """
    return visible_responses(db, profile)


@router.get("/api/responses/export")
async def export_responses(
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Download every visible response as CSV, one line per answer."""
    content = export.responses_csv(visible_responses(db, profile))
    return csv_response(content, export.full_export_filename(date.today()))


def _visible_response(db: Session, profile: Profile, response_id: str) -> SurveyResponseOut:
    response = ResponseRepository(db).get(response_id)
    if not response or (not profile.is_supervisor and response.user_id != profile.user_id):
        raise HTTPException(status_code=404, detail="Response not found")
    return response


@router.get("/api/responses/{response_id}", response_model=SurveyResponseOut)
async def get_response(
    response_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Get a single response.

    Errors:
        404: The response does not exist or belongs to another profile.
    """
    return _visible_response(db, profile, response_id)


@router.get("/api/responses/{response_id}/export")
async def export_response(
    response_id: str,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Download one response as CSV: descriptor block, then question/answer pairs.

    Errors:
        404: The response was not found.
    """
    response = _visible_response(db, profile, response_id)
    return csv_response(export.single_response_csv(response), export.single_export_filename(response))


@router.delete("/api/responses/{response_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_response(
    response_id: str,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Delete a response.

    Errors:
        403: The caller is not a supervisor.
        404: The response was not found.
    """
    if not ResponseRepository(db).delete(response_id):
        raise HTTPException(status_code=404, detail="Response not found")
    logger.info(f"Response {response_id} deleted by {profile.user_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------- dashboard ----------

@router.get("/api/dashboard", response_model=DashboardOut)
async def dashboard(
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """All dashboard sections computed from one fetch.

    Each section carries its own `error`, so one failing aggregation does not
    hide the others.
    """
    responses = visible_responses(db, profile)
    owner_scoped = not profile.is_supervisor
    return DashboardOut(
        metrics=section("metrics", lambda: metrics.dashboard_metrics(responses, owner_scoped)),
        charts=section("charts", lambda: metrics.monthly_series(responses)),
        departments=section("departments", lambda: metrics.department_breakdown(responses)),
        categories=section("categories", lambda: metrics.category_scores(responses, owner_scoped)),
        mood=section("mood", lambda: metrics.mood_distribution(responses)),
        responses_count=len(responses),
    )


@router.get("/api/dashboard/metrics", response_model=list[KPIMetric])
async def dashboard_metrics(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    return metrics.dashboard_metrics(visible_responses(db, profile), not profile.is_supervisor)


@router.get("/api/dashboard/charts", response_model=list[ChartDataPoint])
async def dashboard_charts(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    return metrics.monthly_series(visible_responses(db, profile))


@router.get("/api/dashboard/departments", response_model=list[DepartmentData])
async def dashboard_departments(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    return metrics.department_breakdown(visible_responses(db, profile))


@router.get("/api/dashboard/categories", response_model=list[CategoryScore])
async def dashboard_categories(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    return metrics.category_scores(visible_responses(db, profile), not profile.is_supervisor)


@router.get("/api/dashboard/mood", response_model=list[MoodSlice])
async def dashboard_mood(profile: Profile = Depends(get_current_profile), db: Session = Depends(get_db)):
    return metrics.mood_distribution(visible_responses(db, profile))


@router.post("/api/dashboard/analysis", response_model=AnalysisOut)
async def dashboard_analysis(
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """AI summary of the caller's KPI cards and monthly trends.

    Returns:
        AnalysisOut: `report` is null when there is no trend data; otherwise
        the model's report or a fallback payload.
    """
    responses = visible_responses(db, profile)
    trends = metrics.monthly_series(responses)
    if not trends:
        return AnalysisOut(report=None)

    kpis = metrics.dashboard_metrics(responses, not profile.is_supervisor)
    report = await analyze_wellbeing(
        client=OPENAI_CLIENT,
        model_name=settings.MODEL_NAME,
        kpis=kpis,
        trends=trends,
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_BASE_URL,
    )
    return AnalysisOut(report=report)


# ---------- reports ----------

def _report_rows(filters: ReportFilters, profile: Profile, db: Session):
    if filters.mode == 'specific_survey' and not get_survey(filters.survey_id):
        raise HTTPException(status_code=422, detail="Unknown survey_id")
    return generate_report(visible_responses(db, profile), filters)


@router.post("/api/reports", response_model=ReportOut)
async def create_report(
    filters: ReportFilters,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Build an ad-hoc report.

    Args:
        filters: Mode, period in days, department and survey id.
        profile: The caller; scopes the response set.
        db: The DB session.

    Returns:
        ReportOut: Report rows in first-seen group order.

    Errors:
        422: `specific_survey` without a known survey id.
    """
    return ReportOut(mode=filters.mode, rows=_report_rows(filters, profile, db))


@router.post("/api/reports/csv")
async def create_report_csv(
    filters: ReportFilters,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Build an ad-hoc report and download it as CSV."""
    rows = _report_rows(filters, profile, db)
    return csv_response(export.report_csv(rows), export.report_filename(filters.mode, date.today()))
