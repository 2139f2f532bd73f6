"""Survey catalog and submission endpoints.
"""
# app/routers/surveys.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.app.core.logging import get_logs_writer_logger
from src.app.core.security import get_current_profile
from src.app.schemas.catalog import SurveyDefinition, SurveySummary
from src.app.schemas.response import CompletedSurveysOut, SubmitResponseIn, SurveyResponseOut
from src.app.services.catalog import SURVEYS, get_survey
from src.app.services.responses import ResponseRepository
from src.db.models import Profile
from src.db.session import get_db

logger = get_logs_writer_logger()

router = APIRouter()


@router.get("/api/surveys", response_model=list[SurveySummary])
async def list_surveys():
    """List the questionnaire catalog without the questions."""
    return [
        SurveySummary(
            id=s.id,
            title=s.title,
            description=s.description,
            category=s.category,
            estimated_time=s.estimated_time,
            questions_count=len(s.questions),
        )
        for s in SURVEYS
    ]


@router.get("/api/surveys/completed", response_model=CompletedSurveysOut)
async def completed_surveys(
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Survey ids the caller already answered.

    Returns:
        CompletedSurveysOut: Sorted list of survey ids.
    """
    return CompletedSurveysOut(survey_ids=ResponseRepository(db).completed_survey_ids(profile.user_id))


@router.get("/api/surveys/{survey_id}", response_model=SurveyDefinition)
async def get_survey_definition(survey_id: str):
    """Get a questionnaire with its questions.

    Errors:
        404: Unknown survey id.
    """
    survey = get_survey(survey_id)
    if not survey:
        raise HTTPException(status_code=404, detail="Survey not found")
    return survey


@router.post(
    "/api/surveys/{survey_id}/responses",
    response_model=SurveyResponseOut,
    status_code=status.HTTP_201_CREATED,
)
async def submit_response(
    survey_id: str,
    payload: SubmitResponseIn,
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Store a completed questionnaire.

    Args:
        survey_id: Catalog id of the survey.
        payload: Participant descriptor and answers.
        profile: The submitting profile.
        db: The DB session.

    Returns:
        SurveyResponseOut: The stored response with its score.

    Errors:
        404: Unknown survey id.
        409: The operator already answered this survey.
        422: Name or department missing for a non-anonymous participant.
    """
    if not get_survey(survey_id):
        raise HTTPException(status_code=404, detail="Survey not found")

    repo = ResponseRepository(db)
    if not profile.is_supervisor and survey_id in repo.completed_survey_ids(profile.user_id):
        raise HTTPException(status_code=409, detail="Survey already answered")

    saved = repo.save(survey_id, payload.participant, payload.answers, profile.user_id)
    logger.info(f"Response {saved.response_id} saved for survey {survey_id} (score {saved.score})")
    return saved
