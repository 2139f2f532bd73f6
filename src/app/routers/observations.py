# app/routers/observations.py
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from src.app.core.logging import get_logs_writer_logger
from src.app.core.security import require_supervisor
from src.app.schemas.observation import ObservationCreateIn, ObservationOut
from src.app.services.catalog import CHECKLIST_SCALE, OBSERVATION_CHECKLIST
from src.app.services.observations import render_content, unknown_checklist_entries
from src.db.models import Observation, Profile
from src.db.session import get_db

logger = get_logs_writer_logger()

router = APIRouter()


@router.get("/api/observations/checklist")
async def get_checklist():
    """Field-visit checklist sections and the rating scale."""
    return {
        "scale": CHECKLIST_SCALE,
        "sections": [s.model_dump() for s in OBSERVATION_CHECKLIST],
    }


@router.post("/api/observations", response_model=ObservationOut, status_code=status.HTTP_201_CREATED)
async def create_observation(
    payload: ObservationCreateIn,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Record a field observation.

    The checklist ratings and summary are rendered to text at save time; the
    record is not editable afterwards.

    Errors:
        422: Blank author, unknown checklist item or rating.
    """
    invalid = unknown_checklist_entries(payload.checklist)
    if invalid:
        raise HTTPException(status_code=422, detail=f"Invalid checklist entries: {', '.join(invalid)}")

    row = Observation(
        user_id=profile.user_id,
        date=payload.date or date.today(),
        author=payload.author,
        category=payload.category,
        content=render_content(payload.checklist, payload.summary),
        sentiment=payload.sentiment,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(f"Observation {row.observation_id} recorded by {payload.author}")
    return row


@router.get("/api/observations", response_model=list[ObservationOut])
async def list_observations(
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """The caller's observations, most recent date first."""
    return db.execute(
        select(Observation)
        .where(Observation.user_id == profile.user_id)
        .order_by(Observation.date.desc(), Observation.created_at.desc())
    ).scalars().all()
