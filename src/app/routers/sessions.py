"""Coaching session endpoints: scheduling, structured guide and action plans.
"""
# app/routers/sessions.py
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from src.app.core.logging import get_logs_writer_logger
from src.app.core.security import require_supervisor
from src.app.schemas.catalog import GuideQuestion
from src.app.schemas.session import SessionCreateIn, SessionOut, SessionSaveIn
from src.app.services.catalog import session_guide
from src.app.services.settings import get_or_create
from src.db.models import CoachingSession, Profile, SessionStatus, SessionType
from src.db.session import get_db

logger = get_logs_writer_logger()

router = APIRouter()


def _owned_session(db: Session, profile: Profile, session_id: str) -> CoachingSession:
    row = db.get(CoachingSession, session_id)
    if not row or row.user_id != profile.user_id:
        raise HTTPException(status_code=404, detail="Session not found")
    return row


@router.get("/api/sessions/guide", response_model=list[GuideQuestion])
async def get_guide(
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Structured session guide: fixed questions followed by the custom ones from settings."""
    return session_guide(get_or_create(db, profile.user_id).custom_guide_questions or [])


@router.post("/api/sessions", response_model=SessionOut, status_code=status.HTTP_201_CREATED)
async def schedule_session(
    payload: SessionCreateIn,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Schedule a session.

    Args:
        payload: Type, date and participant (or group) label.
        profile: The supervisor scheduling it.
        db: The DB session.

    Returns:
        SessionOut: The scheduled session.
    """
    row = CoachingSession(
        user_id=profile.user_id,
        type=payload.type,
        date=payload.date,
        participant_or_group=payload.participant_or_group,
        status=SessionStatus.scheduled,
        guide_answers={},
        action_plan=[],
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(f"Session {row.session_id} scheduled for {row.date}")
    return row


@router.get("/api/sessions", response_model=list[SessionOut])
async def list_sessions(
    type: SessionType | None = Query(None),
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """List the caller's sessions.

    Without a filter sessions come newest date first; with a type filter they
    are sorted by participant or group label.
    """
    stmt = select(CoachingSession).where(CoachingSession.user_id == profile.user_id)
    if type is not None:
        stmt = stmt.where(CoachingSession.type == type).order_by(CoachingSession.participant_or_group)
    else:
        stmt = stmt.order_by(CoachingSession.date.desc())
    return db.execute(stmt).scalars().all()


@router.put("/api/sessions/{session_id}", response_model=SessionOut)
async def save_session(
    session_id: str,
    payload: SessionSaveIn,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Store notes, guide answers and the action plan; the session becomes completed.

    Errors:
        404: The session was not found.
    """
    row = _owned_session(db, profile, session_id)
    row.private_notes = payload.private_notes
    row.guide_answers = dict(payload.guide_answers)
    row.action_plan = [item.model_dump() for item in payload.action_plan]
    row.status = SessionStatus.completed
    db.commit()
    db.refresh(row)
    return row


@router.delete("/api/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(
    session_id: str,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Delete a session.

    Errors:
        404: The session was not found.
    """
    row = _owned_session(db, profile, session_id)
    db.delete(row)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
