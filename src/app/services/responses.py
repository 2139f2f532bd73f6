"""Storage access for questionnaire submissions.

`ResponseRepository` persists immutable survey responses, reads them back
newest first with the survey title and category attached from the static
catalog, and keeps the legacy submission tracker in step.
"""
# app/services/responses.py
import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from sqlalchemy import delete as sa_delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.app.schemas.response import Participant, SurveyResponseOut
from src.app.services.catalog import survey_category, survey_title
from src.app.services.scoring import compute_score
from src.db.models import SurveyResponse, SurveySubmission

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # SQLite hands timezone-aware columns back as naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_out(row: SurveyResponse) -> SurveyResponseOut:
    return SurveyResponseOut(
        response_id=row.response_id,
        survey_id=row.survey_id,
        survey_title=survey_title(row.survey_id),
        survey_category=survey_category(row.survey_id),
        participant=Participant.model_validate(row.participant or {}),
        answers=row.answers or {},
        score=row.score or 0,
        timestamp=as_utc(row.timestamp),
        user_id=row.user_id,
    )


class ResponseRepository:
    """Survey responses of the backing store."""

    def __init__(self, db: Session):
        self.db = db

    def save(
        self,
        survey_id: str,
        participant: Participant,
        answers: Mapping[str, Any],
        owner_id: str | None,
    ) -> SurveyResponseOut:
        """Persist a new response with its computed score.

        The legacy submission tracker row is upserted in the same transaction.

        Args:
            survey_id: Catalog id of the answered survey.
            participant: Participant descriptor.
            answers: Mapping question id -> answer.
            owner_id: The submitting profile.

        Returns:
            SurveyResponseOut: The stored response with title/category attached.

        Raises:
            SQLAlchemyError: The write failed; nothing is retried.
        """
        row = SurveyResponse(
            user_id=owner_id,
            survey_id=survey_id,
            participant=participant.model_dump(),
            answers=dict(answers),
            score=compute_score(answers),
            timestamp=utcnow(),
        )
        try:
            self.db.add(row)
            if owner_id:
                self._track_submission(owner_id, survey_id)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error saving response for survey %s", survey_id)
            raise
        self.db.refresh(row)
        return to_out(row)

    def get_all(self, owner_id: str | None = None) -> list[SurveyResponseOut]:
        """All responses, or one owner's, newest first. A failed read yields []."""
        stmt = select(SurveyResponse).order_by(SurveyResponse.timestamp.desc())
        if owner_id:
            stmt = stmt.where(SurveyResponse.user_id == owner_id)
        try:
            rows = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error fetching responses")
            return []
        return [to_out(row) for row in rows]

    def get(self, response_id: str) -> SurveyResponseOut | None:
        row = self.db.get(SurveyResponse, response_id)
        return to_out(row) if row else None

    def delete(self, response_id: str) -> bool:
        """Remove one response. Returns False when the id does not exist.

        Raises:
            SQLAlchemyError: The delete failed.
        """
        try:
            result = self.db.execute(
                sa_delete(SurveyResponse).where(SurveyResponse.response_id == response_id)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Error deleting response %s", response_id)
            raise
        return result.rowcount > 0

    def completed_survey_ids(self, owner_id: str) -> list[str]:
        """Survey ids the owner already answered.

        Union of the legacy submission tracker and the surveys present in
        the responses table.
        """
        tracked = self.db.scalars(
            select(SurveySubmission.survey_id).where(SurveySubmission.user_id == owner_id)
        ).all()
        answered = self.db.scalars(
            select(SurveyResponse.survey_id).where(SurveyResponse.user_id == owner_id).distinct()
        ).all()
        return sorted(set(tracked) | set(answered))

    def _track_submission(self, owner_id: str, survey_id: str) -> None:
        if self.db.get(SurveySubmission, (owner_id, survey_id)) is None:
            self.db.add(SurveySubmission(user_id=owner_id, survey_id=survey_id))
