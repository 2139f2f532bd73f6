# db/models/response.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, DateTime, JSON, ForeignKey, PrimaryKeyConstraint, func
from src.db import Base
import uuid


class SurveyResponse(Base):
    __tablename__ = "survey_responses"

    response_id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str | None] = mapped_column(String, ForeignKey("profiles.user_id"), nullable=True, index=True)
    survey_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    participant: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    answers: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    timestamp: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), nullable=False, index=True)


class SurveySubmission(Base):
    """Legacy per-user submission tracker, read together with survey_responses."""
    __tablename__ = "survey_submissions"

    user_id: Mapped[str] = mapped_column(String, ForeignKey("profiles.user_id", ondelete="CASCADE"))
    survey_id: Mapped[str] = mapped_column(String)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        PrimaryKeyConstraint("user_id", "survey_id"),
    )
