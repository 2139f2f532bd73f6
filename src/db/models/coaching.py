# db/models/coaching.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, Date, DateTime, Enum, JSON, ForeignKey, func
from src.db import Base
import datetime as dt
import enum
import uuid


class SessionType(str, enum.Enum):
    individual = "individual"
    focus_group = "focus_group"


class SessionStatus(str, enum.Enum):
    scheduled = "scheduled"
    completed = "completed"


class CoachingSession(Base):
    __tablename__ = "sessions"

    session_id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String, ForeignKey("profiles.user_id"), nullable=False, index=True)
    type: Mapped[SessionType] = mapped_column(Enum(SessionType), default=SessionType.individual, nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    participant_or_group: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[SessionStatus] = mapped_column(Enum(SessionStatus), default=SessionStatus.scheduled, nullable=False)
    private_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    # {guide question id: answer}
    guide_answers: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    # ordered list of {id, goal, deadline, status}
    action_plan: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now())
