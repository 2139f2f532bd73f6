# db/models/settings.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, JSON, ForeignKey, func
from src.db import Base


class AppSettings(Base):
    __tablename__ = "app_settings"

    user_id: Mapped[str] = mapped_column(String, ForeignKey("profiles.user_id", ondelete="CASCADE"), primary_key=True)
    departments: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    report_categories: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    custom_guide_questions: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    updated_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
