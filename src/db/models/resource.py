# db/models/resource.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text, DateTime, ForeignKey, func
from src.db import Base
import uuid


class CustomResource(Base):
    __tablename__ = "custom_resources"

    resource_id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String, ForeignKey("profiles.user_id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str] = mapped_column(String, nullable=False, default="article")
    category: Mapped[str] = mapped_column(String, nullable=False, default="mental")
    duration: Mapped[str] = mapped_column(String, nullable=False, default="5 min")
    thumbnail: Mapped[str] = mapped_column(String, nullable=False, default="📄")
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now())
