# db/models/user.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, DateTime, Enum, func
from src.db import Base
import enum
import uuid


class UserRole(str, enum.Enum):
    operator = "operator"
    supervisor = "supervisor"


class Profile(Base):
    __tablename__ = "profiles"

    user_id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    role: Mapped[UserRole] = mapped_column(Enum(UserRole), default=UserRole.operator, nullable=False)
    full_name: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now())

    @property
    def is_supervisor(self) -> bool:
        return self.role == UserRole.supervisor
