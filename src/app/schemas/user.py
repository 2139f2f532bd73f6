# app/schemas/user.py
from pydantic import BaseModel, ConfigDict
from datetime import datetime

from src.db.models.user import UserRole


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    email: str
    role: UserRole
    full_name: str | None = None
    created_at: datetime | None = None
