# app/routers/settings.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.app.core.logging import get_logs_writer_logger
from src.app.core.security import get_current_profile, require_supervisor
from src.app.schemas.settings import SettingsOut, SettingsUpdateIn
from src.app.services import settings as settings_service
from src.db.models import Profile
from src.db.session import get_db

logger = get_logs_writer_logger()

router = APIRouter()


@router.get("/api/settings", response_model=SettingsOut)
async def get_settings(
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Get the caller's settings, creating the defaults on first access.

    Returns:
        SettingsOut: Departments (sorted), report categories, custom guide questions.
    """
    return settings_service.to_out(settings_service.get_or_create(db, profile.user_id))


@router.patch("/api/settings", response_model=SettingsOut)
async def update_settings(
    payload: SettingsUpdateIn,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Add or remove a single entry of one settings list.

    Args:
        payload: `field`, `action` (`add` or `remove`) and `value`.
        profile: The supervisor owning the settings.
        db: The DB session.

    Returns:
        SettingsOut: The settings after the change.

    Errors:
        403: The caller is not a supervisor.
        422: Unknown field or action, or blank value.
    """
    row = settings_service.apply_update(db, profile.user_id, payload)
    logger.info(f"Settings {payload.field} {payload.action} '{payload.value}' by {profile.user_id}")
    return settings_service.to_out(row)
