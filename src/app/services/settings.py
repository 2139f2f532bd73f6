"""Per-owner settings singleton: departments, report categories and custom
guide questions.
"""
# app/services/settings.py
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.app.schemas.settings import SettingsOut, SettingsUpdateIn
from src.app.services.metrics import sort_key
from src.db.models import AppSettings

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENTS = ["TI", "RH", "Vendas", "Marketing", "Financeiro", "Operacoes"]
DEFAULT_REPORT_CATEGORIES = ["Mental", "Físico", "Social", "Organizacional", "Financeiro"]


def to_out(row: AppSettings) -> SettingsOut:
    return SettingsOut(
        departments=sorted(row.departments or [], key=sort_key),
        report_categories=list(row.report_categories or []),
        custom_guide_questions=list(row.custom_guide_questions or []),
    )


def get_or_create(db: Session, owner_id: str) -> AppSettings:
    """Load the owner's settings, creating the defaults on first read."""
    row = db.get(AppSettings, owner_id)
    if row:
        return row
    row = AppSettings(
        user_id=owner_id,
        departments=list(DEFAULT_DEPARTMENTS),
        report_categories=list(DEFAULT_REPORT_CATEGORIES),
        custom_guide_questions=[],
    )
    try:
        db.add(row)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error creating default settings for %s", owner_id)
        raise
    db.refresh(row)
    return row


def apply_update(db: Session, owner_id: str, update: SettingsUpdateIn) -> AppSettings:
    """Add or remove one list entry inside a single transaction.

    The row is locked for the duration of the change where the database
    supports `SELECT ... FOR UPDATE`. Adding an existing value and removing a
    missing one are no-ops.
    """
    get_or_create(db, owner_id)
    try:
        row = db.execute(
            select(AppSettings).where(AppSettings.user_id == owner_id).with_for_update()
        ).scalar_one()
        values = list(getattr(row, update.field) or [])
        if update.action == "add" and update.value not in values:
            values.append(update.value)
        elif update.action == "remove" and update.value in values:
            values.remove(update.value)
        # JSON columns are not mutation tracked; assign a new list
        setattr(row, update.field, values)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating settings %s for %s", update.field, owner_id)
        raise
    db.refresh(row)
    return row
