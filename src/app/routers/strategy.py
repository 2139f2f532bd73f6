"""Strategic planning endpoints: SWOT board, goals and resource budget.
"""
# app/routers/strategy.py
from typing import Type

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from src.app.core.logging import get_logs_writer_logger
from src.app.core.security import require_supervisor
from src.app.schemas.strategy import (
    GoalIn,
    GoalOut,
    StrategicResourceIn,
    StrategicResourceOut,
    SwotIn,
    SwotOut,
)
from src.db import Base
from src.db.models import Profile, StrategicGoal, StrategicResource, SwotItem
from src.db.session import get_db

logger = get_logs_writer_logger()

router = APIRouter(prefix="/api/strategy")


def _owned(db: Session, model: Type[Base], row_id: str, profile: Profile):
    row = db.get(model, row_id)
    if not row or row.user_id != profile.user_id:
        raise HTTPException(status_code=404, detail=f"{model.__name__} not found")
    return row


def _delete_owned(db: Session, model: Type[Base], row_id: str, profile: Profile) -> Response:
    db.delete(_owned(db, model, row_id, profile))
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _add(db: Session, row: Base) -> Base:
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


# ---------- SWOT ----------

@router.get("/swot", response_model=list[SwotOut])
async def list_swot(profile: Profile = Depends(require_supervisor), db: Session = Depends(get_db)):
    """SWOT items, oldest first."""
    return db.execute(
        select(SwotItem).where(SwotItem.user_id == profile.user_id).order_by(SwotItem.created_at)
    ).scalars().all()


@router.post("/swot", response_model=SwotOut, status_code=status.HTTP_201_CREATED)
async def create_swot(payload: SwotIn, profile: Profile = Depends(require_supervisor), db: Session = Depends(get_db)):
    return _add(db, SwotItem(user_id=profile.user_id, text=payload.text, type=payload.type))


@router.delete("/swot/{swot_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_swot(swot_id: str, profile: Profile = Depends(require_supervisor), db: Session = Depends(get_db)):
    return _delete_owned(db, SwotItem, swot_id, profile)


# ---------- goals ----------

@router.get("/goals", response_model=list[GoalOut])
async def list_goals(profile: Profile = Depends(require_supervisor), db: Session = Depends(get_db)):
    """Goals ordered by deadline, nearest first."""
    return db.execute(
        select(StrategicGoal).where(StrategicGoal.user_id == profile.user_id).order_by(StrategicGoal.deadline)
    ).scalars().all()


@router.post("/goals", response_model=GoalOut, status_code=status.HTTP_201_CREATED)
async def create_goal(payload: GoalIn, profile: Profile = Depends(require_supervisor), db: Session = Depends(get_db)):
    """Create a goal in status `planned`.

    Errors:
        422: Blank text or missing deadline.
    """
    row = _add(db, StrategicGoal(
        user_id=profile.user_id,
        text=payload.text,
        deadline=payload.deadline,
        status="planned",
        kpi_target=(payload.kpi_target or "").strip() or "N/A",
    ))
    logger.info(f"Goal {row.goal_id} planned for {row.deadline}")
    return row


@router.delete("/goals/{goal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_goal(goal_id: str, profile: Profile = Depends(require_supervisor), db: Session = Depends(get_db)):
    return _delete_owned(db, StrategicGoal, goal_id, profile)


# ---------- resources ----------

@router.get("/resources", response_model=list[StrategicResourceOut])
async def list_strategic_resources(profile: Profile = Depends(require_supervisor), db: Session = Depends(get_db)):
    return db.execute(
        select(StrategicResource)
        .where(StrategicResource.user_id == profile.user_id)
        .order_by(StrategicResource.created_at)
    ).scalars().all()


@router.post("/resources", response_model=StrategicResourceOut, status_code=status.HTTP_201_CREATED)
async def create_strategic_resource(
    payload: StrategicResourceIn,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    return _add(db, StrategicResource(
        user_id=profile.user_id, item=payload.item, cost=payload.cost, allocated=False,
    ))


@router.patch("/resources/{resource_id}", response_model=StrategicResourceOut)
async def toggle_strategic_resource(
    resource_id: str,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Flip the `allocated` flag of a budget item.

    Errors:
        404: The item was not found.
    """
    row = _owned(db, StrategicResource, resource_id, profile)
    row.allocated = not row.allocated
    db.commit()
    db.refresh(row)
    return row


@router.delete("/resources/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_strategic_resource(
    resource_id: str,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    return _delete_owned(db, StrategicResource, resource_id, profile)
