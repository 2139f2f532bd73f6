# app/routers/resources.py
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from src.app.core.logging import get_logs_writer_logger
from src.app.core.security import get_current_profile, require_supervisor
from src.app.schemas.catalog import ResourceDefinition
from src.app.schemas.resource import ResourceCreateIn
from src.app.services.catalog import RESOURCES_LIBRARY
from src.db.models import CustomResource, Profile
from src.db.session import get_db

logger = get_logs_writer_logger()

router = APIRouter()


def to_definition(row: CustomResource) -> ResourceDefinition:
    return ResourceDefinition(
        id=row.resource_id,
        title=row.title,
        type=row.type,
        category=row.category,
        duration=row.duration,
        thumbnail=row.thumbnail,
        content=row.content,
        is_custom=True,
    )


@router.get("/api/resources", response_model=list[ResourceDefinition])
async def list_resources(
    profile: Profile = Depends(get_current_profile),
    db: Session = Depends(get_db),
):
    """Custom resources of the caller (newest first) followed by the built-in library."""
    rows = db.execute(
        select(CustomResource)
        .where(CustomResource.user_id == profile.user_id)
        .order_by(CustomResource.created_at.desc())
    ).scalars().all()
    return [to_definition(r) for r in rows] + list(RESOURCES_LIBRARY)


@router.post("/api/resources", response_model=ResourceDefinition, status_code=status.HTTP_201_CREATED)
async def create_resource(
    payload: ResourceCreateIn,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Add a custom resource to the library.

    Errors:
        403: The caller is not a supervisor.
        422: Blank title or content.
    """
    row = CustomResource(user_id=profile.user_id, **payload.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(f"Resource {row.resource_id} '{row.title}' created")
    return to_definition(row)


@router.delete("/api/resources/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(
    resource_id: str,
    profile: Profile = Depends(require_supervisor),
    db: Session = Depends(get_db),
):
    """Delete a custom resource; built-in ones cannot be removed.

    Errors:
        403: Built-in resource.
        404: The resource was not found.
    """
    if any(r.id == resource_id for r in RESOURCES_LIBRARY):
        raise HTTPException(status_code=403, detail="Built-in resources cannot be deleted")
    row = db.get(CustomResource, resource_id)
    if not row or row.user_id != profile.user_id:
        raise HTTPException(status_code=404, detail="Resource not found")
    db.delete(row)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
