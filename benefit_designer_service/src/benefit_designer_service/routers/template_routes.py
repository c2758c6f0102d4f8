"""
API routes for benefit templates and their versions.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import templates as crud
from ..db import get_db
from ..dependencies import require_designer_access
from ..schemas import (
    TemplateCreate,
    TemplateResponse,
    TemplateStatusUpdate,
    TemplateUpdate,
    TemplateVersionsResponse,
)

router = APIRouter(
    prefix="/api/templates",
    tags=["Benefit Templates"],
    dependencies=[Depends(require_designer_access)],
)


@router.get("", response_model=List[TemplateResponse], summary="List benefit templates")
async def list_templates(
    benefit_type: Optional[str] = Query(None, alias="type"),
    category_id: Optional[int] = Query(None, alias="categoryId"),
    template_status: Optional[str] = Query(None, alias="status"),
    latest: Optional[str] = Query(None, description="'true' keeps only the newest version"),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_templates(
        db,
        benefit_type=benefit_type,
        category_id=category_id,
        status=template_status,
        latest_only=latest == "true",
    )


@router.post(
    "",
    response_model=TemplateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a benefit template at version 1.0",
)
async def create_template(template_in: TemplateCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_template(db, template_in)


@router.get("/{template_db_id}", response_model=TemplateResponse, summary="Get a template version")
async def get_template(template_db_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_template(db, template_db_id)


@router.put(
    "/{template_db_id}",
    response_model=TemplateResponse,
    summary="Edit a draft, or create the next version of a published template",
    responses={201: {"description": "A new version was created"}},
)
async def update_template(
    template_db_id: int,
    template_in: TemplateUpdate,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    template, new_version = await crud.update_template(db, template_db_id, template_in)
    if new_version:
        response.status_code = status.HTTP_201_CREATED
    return template


@router.patch("/{template_db_id}", response_model=TemplateResponse, summary="Change template status")
async def set_template_status(
    template_db_id: int, status_in: TemplateStatusUpdate, db: AsyncSession = Depends(get_db)
):
    return await crud.set_template_status(db, template_db_id, status_in.status)


@router.get(
    "/{template_db_id}/versions",
    response_model=TemplateVersionsResponse,
    summary="All versions of a template, newest first",
)
async def list_template_versions(template_db_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.list_template_versions(db, template_db_id)
