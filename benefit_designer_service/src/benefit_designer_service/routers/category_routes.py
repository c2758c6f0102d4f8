from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import categories as crud
from ..db import get_db
from ..dependencies import require_designer_access
from ..schemas import CategoryCreate, CategoryResponse, CategoryUpdate, MessageResponse

router = APIRouter(
    prefix="/api/categories",
    tags=["Benefit Categories"],
    dependencies=[Depends(require_designer_access)],
)


@router.get("", response_model=List[CategoryResponse], summary="List benefit categories")
async def list_categories(
    active: Optional[str] = Query(None, description="'false' includes inactive categories"),
    benefit_type: Optional[str] = Query(None, alias="type", description="group or individual"),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_categories(db, active_only=active != "false", benefit_type=benefit_type)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a benefit category",
)
async def create_category(category_in: CategoryCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_category(db, category_in)


@router.get("/{category_id}", response_model=CategoryResponse, summary="Get a benefit category")
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_category(db, category_id)


@router.patch("/{category_id}", response_model=CategoryResponse, summary="Update a benefit category")
async def update_category(
    category_id: int, category_in: CategoryUpdate, db: AsyncSession = Depends(get_db)
):
    return await crud.update_category(db, category_id, category_in)


@router.delete(
    "/{category_id}", response_model=MessageResponse, summary="Deactivate a benefit category"
)
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    await crud.deactivate_category(db, category_id)
    return MessageResponse(message="Category deactivated successfully")
