from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import groups as crud
from ..db import get_db
from ..dependencies import require_quoting_access
from ..schemas import GroupCreate, GroupCreatedResponse, GroupResponse, GroupUpdate, QuoteResponse

router = APIRouter(
    prefix="/api/groups",
    tags=["Groups"],
    dependencies=[Depends(require_quoting_access)],
)


@router.get("", response_model=List[GroupResponse], summary="List groups")
async def list_groups(db: AsyncSession = Depends(get_db)):
    return await crud.list_groups(db)


@router.post(
    "",
    response_model=GroupCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a group and its group quote",
)
async def create_group(group_in: GroupCreate, db: AsyncSession = Depends(get_db)):
    group, quote = await crud.create_group(db, group_in)
    return GroupCreatedResponse(
        group=GroupResponse.model_validate(group),
        quote=QuoteResponse.model_validate(quote),
    )


@router.get("/{group_id}", response_model=GroupResponse, summary="Get a group")
async def get_group(group_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_group(db, group_id)


@router.patch("/{group_id}", response_model=GroupResponse, summary="Rename a group")
async def update_group(group_id: int, group_in: GroupUpdate, db: AsyncSession = Depends(get_db)):
    return await crud.update_group(db, group_id, group_in)
