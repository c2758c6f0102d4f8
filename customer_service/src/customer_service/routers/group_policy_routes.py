from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import policies as crud
from ..db import get_db
from ..dependencies import require_customer_service_access
from ..schemas import (
    GroupPolicyCreate,
    GroupPolicyCreatedResponse,
    GroupPolicyDetailResponse,
    GroupPolicyResponse,
    GroupPolicyUpdate,
    MessageResponse,
)

router = APIRouter(
    prefix="/api/group-policies",
    tags=["Group Policies"],
    dependencies=[Depends(require_customer_service_access)],
)


@router.get("", response_model=List[GroupPolicyResponse], summary="List group policies")
async def list_group_policies(db: AsyncSession = Depends(get_db)):
    return await crud.list_group_policies(db)


@router.post(
    "",
    response_model=GroupPolicyCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a group policy with its classes, members and coverages",
)
async def create_group_policy(policy_in: GroupPolicyCreate, db: AsyncSession = Depends(get_db)):
    policy = await crud.create_group_policy(db, policy_in)
    return GroupPolicyCreatedResponse(policy=GroupPolicyResponse.model_validate(policy))


@router.get(
    "/{policy_id}",
    response_model=GroupPolicyDetailResponse,
    summary="Get a group policy with its classes",
)
async def get_group_policy(policy_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_group_policy_detail(db, policy_id)


@router.patch(
    "/{policy_id}",
    response_model=GroupPolicyResponse,
    summary="Update status, expiry or group name",
)
async def update_group_policy(
    policy_id: int, policy_in: GroupPolicyUpdate, db: AsyncSession = Depends(get_db)
):
    return await crud.update_group_policy(db, policy_id, policy_in)


@router.delete(
    "/{policy_id}",
    response_model=MessageResponse,
    summary="Delete a group policy with its classes, members and coverages",
)
async def delete_group_policy(policy_id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_group_policy(db, policy_id)
    return MessageResponse(message="Group policy deleted successfully")
