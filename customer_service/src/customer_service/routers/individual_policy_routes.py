from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import policies as crud
from ..db import get_db
from ..dependencies import require_customer_service_access
from ..schemas import (
    IndividualPolicyCreate,
    IndividualPolicyCreatedResponse,
    IndividualPolicyDetailResponse,
    IndividualPolicyResponse,
    MessageResponse,
    PolicyUpdate,
)

router = APIRouter(
    prefix="/api/individual-policies",
    tags=["Individual Policies"],
    dependencies=[Depends(require_customer_service_access)],
)


@router.get("", response_model=List[IndividualPolicyResponse], summary="List individual policies")
async def list_individual_policies(db: AsyncSession = Depends(get_db)):
    return await crud.list_individual_policies(db)


@router.post(
    "",
    response_model=IndividualPolicyCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an individual policy with its holder and coverages",
)
async def create_individual_policy(
    policy_in: IndividualPolicyCreate, db: AsyncSession = Depends(get_db)
):
    policy = await crud.create_individual_policy(db, policy_in)
    return IndividualPolicyCreatedResponse(policy=IndividualPolicyResponse.model_validate(policy))


@router.get(
    "/{policy_id}",
    response_model=IndividualPolicyDetailResponse,
    summary="Get an individual policy with its holder and coverages",
)
async def get_individual_policy(policy_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_individual_policy_detail(db, policy_id)


@router.patch(
    "/{policy_id}", response_model=IndividualPolicyResponse, summary="Update status or expiry"
)
async def update_individual_policy(
    policy_id: int, policy_in: PolicyUpdate, db: AsyncSession = Depends(get_db)
):
    return await crud.update_individual_policy(db, policy_id, policy_in)


@router.delete(
    "/{policy_id}",
    response_model=MessageResponse,
    summary="Delete an individual policy with its holder and coverages",
)
async def delete_individual_policy(policy_id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_individual_policy(db, policy_id)
    return MessageResponse(message="Individual policy deleted successfully")
