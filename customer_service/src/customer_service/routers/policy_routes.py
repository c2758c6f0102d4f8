"""
API routes that treat individual and group policies alike.

Both kinds are numbered independently, so an id can name one policy of
each kind. Pass ?type=Individual or ?type=Group to pick one.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import policies as crud
from ..db import get_db
from ..dependencies import require_customer_service_access
from ..schemas import PolicyDetailResponse, PolicyListResponse, PolicySummary, PolicyUpdate
from ..schemas.policy_schemas import PolicyType

router = APIRouter(
    prefix="/api/policies",
    tags=["Policies"],
    dependencies=[Depends(require_customer_service_access)],
)


@router.get("", response_model=PolicyListResponse, summary="List all policies, newest first")
async def list_policies(db: AsyncSession = Depends(get_db)):
    return await crud.list_policies(db)


@router.get(
    "/{policy_id}",
    response_model=PolicyDetailResponse,
    summary="Get a policy with its holders, coverages and classes",
)
async def get_policy(
    policy_id: int,
    policy_type: Optional[PolicyType] = Query(None, alias="type"),
    db: AsyncSession = Depends(get_db),
):
    return await crud.get_policy_detail(db, policy_id, policy_type)


@router.patch("/{policy_id}", response_model=PolicySummary, summary="Update policy status or expiry")
async def update_policy(
    policy_id: int,
    policy_in: PolicyUpdate,
    policy_type: Optional[PolicyType] = Query(None, alias="type"),
    db: AsyncSession = Depends(get_db),
):
    return await crud.update_policy(db, policy_id, policy_in, policy_type)
