from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import policies as crud
from ..db import get_db
from ..dependencies import require_customer_service_access
from ..schemas import InsuredPersonResponse, PolicyHolderUpdate

router = APIRouter(
    prefix="/api/policy-holders",
    tags=["Policy Holders"],
    dependencies=[Depends(require_customer_service_access)],
)


@router.get("/{holder_id}", response_model=InsuredPersonResponse, summary="Get a policy holder")
async def get_policy_holder(holder_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_policy_holder(db, holder_id)


@router.patch(
    "/{holder_id}", response_model=InsuredPersonResponse, summary="Update a policy holder"
)
async def update_policy_holder(
    holder_id: int, holder_in: PolicyHolderUpdate, db: AsyncSession = Depends(get_db)
):
    return await crud.update_policy_holder(db, holder_id, holder_in)
