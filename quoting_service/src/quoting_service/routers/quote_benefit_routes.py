from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..clients import BenefitDesignerClient, get_benefit_designer_client
from ..crud import quote_benefits as crud
from ..db import get_db
from ..dependencies import require_quoting_access
from ..schemas import (
    MessageResponse,
    QuoteBenefitCreate,
    QuoteBenefitResponse,
    QuoteBenefitUpdate,
)

router = APIRouter(
    prefix="/api/quote-benefits",
    tags=["Quote Benefits"],
    dependencies=[Depends(require_quoting_access)],
)


@router.get("", response_model=List[QuoteBenefitResponse], summary="List configured benefits")
async def list_quote_benefits(
    quote_id: Optional[int] = Query(None, alias="quoteId"),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_quote_benefits(db, quote_id=quote_id)


@router.post(
    "",
    response_model=QuoteBenefitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Configure a benefit on a quote",
    description="Snapshot fields that are left out are copied from the benefit designer template.",
)
async def create_quote_benefit(
    benefit_in: QuoteBenefitCreate,
    db: AsyncSession = Depends(get_db),
    designer: BenefitDesignerClient = Depends(get_benefit_designer_client),
):
    return await crud.create_quote_benefit(db, benefit_in, designer)


@router.get("/{benefit_id}", response_model=QuoteBenefitResponse, summary="Get a configured benefit")
async def get_quote_benefit(benefit_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_quote_benefit(db, benefit_id)


@router.patch("/{benefit_id}", response_model=QuoteBenefitResponse, summary="Update configured values")
async def update_quote_benefit(
    benefit_id: int, benefit_in: QuoteBenefitUpdate, db: AsyncSession = Depends(get_db)
):
    return await crud.update_quote_benefit(db, benefit_id, benefit_in)


@router.delete("/{benefit_id}", response_model=MessageResponse, summary="Remove a configured benefit")
async def delete_quote_benefit(benefit_id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_quote_benefit(db, benefit_id)
    return MessageResponse(message="Quote benefit deleted successfully")
