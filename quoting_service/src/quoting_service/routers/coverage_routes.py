from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import coverages as crud
from ..db import get_db
from ..dependencies import require_internal_caller
from ..schemas import CoverageResponse

# Read by sibling services only
router = APIRouter(
    prefix="/api/coverages",
    tags=["Coverages"],
    dependencies=[Depends(require_internal_caller)],
)


@router.get("", response_model=List[CoverageResponse], summary="List coverages")
async def list_coverages(
    quote_id: Optional[int] = Query(None, alias="quoteId"),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_coverages(db, quote_id=quote_id)
