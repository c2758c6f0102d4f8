from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..clients import QuotingClient, get_quoting_client
from ..crud import conversions as crud
from ..db import get_db
from ..dependencies import require_customer_service_access
from ..schemas import ConvertQuoteRequest, ConvertQuoteResponse

router = APIRouter(
    prefix="/api/convert-quote",
    tags=["Quote Conversion"],
    dependencies=[Depends(require_customer_service_access)],
)


@router.post(
    "",
    response_model=ConvertQuoteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Convert a Ready for Sale quote into a policy",
    description=(
        "Individual quotes become a policy with a holder and coverages. Group quotes "
        "need class definitions that place the group's employees and coverages. "
        "The quote is archived in the quoting service afterwards."
    ),
)
async def convert_quote(
    request: ConvertQuoteRequest,
    db: AsyncSession = Depends(get_db),
    quoting: QuotingClient = Depends(get_quoting_client),
):
    return await crud.convert_quote(db, request, quoting)
