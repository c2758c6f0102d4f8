"""
API routes for quotes.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import quotes as crud
from ..db import get_db
from ..dependencies import require_quoting_access
from ..schemas import MessageResponse, QuoteDetailResponse, QuoteResponse, QuoteUpdate

router = APIRouter(
    prefix="/api/quotes",
    tags=["Quotes"],
    dependencies=[Depends(require_quoting_access)],
)


@router.get("", response_model=List[QuoteResponse], summary="List quotes")
async def list_quotes(db: AsyncSession = Depends(get_db)):
    return await crud.list_quotes(db)


@router.get(
    "/{quote_id}",
    response_model=QuoteDetailResponse,
    summary="Get a quote with its applicant or group, classes and coverages",
)
async def get_quote(quote_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_quote_detail(db, quote_id)


@router.patch("/{quote_id}", response_model=QuoteResponse, summary="Update quote status or type")
async def update_quote(quote_id: int, quote_in: QuoteUpdate, db: AsyncSession = Depends(get_db)):
    return await crud.update_quote(db, quote_id, quote_in)


@router.delete(
    "/{quote_id}",
    response_model=MessageResponse,
    summary="Delete a quote",
    description="Deletes the quote, its coverages and benefits, and its applicant or group.",
)
async def delete_quote(quote_id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_quote(db, quote_id)
    return MessageResponse(message="Quote deleted successfully")
