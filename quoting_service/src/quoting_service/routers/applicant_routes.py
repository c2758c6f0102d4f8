from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import applicants as crud
from ..db import get_db
from ..dependencies import require_quoting_access
from ..schemas import (
    ApplicantCreate,
    ApplicantCreatedResponse,
    ApplicantResponse,
    ApplicantUpdate,
    QuoteResponse,
)

router = APIRouter(
    prefix="/api/applicants",
    tags=["Applicants"],
    dependencies=[Depends(require_quoting_access)],
)


@router.get("", response_model=List[ApplicantResponse], summary="List applicants")
async def list_applicants(
    group_id: Optional[int] = Query(None, alias="groupId", description="Only employees of this group"),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_applicants(db, group_id=group_id)


@router.post(
    "",
    response_model=ApplicantCreatedResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create an applicant",
    description=(
        "Creates an individual applicant together with an In Progress quote, "
        "or a group employee assigned to a class."
    ),
)
async def create_applicant(applicant_in: ApplicantCreate, db: AsyncSession = Depends(get_db)):
    applicant, quote = await crud.create_applicant(db, applicant_in)
    return ApplicantCreatedResponse(
        applicant=ApplicantResponse.model_validate(applicant),
        quote=QuoteResponse.model_validate(quote) if quote else None,
    )


@router.patch("/{applicant_id}", response_model=ApplicantResponse, summary="Update an applicant")
async def update_applicant(
    applicant_id: int, applicant_in: ApplicantUpdate, db: AsyncSession = Depends(get_db)
):
    return await crud.update_applicant(db, applicant_id, applicant_in)
