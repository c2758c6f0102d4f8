from datetime import date, datetime
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import InvalidRequest, NotFound

from ..logging_config import logger
from ..models.quote import Applicant, ApplicantStatus, Quote, QuoteStatus, QuoteType
from ..schemas.applicant_schemas import ApplicantCreate, ApplicantUpdate


def _as_datetime(value: date) -> datetime:
    return datetime(value.year, value.month, value.day)


def validate_new_applicant(applicant_in: ApplicantCreate) -> QuoteType:
    """
    Check the fields required for the applicant's quote type.

    Individual applicants need contact and address details; group employees
    need a class.

    Raises:
        InvalidRequest: Unknown quote type or a missing required field
    """
    a = applicant_in
    if a.quote_type == QuoteType.INDIVIDUAL.value:
        if not (a.first_name and a.last_name and a.birthdate and a.email):
            raise InvalidRequest(
                "First name, last name, birthdate, and email are required for individual applicants"
            )
        if not (a.address_line_1 and a.city and a.country and a.postal_code):
            raise InvalidRequest(
                "Address line 1, city, country, and postal code are required for individual applicants"
            )
        return QuoteType.INDIVIDUAL
    if a.quote_type == QuoteType.GROUP.value:
        if not (a.first_name and a.last_name and a.birthdate and a.class_id):
            raise InvalidRequest(
                "First name, last name, birthdate, and class are required for group employees"
            )
        return QuoteType.GROUP
    raise InvalidRequest("Quote type must be Individual or Group")


async def list_applicants(db: AsyncSession, group_id: Optional[int] = None) -> List[Applicant]:
    query = select(Applicant).order_by(Applicant.id)
    if group_id is not None:
        query = query.where(Applicant.group_id == group_id)
    result = await db.execute(query)
    return list(result.scalars().all())


async def create_applicant(
    db: AsyncSession, applicant_in: ApplicantCreate
) -> Tuple[Applicant, Optional[Quote]]:
    """
    Create an applicant, and for individual applicants their quote.

    Group employees belong to the group's existing quote, so none is created.

    Returns:
        The applicant and the new quote, or None for group employees
    """
    quote_type = validate_new_applicant(applicant_in)

    data = applicant_in.model_dump(exclude={"quote_type", "birthdate"})
    applicant = Applicant(
        **{key: (value or None) for key, value in data.items()},
        birthdate=_as_datetime(applicant_in.birthdate),
        quote_type=quote_type,
        status=ApplicantStatus.INCOMPLETE,
    )
    db.add(applicant)
    await db.flush()
    await db.refresh(applicant)

    quote = None
    if quote_type == QuoteType.INDIVIDUAL:
        quote = Quote(
            applicant_id=applicant.id,
            type=QuoteType.INDIVIDUAL,
            status=QuoteStatus.IN_PROGRESS,
        )
        db.add(quote)
        await db.flush()
        await db.refresh(quote)
        logger.info(f"Created applicant {applicant.id} with individual quote {quote.id}")
    else:
        logger.info(f"Created group employee {applicant.id} in group {applicant.group_id}")

    return applicant, quote


async def get_applicant(db: AsyncSession, applicant_id: int) -> Applicant:
    result = await db.execute(select(Applicant).where(Applicant.id == applicant_id))
    applicant = result.scalar_one_or_none()
    if applicant is None:
        raise NotFound("Applicant not found")
    return applicant


async def update_applicant(
    db: AsyncSession, applicant_id: int, applicant_in: ApplicantUpdate
) -> Applicant:
    changes = applicant_in.model_dump(exclude_unset=True)
    if not changes:
        raise InvalidRequest("No fields to update")

    applicant = await get_applicant(db, applicant_id)
    for field, value in changes.items():
        if field == "birthdate" and value is not None:
            value = _as_datetime(value)
        setattr(applicant, field, value)
    await db.flush()
    await db.refresh(applicant)

    logger.info(f"Updated applicant {applicant_id}: {sorted(changes)}")
    return applicant
