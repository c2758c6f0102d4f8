"""
CRUD operations for quotes.

Deleting a quote removes everything that hangs off it: coverages and
configured benefits, then the applicant of an individual quote or the
employees, classes and group of a group quote.
"""

from typing import Any, Dict, List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import InvalidRequest, NotFound

from ..logging_config import logger
from ..models.quote import Applicant, Coverage, EmployeeClass, Group, Quote
from ..models.quote_benefit import QuoteBenefit
from ..schemas.quote_schemas import QuoteUpdate


async def list_quotes(db: AsyncSession) -> List[Quote]:
    result = await db.execute(select(Quote).order_by(Quote.id))
    return list(result.scalars().all())


async def get_quote(db: AsyncSession, quote_id: int) -> Quote:
    """
    Get a quote by ID.

    Raises:
        NotFound: If the quote doesn't exist
    """
    result = await db.execute(select(Quote).where(Quote.id == quote_id))
    quote = result.scalar_one_or_none()
    if quote is None:
        raise NotFound("Quote not found")
    return quote


async def get_quote_detail(db: AsyncSession, quote_id: int) -> Dict[str, Any]:
    """
    Get a quote together with its applicant or group, the group's employees
    and classes, and its coverages.
    """
    quote = await get_quote(db, quote_id)

    applicant = None
    group = None
    group_applicants: List[Applicant] = []
    employee_classes: List[EmployeeClass] = []

    if quote.applicant_id:
        result = await db.execute(select(Applicant).where(Applicant.id == quote.applicant_id))
        applicant = result.scalar_one_or_none()
    elif quote.group_id:
        result = await db.execute(select(Group).where(Group.id == quote.group_id))
        group = result.scalar_one_or_none()
        result = await db.execute(
            select(Applicant).where(Applicant.group_id == quote.group_id).order_by(Applicant.id)
        )
        group_applicants = list(result.scalars().all())
        result = await db.execute(
            select(EmployeeClass)
            .where(EmployeeClass.group_id == quote.group_id)
            .order_by(EmployeeClass.id)
        )
        employee_classes = list(result.scalars().all())
        if group_applicants:
            applicant = group_applicants[0]

    result = await db.execute(select(Coverage).where(Coverage.quote_id == quote_id))
    coverages = list(result.scalars().all())

    return {
        "quote": quote,
        "applicant": applicant,
        "group": group,
        "group_applicants": group_applicants,
        "employee_classes": employee_classes,
        "coverages": coverages,
    }


async def update_quote(db: AsyncSession, quote_id: int, quote_in: QuoteUpdate) -> Quote:
    changes = quote_in.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise InvalidRequest("No fields to update")

    quote = await get_quote(db, quote_id)
    for field, value in changes.items():
        setattr(quote, field, value)
    await db.flush()
    await db.refresh(quote)

    logger.info(f"Updated quote {quote_id}: {sorted(changes)}")
    return quote


async def delete_quote(db: AsyncSession, quote_id: int) -> None:
    quote = await get_quote(db, quote_id)

    await db.execute(delete(Coverage).where(Coverage.quote_id == quote_id))
    await db.execute(delete(QuoteBenefit).where(QuoteBenefit.quote_id == quote_id))

    applicant_id = quote.applicant_id
    group_id = quote.group_id

    # The quote references the applicant and group, so it goes first
    await db.execute(delete(Quote).where(Quote.id == quote_id))

    if applicant_id:
        await db.execute(delete(Applicant).where(Applicant.id == applicant_id))

    if group_id:
        await db.execute(delete(Applicant).where(Applicant.group_id == group_id))
        await db.execute(delete(EmployeeClass).where(EmployeeClass.group_id == group_id))
        await db.execute(delete(Group).where(Group.id == group_id))

    logger.info(f"Deleted quote {quote_id} and its dependent rows")
