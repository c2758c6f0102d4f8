"""
CRUD operations for benefits configured on a quote.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import InvalidRequest, NotFound, UpstreamError

from ..clients.benefit_designer_client import BenefitDesignerClient
from ..logging_config import logger
from ..models.quote_benefit import QuoteBenefit
from ..schemas.benefit_schemas import QuoteBenefitCreate, QuoteBenefitUpdate
from .quotes import get_quote


def merge_template_snapshot(
    benefit_in: QuoteBenefitCreate, template: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Fill the snapshot fields the caller left out from a designer template.

    Values supplied by the caller win over the template's.
    """
    data = benefit_in.model_dump()
    fallbacks = {
        "template_uuid": template.get("templateId"),
        "template_name": template.get("name"),
        "template_version": template.get("version"),
        "category_name": template.get("categoryName"),
        "category_icon": template.get("categoryIcon"),
        "field_schema": template.get("fieldSchema"),
        "configured_values": template.get("defaultValues"),
    }
    for field, value in fallbacks.items():
        if data.get(field) is None:
            data[field] = value
    if data["configured_values"] is None:
        data["configured_values"] = {}
    return data


async def list_quote_benefits(
    db: AsyncSession, quote_id: Optional[int] = None
) -> List[QuoteBenefit]:
    query = select(QuoteBenefit).order_by(QuoteBenefit.id)
    if quote_id is not None:
        query = query.where(QuoteBenefit.quote_id == quote_id)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_quote_benefit(db: AsyncSession, benefit_id: int) -> QuoteBenefit:
    result = await db.execute(select(QuoteBenefit).where(QuoteBenefit.id == benefit_id))
    benefit = result.scalar_one_or_none()
    if benefit is None:
        raise NotFound("Quote benefit not found")
    return benefit


async def create_quote_benefit(
    db: AsyncSession,
    benefit_in: QuoteBenefitCreate,
    designer: BenefitDesignerClient,
) -> QuoteBenefit:
    """
    Configure a benefit on a quote from a template snapshot.

    Args:
        db: Database session
        benefit_in: The benefit to add
        designer: Client used to load the template when the snapshot is partial

    Raises:
        NotFound: The quote doesn't exist
        InvalidRequest: The template doesn't exist or lacks snapshot fields
    """
    await get_quote(db, benefit_in.quote_id)

    if benefit_in.snapshot_complete():
        data = benefit_in.model_dump()
        if data["configured_values"] is None:
            data["configured_values"] = {}
    else:
        try:
            template = await designer.fetch_template_by_id(benefit_in.template_db_id)
        except UpstreamError as e:
            if e.upstream_status == 404:
                raise InvalidRequest(f"Benefit template {benefit_in.template_db_id} not found")
            raise
        data = merge_template_snapshot(benefit_in, template)

    missing = [
        field
        for field in ("template_uuid", "template_name", "template_version", "category_name", "field_schema")
        if data.get(field) is None
    ]
    if missing:
        raise InvalidRequest(f"Missing required fields: {', '.join(missing)}")

    benefit = QuoteBenefit(**data)
    db.add(benefit)
    await db.flush()
    await db.refresh(benefit)

    logger.info(
        f"Added benefit {benefit.id} ({benefit.template_name} v{benefit.template_version}) "
        f"to quote {benefit.quote_id}"
    )
    return benefit


async def update_quote_benefit(
    db: AsyncSession, benefit_id: int, benefit_in: QuoteBenefitUpdate
) -> QuoteBenefit:
    changes = benefit_in.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise InvalidRequest("No fields to update")

    benefit = await get_quote_benefit(db, benefit_id)
    for field, value in changes.items():
        setattr(benefit, field, value)
    await db.flush()
    await db.refresh(benefit)
    return benefit


async def delete_quote_benefit(db: AsyncSession, benefit_id: int) -> None:
    await get_quote_benefit(db, benefit_id)
    await db.execute(delete(QuoteBenefit).where(QuoteBenefit.id == benefit_id))
    logger.info(f"Deleted quote benefit {benefit_id}")
