"""
Turning a sold quote into a policy.

The quote is read from the quoting service, the policy rows are written here
and the quote is archived in the quoting service last. A failed archive
raises, so the request's transaction rolls the new policy back.
"""

import secrets
import string
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import InvalidRequest, NotFound, UpstreamError

from ..clients.quoting_client import QuotingClient
from ..logging_config import logger
from ..schemas.conversion_schemas import ConvertQuoteRequest, RemoteQuoteDetail
from ..schemas.policy_schemas import CoverageIn, PolicyClassIn, PolicyHolderIn
from .policies import (
    ensure_policy_number_free,
    insert_group_policy,
    insert_individual_policy,
    summarize_group,
    summarize_individual,
)

READY_FOR_SALE = "Ready for Sale"
INDIVIDUAL = "Individual"
UNKNOWN_GROUP = "Unknown Group"

_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits


def generate_policy_number(now: Optional[datetime] = None) -> str:
    """POL-YYYYMMDD-XXXXX, dated in UTC with a random alphanumeric suffix."""
    now = now or datetime.now(timezone.utc)
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(5))
    return f"POL-{now.strftime('%Y%m%d')}-{suffix}"


async def load_quote_detail(quoting: QuotingClient, quote_id: int) -> RemoteQuoteDetail:
    try:
        payload = await quoting.fetch_quote_detail(quote_id)
    except UpstreamError as e:
        if e.upstream_status == 404:
            raise NotFound("Quote not found")
        raise
    detail = RemoteQuoteDetail.model_validate(payload or {})
    if detail.quote is None:
        raise NotFound("Quote not found")
    return detail


async def _convert_individual(
    db: AsyncSession,
    detail: RemoteQuoteDetail,
    request: ConvertQuoteRequest,
    policy_number: str,
) -> Dict[str, Any]:
    applicant = detail.applicant
    holder = None
    if applicant is not None:
        if not applicant.email:
            raise InvalidRequest("Applicant email is required to create a policy holder")
        holder = PolicyHolderIn(
            first_name=applicant.first_name,
            middle_name=applicant.middle_name,
            last_name=applicant.last_name,
            email=applicant.email,
            birthdate=applicant.birthdate,
            phone_number=applicant.phone_number,
            source_applicant_id=applicant.id,
        )

    policy, holder_row = await insert_individual_policy(
        db,
        policy_number=policy_number,
        source_quote_id=detail.quote.id,
        effective_date=request.effective_date,
        expiration_date=request.expiration_date,
        holder=holder,
        coverages=[
            CoverageIn(product_type=c.product_type, details=c.details) for c in detail.coverages
        ],
    )
    return summarize_individual(policy, holder_row)


async def _convert_group(
    db: AsyncSession,
    detail: RemoteQuoteDetail,
    request: ConvertQuoteRequest,
    policy_number: str,
) -> Dict[str, Any]:
    classes = []
    for class_def in request.classes:
        # Employees of this quote's group, in group order; unknown or repeated ids add nobody
        member_ids = set(class_def.member_ids)
        members = [
            PolicyHolderIn(
                first_name=employee.first_name,
                middle_name=employee.middle_name,
                last_name=employee.last_name,
                email=employee.email or "",
                birthdate=employee.birthdate,
                phone_number=employee.phone_number,
                source_applicant_id=employee.id,
            )
            for employee in detail.group_applicants
            if employee.id in member_ids
        ]
        classes.append(
            PolicyClassIn(
                class_name=class_def.class_name,
                description=class_def.description,
                members=members,
                coverages=class_def.coverages,
            )
        )

    policy = await insert_group_policy(
        db,
        policy_number=policy_number,
        source_quote_id=detail.quote.id,
        source_group_id=detail.group.id if detail.group else None,
        group_name=detail.group.group_name if detail.group else UNKNOWN_GROUP,
        effective_date=request.effective_date,
        expiration_date=request.expiration_date,
        classes=classes,
    )
    return summarize_group(policy)


async def convert_quote(
    db: AsyncSession, request: ConvertQuoteRequest, quoting: QuotingClient
) -> Dict[str, Any]:
    """
    Convert a Ready for Sale quote into an individual or group policy.

    Args:
        db: Database session
        request: Quote id, dates and, for group quotes, the class layout
        quoting: Client for reading and archiving the quote

    Returns:
        The conversion message, the new policy and its number

    Raises:
        InvalidRequest: Missing input, wrong quote status or no classes for a group quote
        NotFound: The quoting service has no such quote
        UpstreamError: The quoting service failed
    """
    if not (request.quote_id and request.effective_date):
        raise InvalidRequest("Quote ID and effective date are required")

    detail = await load_quote_detail(quoting, request.quote_id)
    if detail.quote.status != READY_FOR_SALE:
        raise InvalidRequest('Quote must be in "Ready for Sale" status to convert')

    individual = detail.quote.type == INDIVIDUAL
    if not individual and not request.classes:
        raise InvalidRequest("Class definitions are required for group policy conversion")

    policy_number = generate_policy_number()
    await ensure_policy_number_free(db, policy_number)

    if individual:
        policy = await _convert_individual(db, detail, request, policy_number)
        message = "Individual quote converted to policy successfully"
    else:
        policy = await _convert_group(db, detail, request, policy_number)
        message = "Group quote converted to policy successfully"

    await quoting.archive_quote(request.quote_id)
    logger.info(f"Quote {request.quote_id} converted to {policy_number} and archived")

    return {"message": message, "policy": policy, "policy_number": policy_number}
