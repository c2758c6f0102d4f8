"""
Read-only view of the quoting service's quotes.
"""

import asyncio

import httpx
from fastapi import APIRouter, Depends

from shared.errors import InternalError, NotFound, ServiceError, UpstreamError

from ..clients import QuotingClient, get_quoting_client
from ..dependencies import require_customer_service_access
from ..logging_config import logger

router = APIRouter(
    prefix="/api/quotes",
    tags=["Quotes"],
    dependencies=[Depends(require_customer_service_access)],
)


@router.get("", summary="Quotes, applicants and groups from the quoting service")
async def list_quotes(quoting: QuotingClient = Depends(get_quoting_client)):
    """
    Fetch quotes, applicants and groups concurrently.

    If any of the three calls fails the whole request fails; no partial
    result is returned.
    """
    try:
        quotes, applicants, groups = await asyncio.gather(
            quoting.fetch_quotes(),
            quoting.fetch_applicants(),
            quoting.fetch_groups(),
        )
    except (ServiceError, httpx.HTTPError) as e:
        logger.error(f"Error fetching quotes from Quoting Service: {e}")
        raise InternalError("Failed to fetch quotes from Quoting Service", error=str(e))

    return {"quotes": quotes, "applicants": applicants, "groups": groups}


@router.get("/{quote_id}", summary="Quote detail from the quoting service")
async def get_quote(quote_id: int, quoting: QuotingClient = Depends(get_quoting_client)):
    try:
        return await quoting.fetch_quote_detail(quote_id)
    except UpstreamError as e:
        if e.upstream_status == 404:
            raise NotFound("Quote not found")
        logger.error(f"Error fetching quote {quote_id} from Quoting Service: {e}")
        raise InternalError("Failed to fetch quote from Quoting Service", error=str(e))
    except (ServiceError, httpx.HTTPError) as e:
        logger.error(f"Error fetching quote {quote_id} from Quoting Service: {e}")
        raise InternalError("Failed to fetch quote from Quoting Service", error=str(e))
