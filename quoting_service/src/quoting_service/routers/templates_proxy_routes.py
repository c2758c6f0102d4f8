"""
Proxy for benefit templates.

Browsers fetch templates through the quoting service so they never talk to
the benefit designer directly. Responses are relayed as-is and never cached.
"""

from typing import Any, Dict, Optional, Tuple

import httpx
from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from shared.errors import UpstreamTimeout

from ..clients import BenefitDesignerClient, get_benefit_designer_client
from ..config import settings
from ..dependencies import require_quoting_access
from ..logging_config import logger

router = APIRouter(
    prefix="/api/templates-proxy",
    tags=["Templates Proxy"],
    dependencies=[Depends(require_quoting_access)],
)

TEMPLATE_TYPES = ("individual", "group")
DEFAULT_TEMPLATE_TYPE = "individual"
NO_STORE = {"Cache-Control": "no-store"}


def resolve_template_request(
    template_id: Optional[int], template_type: Optional[str]
) -> Tuple[str, Optional[Dict[str, str]]]:
    """
    Choose the benefit designer path and query for a proxy request.

    An id selects a single template and wins over type; a missing or
    unrecognised type falls back to individual.
    """
    if template_id is not None:
        return f"/api/templates/{template_id}", None
    if template_type not in TEMPLATE_TYPES:
        template_type = DEFAULT_TEMPLATE_TYPE
    return "/api/templates", {"type": template_type, "status": "active", "latest": "true"}


def _failure(status_code: int, message: str, client: BenefitDesignerClient) -> JSONResponse:
    content: Dict[str, Any] = {"error": f"Failed to fetch templates: {message}"}
    if settings.is_development():
        content["attemptedUrl"] = client.build_url("/api/templates")
        content["envValue"] = (
            settings.BENEFIT_DESIGNER_URL
            if "BENEFIT_DESIGNER_URL" in settings.model_fields_set
            else "NOT SET"
        )
    return JSONResponse(status_code=status_code, content=content, headers=NO_STORE)


@router.get("", summary="Fetch benefit templates from the benefit designer")
async def templates_proxy(
    template_id: Optional[int] = Query(None, alias="id"),
    template_type: Optional[str] = Query(None, alias="type"),
    client: BenefitDesignerClient = Depends(get_benefit_designer_client),
):
    path, params = resolve_template_request(template_id, template_type)
    logger.info(f"Proxying template request to {client.build_url(path)}")

    try:
        response = await client.send("GET", path, params=params, headers=NO_STORE)
    except UpstreamTimeout as e:
        return _failure(status.HTTP_504_GATEWAY_TIMEOUT, e.message, client)
    except httpx.HTTPError as e:
        logger.error(f"Template proxy error: {e}")
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e), client)

    if not response.is_success:
        logger.error(f"Benefit designer returned {response.status_code}")
        return JSONResponse(
            status_code=response.status_code,
            content={
                "error": f"Benefit designer returned {response.status_code}: {response.text[:200]}"
            },
            headers=NO_STORE,
        )

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"Benefit designer sent a body that is not JSON: {e}")
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e), client)

    return JSONResponse(status_code=response.status_code, content=data, headers=NO_STORE)
