from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field

from shared.schemas import CamelModel


class QuoteBenefitCreate(CamelModel):
    """
    A benefit to configure on a quote.

    Only the quote and the template's database id are required; snapshot
    fields left out are copied from the benefit designer's template.
    """

    quote_id: int
    template_db_id: int
    template_uuid: Optional[str] = None
    template_name: Optional[str] = None
    template_version: Optional[str] = None
    category_name: Optional[str] = None
    category_icon: Optional[str] = None
    field_schema: Optional[Dict[str, Any]] = None
    configured_values: Optional[Dict[str, Any]] = None
    instance_number: int = Field(1, ge=1)

    def snapshot_complete(self) -> bool:
        return all(
            value is not None
            for value in (
                self.template_uuid,
                self.template_name,
                self.template_version,
                self.category_name,
                self.field_schema,
            )
        )


class QuoteBenefitUpdate(CamelModel):
    configured_values: Optional[Dict[str, Any]] = None
    instance_number: Optional[int] = Field(None, ge=1)


class QuoteBenefitResponse(CamelModel):
    id: int
    quote_id: int
    template_db_id: int
    template_uuid: str
    template_name: str
    template_version: str
    category_name: str
    category_icon: Optional[str] = None
    field_schema: Dict[str, Any]
    configured_values: Dict[str, Any] = {}
    instance_number: int = 1
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
