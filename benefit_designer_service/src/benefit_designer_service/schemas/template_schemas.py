from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from shared.schemas import CamelModel

from ..models.benefit import BenefitType, TemplateStatus


class TemplateCreate(CamelModel):
    """A new template; it starts at version 1.0 under a fresh template UUID."""

    category_id: Optional[int] = None
    type: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    field_schema: Optional[Dict[str, Any]] = None
    default_values: Optional[Dict[str, Any]] = None
    status: TemplateStatus = TemplateStatus.DRAFT


class TemplateUpdate(CamelModel):
    """
    Changes to a template.

    Drafts change in place; an active or archived template gets a new version
    instead, bumped by version_bump.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    field_schema: Optional[Dict[str, Any]] = None
    default_values: Optional[Dict[str, Any]] = None
    status: Optional[TemplateStatus] = None
    version_bump: Literal["minor", "major"] = "minor"


class TemplateStatusUpdate(CamelModel):
    status: Optional[str] = None


class TemplateVersionResponse(CamelModel):
    id: int
    template_id: str
    category_id: int
    category_name: Optional[str] = None
    type: BenefitType
    name: str
    description: Optional[str] = None
    version: str
    major_version: int
    minor_version: int
    status: TemplateStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TemplateResponse(TemplateVersionResponse):
    category_icon: Optional[str] = None
    field_schema: Dict[str, Any]
    default_values: Optional[Dict[str, Any]] = None
    created_by: Optional[int] = None


class TemplateVersionsResponse(CamelModel):
    template_id: str
    name: str
    versions: List[TemplateVersionResponse]
