from datetime import date
from typing import List, Optional

from pydantic import Field

from shared.schemas import CamelModel

from ..models.quote import ApplicantStatus
from .quote_schemas import (
    ApplicantResponse,
    EmployeeClassResponse,
    GroupResponse,
    QuoteResponse,
)


class ApplicantCreate(CamelModel):
    """Applicant payload; which fields are required depends on quote_type."""

    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    birthdate: Optional[date] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    address_line_1: Optional[str] = None
    address_line_2: Optional[str] = None
    city: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    group_id: Optional[int] = None
    class_id: Optional[int] = None
    quote_type: Optional[str] = None


class ApplicantUpdate(CamelModel):
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    birthdate: Optional[date] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    status: Optional[ApplicantStatus] = None
    class_id: Optional[int] = None
    address_line_1: Optional[str] = None
    address_line_2: Optional[str] = None
    city: Optional[str] = None
    state_province: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class ApplicantCreatedResponse(CamelModel):
    applicant: ApplicantResponse
    quote: Optional[QuoteResponse] = None


class GroupCreate(CamelModel):
    group_name: str = Field(..., min_length=1)


class GroupUpdate(CamelModel):
    group_name: Optional[str] = Field(None, min_length=1)


class GroupCreatedResponse(CamelModel):
    group: GroupResponse
    quote: QuoteResponse


class EmployeeClassCreate(CamelModel):
    group_id: int
    class_name: str = Field(..., min_length=1)
    description: Optional[str] = None


class EmployeeClassUpdate(CamelModel):
    class_name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None


class EmployeeClassDetailResponse(EmployeeClassResponse):
    members: List[ApplicantResponse] = []
