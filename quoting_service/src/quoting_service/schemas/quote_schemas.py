from datetime import datetime
from typing import List, Optional

from shared.schemas import CamelModel

from ..models.quote import ApplicantStatus, QuoteStatus, QuoteType


class MessageResponse(CamelModel):
    message: str


class GroupResponse(CamelModel):
    id: int
    group_name: str
    created_at: Optional[datetime] = None


class EmployeeClassResponse(CamelModel):
    id: int
    group_id: int
    class_name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None


class ApplicantResponse(CamelModel):
    id: int
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    birthdate: datetime
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
    quote_type: Optional[QuoteType] = None
    status: ApplicantStatus = ApplicantStatus.INCOMPLETE
    created_at: Optional[datetime] = None


class QuoteResponse(CamelModel):
    id: int
    status: QuoteStatus
    type: QuoteType
    applicant_id: Optional[int] = None
    group_id: Optional[int] = None
    created_at: Optional[datetime] = None


class QuoteUpdate(CamelModel):
    status: Optional[QuoteStatus] = None
    type: Optional[QuoteType] = None


class CoverageResponse(CamelModel):
    id: int
    quote_id: int
    product_type: str
    details: Optional[str] = None


class QuoteDetailResponse(CamelModel):
    quote: QuoteResponse
    applicant: Optional[ApplicantResponse] = None
    group: Optional[GroupResponse] = None
    group_applicants: List[ApplicantResponse] = []
    employee_classes: List[EmployeeClassResponse] = []
    coverages: List[CoverageResponse] = []
