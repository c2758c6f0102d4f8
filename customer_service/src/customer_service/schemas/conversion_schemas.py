from datetime import datetime
from typing import List, Optional

from pydantic import Field

from shared.schemas import CamelModel

from .policy_schemas import CoverageIn, PolicySummary


class ClassDefinition(CamelModel):
    """A class of the new group policy and the quote employees placed in it."""

    class_name: str = Field(..., min_length=1)
    description: Optional[str] = None
    member_ids: List[int] = []
    coverages: List[CoverageIn] = []


class ConvertQuoteRequest(CamelModel):
    quote_id: Optional[int] = None
    effective_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    classes: Optional[List[ClassDefinition]] = None


class ConvertQuoteResponse(CamelModel):
    message: str
    policy: PolicySummary
    policy_number: str


# Shapes read back from the quoting service; unknown fields are ignored.


class RemoteQuote(CamelModel):
    id: int
    status: str
    type: str
    applicant_id: Optional[int] = None
    group_id: Optional[int] = None


class RemoteApplicant(CamelModel):
    id: int
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    email: Optional[str] = None
    birthdate: Optional[datetime] = None
    phone_number: Optional[str] = None


class RemoteGroup(CamelModel):
    id: int
    group_name: str


class RemoteCoverage(CamelModel):
    id: int
    product_type: str
    details: Optional[str] = None


class RemoteQuoteDetail(CamelModel):
    quote: Optional[RemoteQuote] = None
    applicant: Optional[RemoteApplicant] = None
    group: Optional[RemoteGroup] = None
    group_applicants: List[RemoteApplicant] = []
    coverages: List[RemoteCoverage] = []
