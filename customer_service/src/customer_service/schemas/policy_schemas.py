from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from shared.schemas import CamelModel

from ..models.policy import PolicyStatus

PolicyType = Literal["Individual", "Group"]


class MessageResponse(CamelModel):
    message: str


class CoverageIn(CamelModel):
    product_type: str
    details: Optional[str] = None
    premium: Optional[str] = None


class PolicyHolderIn(CamelModel):
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    email: str
    birthdate: Optional[datetime] = None
    phone_number: Optional[str] = None
    source_applicant_id: Optional[int] = None


class IndividualPolicyCreate(CamelModel):
    """Payload for creating an individual policy directly, outside quote conversion."""

    policy_number: Optional[str] = None
    source_quote_id: Optional[int] = None
    effective_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    holder: Optional[PolicyHolderIn] = None
    coverages: List[CoverageIn] = []


class PolicyHolderUpdate(CamelModel):
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    birthdate: Optional[datetime] = None
    phone_number: Optional[str] = None


class PolicyClassIn(CamelModel):
    class_name: str = Field(..., min_length=1)
    description: Optional[str] = None
    members: List[PolicyHolderIn] = []
    coverages: List[CoverageIn] = []


class GroupPolicyCreate(CamelModel):
    """Payload for creating a group policy directly, with its classes."""

    policy_number: Optional[str] = None
    source_quote_id: Optional[int] = None
    source_group_id: Optional[int] = None
    group_name: Optional[str] = None
    effective_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    classes: List[PolicyClassIn] = []


class PolicyUpdate(CamelModel):
    status: Optional[PolicyStatus] = None
    expiration_date: Optional[datetime] = None


class GroupPolicyUpdate(PolicyUpdate):
    group_name: Optional[str] = None


class IndividualPolicyResponse(CamelModel):
    id: int
    policy_number: str
    source_quote_id: int
    status: PolicyStatus
    effective_date: datetime
    expiration_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class GroupPolicyResponse(CamelModel):
    id: int
    policy_number: str
    source_quote_id: int
    source_group_id: Optional[int] = None
    group_name: str
    status: PolicyStatus
    effective_date: datetime
    expiration_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class PolicySummary(CamelModel):
    """Either kind of policy, tagged with its type and a name to show."""

    id: int
    type: PolicyType
    display_name: str
    policy_number: str
    source_quote_id: int
    source_group_id: Optional[int] = None
    group_name: Optional[str] = None
    status: PolicyStatus
    effective_date: datetime
    expiration_date: Optional[datetime] = None
    created_at: Optional[datetime] = None


class PolicyCounts(CamelModel):
    individual: int
    group: int
    total: int


class PolicyListResponse(CamelModel):
    policies: List[PolicySummary]
    counts: PolicyCounts


class InsuredPersonResponse(CamelModel):
    """A policy holder (policy_id set) or a group member (class_id set)."""

    id: int
    policy_id: Optional[int] = None
    class_id: Optional[int] = None
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    email: str
    birthdate: Optional[datetime] = None
    phone_number: Optional[str] = None
    source_applicant_id: Optional[int] = None
    created_at: Optional[datetime] = None


class PolicyCoverageResponse(CamelModel):
    id: int
    policy_id: Optional[int] = None
    class_id: Optional[int] = None
    product_type: str
    details: Optional[str] = None
    premium: Optional[str] = None
    created_at: Optional[datetime] = None


class PolicyClassDetail(CamelModel):
    id: int
    group_policy_id: int
    class_name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    members: List[InsuredPersonResponse] = []
    coverages: List[PolicyCoverageResponse] = []


class PolicyDetailResponse(CamelModel):
    policy: PolicySummary
    policy_holders: List[InsuredPersonResponse] = []
    policy_coverages: List[PolicyCoverageResponse] = []
    classes: Optional[List[PolicyClassDetail]] = None


class IndividualPolicyCreatedResponse(CamelModel):
    policy: IndividualPolicyResponse


class GroupPolicyCreatedResponse(CamelModel):
    policy: GroupPolicyResponse


class IndividualPolicyDetailResponse(CamelModel):
    policy: IndividualPolicyResponse
    policy_holder: Optional[InsuredPersonResponse] = None
    coverages: List[PolicyCoverageResponse] = []


class GroupPolicyDetailResponse(CamelModel):
    policy: GroupPolicyResponse
    classes: List[PolicyClassDetail] = []
