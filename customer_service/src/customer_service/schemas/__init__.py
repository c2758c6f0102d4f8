from .conversion_schemas import (
    ClassDefinition,
    ConvertQuoteRequest,
    ConvertQuoteResponse,
    RemoteApplicant,
    RemoteCoverage,
    RemoteGroup,
    RemoteQuote,
    RemoteQuoteDetail,
)
from .policy_schemas import (
    CoverageIn,
    GroupPolicyCreate,
    GroupPolicyCreatedResponse,
    GroupPolicyDetailResponse,
    GroupPolicyResponse,
    GroupPolicyUpdate,
    IndividualPolicyCreate,
    IndividualPolicyCreatedResponse,
    IndividualPolicyDetailResponse,
    IndividualPolicyResponse,
    InsuredPersonResponse,
    MessageResponse,
    PolicyClassDetail,
    PolicyClassIn,
    PolicyCounts,
    PolicyCoverageResponse,
    PolicyDetailResponse,
    PolicyHolderIn,
    PolicyHolderUpdate,
    PolicyListResponse,
    PolicySummary,
    PolicyUpdate,
)

__all__ = [
    "ClassDefinition",
    "ConvertQuoteRequest",
    "ConvertQuoteResponse",
    "CoverageIn",
    "GroupPolicyCreate",
    "GroupPolicyCreatedResponse",
    "GroupPolicyDetailResponse",
    "GroupPolicyResponse",
    "GroupPolicyUpdate",
    "IndividualPolicyCreate",
    "IndividualPolicyCreatedResponse",
    "IndividualPolicyDetailResponse",
    "IndividualPolicyResponse",
    "InsuredPersonResponse",
    "MessageResponse",
    "PolicyClassDetail",
    "PolicyClassIn",
    "PolicyCounts",
    "PolicyCoverageResponse",
    "PolicyDetailResponse",
    "PolicyHolderIn",
    "PolicyHolderUpdate",
    "PolicyListResponse",
    "PolicySummary",
    "PolicyUpdate",
    "RemoteApplicant",
    "RemoteCoverage",
    "RemoteGroup",
    "RemoteQuote",
    "RemoteQuoteDetail",
]
