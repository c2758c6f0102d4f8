from .applicant_schemas import (
    ApplicantCreate,
    ApplicantCreatedResponse,
    ApplicantUpdate,
    EmployeeClassCreate,
    EmployeeClassDetailResponse,
    EmployeeClassUpdate,
    GroupCreate,
    GroupCreatedResponse,
    GroupUpdate,
)
from .benefit_schemas import QuoteBenefitCreate, QuoteBenefitResponse, QuoteBenefitUpdate
from .quote_schemas import (
    ApplicantResponse,
    CoverageResponse,
    EmployeeClassResponse,
    GroupResponse,
    MessageResponse,
    QuoteDetailResponse,
    QuoteResponse,
    QuoteUpdate,
)

__all__ = [
    "ApplicantCreate",
    "ApplicantCreatedResponse",
    "ApplicantResponse",
    "ApplicantUpdate",
    "CoverageResponse",
    "EmployeeClassCreate",
    "EmployeeClassDetailResponse",
    "EmployeeClassResponse",
    "EmployeeClassUpdate",
    "GroupCreate",
    "GroupCreatedResponse",
    "GroupResponse",
    "GroupUpdate",
    "MessageResponse",
    "QuoteBenefitCreate",
    "QuoteBenefitResponse",
    "QuoteBenefitUpdate",
    "QuoteDetailResponse",
    "QuoteResponse",
    "QuoteUpdate",
]
