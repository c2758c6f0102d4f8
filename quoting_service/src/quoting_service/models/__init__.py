from .quote import (
    Applicant,
    ApplicantStatus,
    Coverage,
    EmployeeClass,
    Group,
    Quote,
    QuoteStatus,
    QuoteType,
)
from .quote_benefit import QuoteBenefit

__all__ = [
    "Applicant",
    "ApplicantStatus",
    "Coverage",
    "EmployeeClass",
    "Group",
    "Quote",
    "QuoteBenefit",
    "QuoteStatus",
    "QuoteType",
]
