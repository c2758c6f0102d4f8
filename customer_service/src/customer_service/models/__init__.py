from .policy import (
    ClassCoverage,
    GroupMember,
    GroupPolicy,
    IndividualPolicy,
    IndividualPolicyCoverage,
    PolicyClass,
    PolicyHolder,
    PolicyStatus,
)

__all__ = [
    "ClassCoverage",
    "GroupMember",
    "GroupPolicy",
    "IndividualPolicy",
    "IndividualPolicyCoverage",
    "PolicyClass",
    "PolicyHolder",
    "PolicyStatus",
]
