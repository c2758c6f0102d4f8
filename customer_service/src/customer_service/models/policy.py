# customer_service/src/customer_service/models/policy.py
"""
Policy tables.

Individual policies carry one holder and their own coverages. Group policies
are split into classes, and each class carries its members and coverages.
"""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text

from shared.models.base import Base, CreatedAtMixin, IntIdMixin


class PolicyStatus(str, enum.Enum):
    ACTIVE = "Active"
    CANCELLED = "Cancelled"
    EXPIRED = "Expired"


policy_status_enum = Enum(
    PolicyStatus,
    name="policy_status",
    values_callable=lambda enum_cls: [member.value for member in enum_cls],
)


class IndividualPolicy(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "individual_policies"

    policy_number = Column(String(50), unique=True, nullable=False)
    source_quote_id = Column(Integer, nullable=False)
    status = Column(policy_status_enum, default=PolicyStatus.ACTIVE, nullable=False)
    effective_date = Column(DateTime, nullable=False)
    expiration_date = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<IndividualPolicy(id={self.id}, policy_number='{self.policy_number}')>"


class PolicyHolder(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "policy_holders"

    # One holder per individual policy
    policy_id = Column(Integer, ForeignKey("individual_policies.id"), unique=True, nullable=False)
    first_name = Column(String(256), nullable=False)
    middle_name = Column(String(256), nullable=True)
    last_name = Column(String(256), nullable=False)
    email = Column(String(256), nullable=False)
    birthdate = Column(DateTime, nullable=True)
    phone_number = Column(String(20), nullable=True)
    source_applicant_id = Column(Integer, nullable=True)

    @property
    def full_name(self) -> str:
        names = [self.first_name, self.middle_name, self.last_name]
        return " ".join(name for name in names if name)


class IndividualPolicyCoverage(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "individual_policy_coverages"

    policy_id = Column(Integer, ForeignKey("individual_policies.id"), nullable=False, index=True)
    product_type = Column(String(100), nullable=False)
    details = Column(Text, nullable=True)
    premium = Column(String(50), nullable=True)


class GroupPolicy(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "group_policies"

    policy_number = Column(String(50), unique=True, nullable=False)
    source_quote_id = Column(Integer, nullable=False)
    source_group_id = Column(Integer, nullable=True)
    group_name = Column(String(256), nullable=False)
    status = Column(policy_status_enum, default=PolicyStatus.ACTIVE, nullable=False)
    effective_date = Column(DateTime, nullable=False)
    expiration_date = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<GroupPolicy(id={self.id}, policy_number='{self.policy_number}')>"


class PolicyClass(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "policy_classes"

    group_policy_id = Column(Integer, ForeignKey("group_policies.id"), nullable=False, index=True)
    class_name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)


class GroupMember(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "group_members"

    class_id = Column(Integer, ForeignKey("policy_classes.id"), nullable=False, index=True)
    first_name = Column(String(256), nullable=False)
    middle_name = Column(String(256), nullable=True)
    last_name = Column(String(256), nullable=False)
    email = Column(String(256), nullable=False)
    birthdate = Column(DateTime, nullable=True)
    phone_number = Column(String(20), nullable=True)
    source_applicant_id = Column(Integer, nullable=True)


class ClassCoverage(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "class_coverages"

    class_id = Column(Integer, ForeignKey("policy_classes.id"), nullable=False, index=True)
    product_type = Column(String(100), nullable=False)
    details = Column(Text, nullable=True)
    premium = Column(String(50), nullable=True)
