# quoting_service/src/quoting_service/models/quote.py
"""
Quoting tables: groups, employee classes, applicants, quotes and coverages.

Foreign keys are declared for the storage engine; deletes are ordered by the
CRUD layer rather than cascaded by the ORM.
"""

import enum

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String, Text

from shared.models.base import Base, CreatedAtMixin, IntIdMixin


class QuoteStatus(str, enum.Enum):
    IN_PROGRESS = "In Progress"
    READY_FOR_SALE = "Ready for Sale"
    ARCHIVED = "Archived"


class QuoteType(str, enum.Enum):
    INDIVIDUAL = "Individual"
    GROUP = "Group"


class ApplicantStatus(str, enum.Enum):
    INCOMPLETE = "Incomplete"
    COMPLETE = "Complete"


def _values(enum_cls):
    return [member.value for member in enum_cls]


quote_type_enum = Enum(QuoteType, name="quote_type", values_callable=_values)


class Group(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "groups"

    group_name = Column(String(256), nullable=False)

    def __repr__(self):
        return f"<Group(id={self.id}, group_name='{self.group_name}')>"


class EmployeeClass(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "employee_classes"

    group_id = Column(Integer, ForeignKey("groups.id"), nullable=False, index=True)
    class_name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)


class Applicant(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "applicants"

    first_name = Column(String(256), nullable=False)
    middle_name = Column(String(256), nullable=True)
    last_name = Column(String(256), nullable=False)
    birthdate = Column(DateTime, nullable=False)
    phone_number = Column(String(20), nullable=True)
    email = Column(String(256), nullable=True)
    address_line_1 = Column(String(256), nullable=True)
    address_line_2 = Column(String(256), nullable=True)
    city = Column(String(100), nullable=True)
    state_province = Column(String(100), nullable=True)
    postal_code = Column(String(20), nullable=True)
    # ISO 3166-1 alpha-2
    country = Column(String(2), nullable=True)
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=True, index=True)
    class_id = Column(Integer, ForeignKey("employee_classes.id"), nullable=True, index=True)
    quote_type = Column(quote_type_enum, nullable=True)
    status = Column(
        Enum(ApplicantStatus, name="applicant_status", values_callable=_values),
        default=ApplicantStatus.INCOMPLETE,
        nullable=False,
    )


class Quote(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "quotes"

    status = Column(
        Enum(QuoteStatus, name="quote_status", values_callable=_values),
        default=QuoteStatus.IN_PROGRESS,
        nullable=False,
    )
    type = Column(quote_type_enum, nullable=False)
    applicant_id = Column(Integer, ForeignKey("applicants.id"), nullable=True)
    group_id = Column(Integer, ForeignKey("groups.id"), nullable=True)

    def __repr__(self):
        return f"<Quote(id={self.id}, type='{self.type}', status='{self.status}')>"


class Coverage(Base, IntIdMixin):
    __tablename__ = "coverages"

    quote_id = Column(Integer, ForeignKey("quotes.id"), nullable=False, index=True)
    product_type = Column(String(100), nullable=False)
    details = Column(Text, nullable=True)
