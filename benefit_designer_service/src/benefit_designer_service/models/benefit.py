# benefit_designer_service/src/benefit_designer_service/models/benefit.py
"""
Benefit categories and versioned benefit templates.

All versions of one template share a template_id UUID; each version is its
own row with a major.minor version string.
"""

import enum

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import relationship

from shared.models.base import Base, IntIdMixin, TimestampMixin


class BenefitType(str, enum.Enum):
    GROUP = "group"
    INDIVIDUAL = "individual"


class TemplateStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


def _values(enum_cls):
    return [member.value for member in enum_cls]


ALL_BENEFIT_TYPES = [BenefitType.GROUP.value, BenefitType.INDIVIDUAL.value]


class BenefitCategory(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "benefit_categories"

    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    # Emoji or icon name shown next to the category
    icon = Column(String(50), nullable=True)
    applies_to = Column(JSONB, nullable=False, default=lambda: list(ALL_BENEFIT_TYPES))
    is_active = Column(Boolean, default=True, nullable=False)
    display_order = Column(Integer, default=0, nullable=False)

    def supports(self, benefit_type: str) -> bool:
        return benefit_type in (self.applies_to or [])

    def __repr__(self):
        return f"<BenefitCategory(id={self.id}, name='{self.name}')>"


class BenefitTemplate(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "benefit_templates"

    template_id = Column(UUID(as_uuid=False), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("benefit_categories.id"), nullable=False)
    type = Column(Enum(BenefitType, name="benefit_type", values_callable=_values), nullable=False)
    name = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)

    version = Column(String(20), nullable=False)
    major_version = Column(Integer, nullable=False, default=1)
    minor_version = Column(Integer, nullable=False, default=0)

    field_schema = Column(JSONB, nullable=False, default=lambda: {"fields": []})
    default_values = Column(JSONB, nullable=True, default=dict)

    status = Column(
        Enum(TemplateStatus, name="template_status", values_callable=_values),
        default=TemplateStatus.DRAFT,
        nullable=False,
    )
    created_by = Column(Integer, nullable=True)

    category = relationship("BenefitCategory", lazy="joined")

    @property
    def category_name(self):
        return self.category.name if self.category else None

    @property
    def category_icon(self):
        return self.category.icon if self.category else None

    @property
    def version_key(self):
        return (self.major_version, self.minor_version)

    def __repr__(self):
        return f"<BenefitTemplate(id={self.id}, name='{self.name}', version='{self.version}')>"
