from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.dialects.postgresql import JSONB

from shared.models.base import Base, IntIdMixin, TimestampMixin


class QuoteBenefit(Base, IntIdMixin, TimestampMixin):
    """A benefit template snapshot configured on a quote.

    The template fields are copied at configuration time so later template
    versions do not change a quote that was already built.
    """

    __tablename__ = "quote_benefits"

    quote_id = Column(Integer, ForeignKey("quotes.id"), nullable=False, index=True)
    template_db_id = Column(Integer, nullable=False)
    template_uuid = Column(String(36), nullable=False)
    template_name = Column(String(256), nullable=False)
    template_version = Column(String(20), nullable=False)
    category_name = Column(String(100), nullable=False)
    category_icon = Column(String(50), nullable=True)
    field_schema = Column(JSONB, nullable=False)
    configured_values = Column(JSONB, nullable=False, default=dict)
    # Allows several instances of the same template on one quote
    instance_number = Column(Integer, nullable=False, default=1)
