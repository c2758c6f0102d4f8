from sqlalchemy import Column, DateTime, Integer, func
from sqlalchemy.orm import declarative_base

# The single declarative base for all services to use.
Base = declarative_base()


class IntIdMixin:
    """Mixin to provide a serial integer primary key for models."""

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)


class CreatedAtMixin:
    """Mixin to provide a created_at column for models."""

    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class TimestampMixin(CreatedAtMixin):
    """Mixin to provide created_at and updated_at columns for models."""

    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
