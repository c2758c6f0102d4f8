"""
Shared models package.
Contains the declarative base and mixins used across the services.
"""

from .base import Base, CreatedAtMixin, IntIdMixin, TimestampMixin

__all__ = ["Base", "CreatedAtMixin", "IntIdMixin", "TimestampMixin"]
