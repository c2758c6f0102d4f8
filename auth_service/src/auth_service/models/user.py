# auth_service/src/auth_service/models/user.py

from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from shared.models.base import Base, IntIdMixin, TimestampMixin


class User(Base, IntIdMixin, TimestampMixin):
    __tablename__ = "users"

    email = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    roles = relationship(
        "UserRole",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def role_names(self):
        return [assignment.role for assignment in self.roles]

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
