from sqlalchemy import Column, Enum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from shared.models.base import Base, CreatedAtMixin, IntIdMixin
from shared.schemas.roles import Role


class UserRole(Base, IntIdMixin, CreatedAtMixin):
    __tablename__ = "user_roles"
    __table_args__ = (
        UniqueConstraint("user_id", "role", name="uq_user_role_assignment"),
    )

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    role = Column(
        Enum(Role, name="role", values_callable=lambda roles: [r.value for r in roles]),
        nullable=False,
    )

    user = relationship("User", back_populates="roles")

    def __repr__(self):
        return f"<UserRole(user_id={self.user_id}, role='{self.role}')>"
