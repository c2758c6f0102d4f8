# src/auth_service/crud/users.py
"""
CRUD operations for users and their role assignments.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from auth_service.logging_config import logger
from shared.errors import Conflict
from shared.schemas import parse_roles

from ..models.user import User
from ..models.user_role import UserRole
from ..schemas.user_schemas import UserCreate
from ..security import hash_password, verify_password


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    """Retrieves a user from the database by email."""
    result = await db.execute(select(User).where(User.email == normalize_email(email)))
    return result.scalars().first()


async def get_user_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalars().first()


async def list_users(db: AsyncSession) -> List[User]:
    result = await db.execute(select(User).order_by(User.created_at.desc()))
    return list(result.scalars().all())


async def create_user(db: AsyncSession, user_in: UserCreate) -> User:
    """
    Create a user with a hashed password and the recognised subset of roles.

    Args:
        db: Database session
        user_in: Registration data

    Returns:
        User: The created user, with roles loaded

    Raises:
        Conflict: If the email is already registered
    """
    if await get_user_by_email(db, user_in.email):
        raise Conflict("User with this email already exists")

    user = User(
        email=normalize_email(user_in.email),
        password_hash=hash_password(user_in.password),
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        is_active=True,
    )
    user.roles = [UserRole(role=role) for role in parse_roles(user_in.roles)]
    db.add(user)
    await db.flush()
    await db.refresh(user)

    logger.info(f"Created user {user.id} with roles {[r.value for r in user.role_names]}")
    return user


async def authenticate_user(db: AsyncSession, email: str, password: str) -> Optional[User]:
    """
    Return the active user whose password matches, or None.
    """
    user = await get_user_by_email(db, email)
    if user is None or not user.is_active:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user
