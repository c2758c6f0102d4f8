"""
CRUD operations for benefit categories.

Categories are never removed; deleting one deactivates it so existing
templates keep their category.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import Conflict, InvalidRequest, NotFound

from ..logging_config import logger
from ..models.benefit import ALL_BENEFIT_TYPES, BenefitCategory
from ..schemas.category_schemas import CategoryCreate, CategoryUpdate

DUPLICATE_NAME = "A category with this name already exists"


async def list_categories(
    db: AsyncSession, active_only: bool = True, benefit_type: Optional[str] = None
) -> List[BenefitCategory]:
    """Categories by display order then name, optionally only those for one benefit type."""
    query = select(BenefitCategory).order_by(BenefitCategory.display_order, BenefitCategory.name)
    if active_only:
        query = query.where(BenefitCategory.is_active.is_(True))
    result = await db.execute(query)
    categories = list(result.scalars().all())
    if benefit_type:
        categories = [c for c in categories if c.supports(benefit_type)]
    return categories


async def get_category(db: AsyncSession, category_id: int) -> BenefitCategory:
    result = await db.execute(select(BenefitCategory).where(BenefitCategory.id == category_id))
    category = result.scalar_one_or_none()
    if category is None:
        raise NotFound("Category not found")
    return category


async def _ensure_name_free(db: AsyncSession, name: str, exclude_id: Optional[int] = None) -> None:
    query = select(BenefitCategory.id).where(BenefitCategory.name == name)
    if exclude_id is not None:
        query = query.where(BenefitCategory.id != exclude_id)
    result = await db.execute(query)
    if result.scalar_one_or_none() is not None:
        raise Conflict(DUPLICATE_NAME)


async def create_category(db: AsyncSession, category_in: CategoryCreate) -> BenefitCategory:
    """
    Create an active category.

    Raises:
        InvalidRequest: No name given
        Conflict: The name is taken
    """
    if not category_in.name:
        raise InvalidRequest("Name is required")
    await _ensure_name_free(db, category_in.name)

    category = BenefitCategory(
        name=category_in.name,
        description=category_in.description or None,
        icon=category_in.icon or None,
        applies_to=category_in.applies_to or list(ALL_BENEFIT_TYPES),
        display_order=category_in.display_order or 0,
        is_active=True,
    )
    db.add(category)
    await db.flush()
    await db.refresh(category)

    logger.info(f"Created benefit category {category.id} ({category.name})")
    return category


async def update_category(
    db: AsyncSession, category_id: int, category_in: CategoryUpdate
) -> BenefitCategory:
    changes = category_in.model_dump(exclude_unset=True)
    if not changes:
        raise InvalidRequest("No fields to update")

    category = await get_category(db, category_id)
    if changes.get("name"):
        await _ensure_name_free(db, changes["name"], exclude_id=category_id)
    for field, value in changes.items():
        setattr(category, field, value)
    await db.flush()
    await db.refresh(category)
    return category


async def deactivate_category(db: AsyncSession, category_id: int) -> BenefitCategory:
    category = await get_category(db, category_id)
    category.is_active = False
    await db.flush()
    logger.info(f"Deactivated benefit category {category_id}")
    return category
