from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import InvalidRequest, NotFound

from ..logging_config import logger
from ..models.quote import Group, Quote, QuoteStatus, QuoteType
from ..schemas.applicant_schemas import GroupCreate, GroupUpdate


async def list_groups(db: AsyncSession) -> List[Group]:
    result = await db.execute(select(Group).order_by(Group.id))
    return list(result.scalars().all())


async def get_group(db: AsyncSession, group_id: int) -> Group:
    result = await db.execute(select(Group).where(Group.id == group_id))
    group = result.scalar_one_or_none()
    if group is None:
        raise NotFound("Group not found")
    return group


async def create_group(db: AsyncSession, group_in: GroupCreate) -> Tuple[Group, Quote]:
    """Create a group and the in-progress group quote that tracks it."""
    group = Group(group_name=group_in.group_name)
    db.add(group)
    await db.flush()
    await db.refresh(group)

    quote = Quote(group_id=group.id, type=QuoteType.GROUP, status=QuoteStatus.IN_PROGRESS)
    db.add(quote)
    await db.flush()
    await db.refresh(quote)

    logger.info(f"Created group {group.id} with group quote {quote.id}")
    return group, quote


async def update_group(db: AsyncSession, group_id: int, group_in: GroupUpdate) -> Group:
    changes = group_in.model_dump(exclude_unset=True, exclude_none=True)
    if not changes:
        raise InvalidRequest("No fields to update")

    group = await get_group(db, group_id)
    for field, value in changes.items():
        setattr(group, field, value)
    await db.flush()
    await db.refresh(group)
    return group
