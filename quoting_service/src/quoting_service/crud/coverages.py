from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.quote import Coverage


async def list_coverages(db: AsyncSession, quote_id: Optional[int] = None) -> List[Coverage]:
    query = select(Coverage).order_by(Coverage.id)
    if quote_id is not None:
        query = query.where(Coverage.quote_id == quote_id)
    result = await db.execute(query)
    return list(result.scalars().all())
