from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from shared.errors import InvalidRequest, NotFound

from ..logging_config import logger
from ..models.quote import Applicant, EmployeeClass
from ..schemas.applicant_schemas import EmployeeClassCreate, EmployeeClassUpdate


async def list_employee_classes(
    db: AsyncSession, group_id: Optional[int] = None
) -> List[EmployeeClass]:
    query = select(EmployeeClass).order_by(EmployeeClass.id)
    if group_id is not None:
        query = query.where(EmployeeClass.group_id == group_id)
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_employee_class(db: AsyncSession, class_id: int) -> EmployeeClass:
    result = await db.execute(select(EmployeeClass).where(EmployeeClass.id == class_id))
    employee_class = result.scalar_one_or_none()
    if employee_class is None:
        raise NotFound("Employee class not found")
    return employee_class


async def list_class_members(db: AsyncSession, class_id: int) -> List[Applicant]:
    result = await db.execute(
        select(Applicant).where(Applicant.class_id == class_id).order_by(Applicant.id)
    )
    return list(result.scalars().all())


async def get_employee_class_detail(db: AsyncSession, class_id: int) -> Dict[str, Any]:
    employee_class = await get_employee_class(db, class_id)
    members = await list_class_members(db, class_id)
    return {
        "id": employee_class.id,
        "group_id": employee_class.group_id,
        "class_name": employee_class.class_name,
        "description": employee_class.description,
        "created_at": employee_class.created_at,
        "members": members,
    }


async def create_employee_class(db: AsyncSession, class_in: EmployeeClassCreate) -> EmployeeClass:
    employee_class = EmployeeClass(**class_in.model_dump())
    db.add(employee_class)
    await db.flush()
    await db.refresh(employee_class)
    logger.info(f"Created employee class {employee_class.id} in group {employee_class.group_id}")
    return employee_class


async def update_employee_class(
    db: AsyncSession, class_id: int, class_in: EmployeeClassUpdate
) -> EmployeeClass:
    changes = class_in.model_dump(exclude_unset=True)
    if not changes:
        raise InvalidRequest("No fields to update")

    employee_class = await get_employee_class(db, class_id)
    for field, value in changes.items():
        setattr(employee_class, field, value)
    await db.flush()
    await db.refresh(employee_class)
    return employee_class


async def delete_employee_class(db: AsyncSession, class_id: int) -> None:
    """
    Delete an employee class.

    Raises:
        InvalidRequest: Employees are still assigned to the class
        NotFound: If the class doesn't exist
    """
    await get_employee_class(db, class_id)
    if await list_class_members(db, class_id):
        raise InvalidRequest("Cannot delete class with assigned employees. Remove employees first.")

    await db.execute(delete(EmployeeClass).where(EmployeeClass.id == class_id))
    logger.info(f"Deleted employee class {class_id}")
