from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import employee_classes as crud
from ..db import get_db
from ..dependencies import require_quoting_access
from ..schemas import (
    EmployeeClassCreate,
    EmployeeClassDetailResponse,
    EmployeeClassResponse,
    EmployeeClassUpdate,
    MessageResponse,
)

router = APIRouter(
    prefix="/api/employee-classes",
    tags=["Employee Classes"],
    dependencies=[Depends(require_quoting_access)],
)


@router.get("", response_model=List[EmployeeClassResponse], summary="List employee classes")
async def list_employee_classes(
    group_id: Optional[int] = Query(None, alias="groupId"),
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_employee_classes(db, group_id=group_id)


@router.post(
    "",
    response_model=EmployeeClassResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee class",
)
async def create_employee_class(class_in: EmployeeClassCreate, db: AsyncSession = Depends(get_db)):
    return await crud.create_employee_class(db, class_in)


@router.get(
    "/{class_id}",
    response_model=EmployeeClassDetailResponse,
    summary="Get an employee class with its members",
)
async def get_employee_class(class_id: int, db: AsyncSession = Depends(get_db)):
    return await crud.get_employee_class_detail(db, class_id)


@router.patch("/{class_id}", response_model=EmployeeClassResponse, summary="Update an employee class")
async def update_employee_class(
    class_id: int, class_in: EmployeeClassUpdate, db: AsyncSession = Depends(get_db)
):
    return await crud.update_employee_class(db, class_id, class_in)


@router.delete("/{class_id}", response_model=MessageResponse, summary="Delete an empty employee class")
async def delete_employee_class(class_id: int, db: AsyncSession = Depends(get_db)):
    await crud.delete_employee_class(db, class_id)
    return MessageResponse(message="Employee class deleted successfully")
