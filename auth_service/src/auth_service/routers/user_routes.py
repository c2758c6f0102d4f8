from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..crud import users as user_crud
from ..db import get_db
from ..dependencies import require_admin_session
from ..schemas import UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    description="Registers a user with a hashed password and any recognised roles.",
)
async def create_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    return await user_crud.create_user(db, user_in)


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    dependencies=[Depends(require_admin_session)],
)
async def list_users(db: AsyncSession = Depends(get_db)):
    return await user_crud.list_users(db)
