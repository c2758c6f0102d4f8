from datetime import datetime
from typing import List, Optional

from shared.schemas import CamelModel


class MessageResponse(CamelModel):
    message: str


class CategoryCreate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    applies_to: Optional[List[str]] = None
    display_order: Optional[int] = None


class CategoryUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    applies_to: Optional[List[str]] = None
    is_active: Optional[bool] = None
    display_order: Optional[int] = None


class CategoryResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    applies_to: List[str]
    is_active: bool = True
    display_order: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
