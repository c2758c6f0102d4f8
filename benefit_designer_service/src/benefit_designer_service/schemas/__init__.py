from .category_schemas import CategoryCreate, CategoryResponse, CategoryUpdate, MessageResponse
from .template_schemas import (
    TemplateCreate,
    TemplateResponse,
    TemplateStatusUpdate,
    TemplateUpdate,
    TemplateVersionResponse,
    TemplateVersionsResponse,
)

__all__ = [
    "CategoryCreate",
    "CategoryResponse",
    "CategoryUpdate",
    "MessageResponse",
    "TemplateCreate",
    "TemplateResponse",
    "TemplateStatusUpdate",
    "TemplateUpdate",
    "TemplateVersionResponse",
    "TemplateVersionsResponse",
]
