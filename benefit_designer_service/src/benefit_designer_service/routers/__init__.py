"""
Exports the API routers for the Benefit Designer Service.
"""

from .category_routes import router as category_router
from .health_routes import router as health_router
from .template_routes import router as template_router

__all__ = ["category_router", "health_router", "template_router"]
