"""
Exports the API routers for the Quoting Service.
"""

from .applicant_routes import router as applicant_router
from .coverage_routes import router as coverage_router
from .employee_class_routes import router as employee_class_router
from .group_routes import router as group_router
from .health_routes import router as health_router
from .quote_benefit_routes import router as quote_benefit_router
from .quote_routes import router as quote_router
from .templates_proxy_routes import router as templates_proxy_router

__all__ = [
    "applicant_router",
    "coverage_router",
    "employee_class_router",
    "group_router",
    "health_router",
    "quote_benefit_router",
    "quote_router",
    "templates_proxy_router",
]
