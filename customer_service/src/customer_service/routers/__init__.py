"""
Exports the API routers for the Customer Service.
"""

from .conversion_routes import router as conversion_router
from .group_policy_routes import router as group_policy_router
from .health_routes import router as health_router
from .individual_policy_routes import router as individual_policy_router
from .policy_holder_routes import router as policy_holder_router
from .policy_routes import router as policy_router
from .quote_routes import router as quote_router

__all__ = [
    "conversion_router",
    "group_policy_router",
    "health_router",
    "individual_policy_router",
    "policy_holder_router",
    "policy_router",
    "quote_router",
]
