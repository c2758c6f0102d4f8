"""
Exports the API routers for the Auth Service.

- auth_router: login, session and service-token issuance.
- user_router: user registration and listing.
"""

from .auth_routes import router as auth_router
from .health_routes import router as health_router
from .user_routes import router as user_router

__all__ = ["auth_router", "health_router", "user_router"]
