from .auth import guard, require_customer_service_access

__all__ = ["guard", "require_customer_service_access"]
