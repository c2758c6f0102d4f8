from .auth import guard, require_designer_access

__all__ = ["guard", "require_designer_access"]
