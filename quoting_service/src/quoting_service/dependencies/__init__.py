from .auth import guard, require_internal_caller, require_quoting_access

__all__ = ["guard", "require_internal_caller", "require_quoting_access"]
