from . import conversions, policies

__all__ = ["conversions", "policies"]
