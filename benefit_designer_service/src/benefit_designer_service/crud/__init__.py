from . import categories, templates

__all__ = ["categories", "templates"]
