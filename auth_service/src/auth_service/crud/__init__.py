from . import users as user_crud

__all__ = ["user_crud"]
