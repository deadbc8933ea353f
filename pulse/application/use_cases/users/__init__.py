"""Use cases for managing users."""

from .authenticate_user import authenticate_user
from .delete_user import delete_user
from .get_user import get_user
from .list_user_events import list_user_events
from .list_users import list_users
from .register_user import register_user
from .update_user import update_user

__all__ = [
    "authenticate_user",
    "delete_user",
    "get_user",
    "list_user_events",
    "list_users",
    "register_user",
    "update_user",
]
