"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .get_user import get_user
from .list_users import list_analysts, list_users
from .record_login import record_login
from .update_profile import update_profile
from .update_user_role import set_user_active, update_user_role

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "get_user",
    "list_analysts",
    "list_users",
    "record_login",
    "set_user_active",
    "update_profile",
    "update_user_role",
]
