"""Use cases for managing users."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_user import create_user
from .get_user import get_user, get_user_by_username, list_users
from .update_profile import PROFILE_FIELDS, update_profile

__all__ = [
    "AuthenticationStatus",
    "PROFILE_FIELDS",
    "authenticate_user",
    "create_user",
    "get_user",
    "get_user_by_username",
    "list_users",
    "update_profile",
]
