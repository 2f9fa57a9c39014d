"""Use case for authenticating a user."""

from enum import Enum, auto

from sqlalchemy.orm import Session

from linkup.infrastructure.repositories import UserRepository
from linkup.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    """Possible outcomes when attempting to authenticate a user."""

    SUCCESS = auto()
    UNKNOWN_USER = auto()
    INVALID_PASSWORD = auto()


def authenticate_user(session: Session, login: str, password: str):
    """Return the authentication result along with the user when possible.

    ``login`` may be either the username or the email address.
    """

    user = UserRepository(session).get_by_login(login.strip())

    if not user:
        return None, AuthenticationStatus.UNKNOWN_USER

    if not verify_password(password, user.password):
        return None, AuthenticationStatus.INVALID_PASSWORD

    return user, AuthenticationStatus.SUCCESS
