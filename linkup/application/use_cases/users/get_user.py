"""Use cases for looking up users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import User
from linkup.infrastructure.repositories import UserRepository

from ..errors import NotFoundError


def get_user(session: Session, user_id: int) -> User:
    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_user_by_username(session: Session, username: str) -> User:
    user = UserRepository(session).get_by_username(username)
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_users(session: Session, *, skip: int = 0, limit: int = 100) -> Sequence[User]:
    return UserRepository(session).list(skip=skip, limit=limit)
