"""Use case for registering users."""

from sqlalchemy.orm import Session

from linkup.domain.entities import User
from linkup.infrastructure.repositories import UserRepository
from linkup.infrastructure.security import get_password_hash
from linkup.utils import now_in_app_timezone

from ..errors import ConflictError


def create_user(
    session: Session,
    *,
    first_name: str,
    last_name: str,
    username: str,
    email: str,
    password: str,
) -> User:
    """Create a new user ensuring unique usernames and email addresses."""

    repository = UserRepository(session)
    username = username.strip()
    email = email.strip().lower()

    if not first_name.strip() or not last_name.strip() or not username or not password:
        raise ValueError("All fields are required.")

    if repository.exists_with_username_or_email(username, email):
        raise ConflictError("Username or email already exists")

    user = User(
        id=None,
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        username=username,
        email=email,
        password=get_password_hash(password),
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
