"""Persistence layer for user data."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from linkup.domain.entities import User
from linkup.infrastructure.models import UserModel
from linkup.utils import ensure_app_naive_datetime, ensure_app_timezone


class UserRepository:
    """Provide CRUD operations for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[User]:
        query = (
            self.session.query(UserModel)
            .order_by(UserModel.id)
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = self.session.query(UserModel).filter_by(username=username).first()
        return self._to_entity(model) if model else None

    def get_by_login(self, login: str) -> User | None:
        """Return the user whose username or email equals ``login``."""

        model = (
            self.session.query(UserModel)
            .filter(or_(UserModel.username == login, UserModel.email == login))
            .first()
        )
        return self._to_entity(model) if model else None

    def exists_with_username_or_email(self, username: str, email: str) -> bool:
        query = self.session.query(UserModel.id).filter(
            or_(UserModel.username == username, UserModel.email == email)
        )
        return query.first() is not None

    def get_display_name(self, user_id: int) -> str | None:
        row = (
            self.session.query(UserModel.first_name, UserModel.last_name)
            .filter(UserModel.id == user_id)
            .first()
        )
        if row is None:
            return None
        first_name, last_name = row
        return f"{first_name} {last_name}".strip()

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self.session.get(UserModel, user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            username=model.username,
            email=model.email,
            password=model.password,
            bio=model.bio,
            about_me=model.about_me,
            background_color=model.background_color,
            links=list(model.links or []),
            theme_song_url=model.theme_song_url,
            theme_song_title=model.theme_song_title,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _apply_entity_to_model(
        model: UserModel, user: User, *, include_creation_fields: bool
    ) -> None:
        if include_creation_fields:
            model.username = user.username
            model.created_at = ensure_app_naive_datetime(user.created_at)
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.email = user.email
        model.password = user.password
        model.bio = user.bio
        model.about_me = user.about_me
        model.background_color = user.background_color
        model.links = list(user.links or [])
        model.theme_song_url = user.theme_song_url
        model.theme_song_title = user.theme_song_title


__all__ = ["UserRepository"]
