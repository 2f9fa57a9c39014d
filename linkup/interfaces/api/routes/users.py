"""Routes for registering users and customizing profiles."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from linkup.application.use_cases.errors import ConflictError, NotFoundError
from linkup.application.use_cases.users import (
    create_user as create_user_uc,
    get_user as get_user_uc,
    get_user_by_username as get_user_by_username_uc,
    list_users as list_users_uc,
    update_profile as update_profile_uc,
)
from linkup.domain.entities import User
from linkup.infrastructure.database import get_db
from linkup.interfaces.api.dependencies import get_current_user
from linkup.interfaces.api.schemas import ProfileUpdate, UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Create a new account."""

    try:
        user = create_user_uc(
            db,
            first_name=user_in.first_name,
            last_name=user_in.last_name,
            username=user_in.username,
            email=user_in.email,
            password=user_in.password,
        )
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info("Registered user %s (%s)", user.id, user.username)
    return _to_read_model(user)


@router.get("/", response_model=list[UserRead])
def list_users(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return [_to_read_model(user) for user in list_users_uc(db, skip=skip, limit=limit)]


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    return _to_read_model(current_user)


@router.put("/me/profile", response_model=UserRead)
def update_profile(
    profile_in: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Update the profile fields present in the request body."""

    try:
        user = update_profile_uc(
            db, current_user.id, profile_in.model_dump(exclude_unset=True)
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _to_read_model(user)


@router.get("/username/{username}", response_model=UserRead)
def read_user_by_username(
    username: str,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    try:
        user = get_user_by_username_uc(db, username)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(user)


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    try:
        user = get_user_uc(db, user_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(user)
