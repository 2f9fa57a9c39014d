"""Routes for the post feed."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from linkup.application.use_cases.errors import NotFoundError
from linkup.application.use_cases.posts import (
    create_post as create_post_uc,
    delete_post as delete_post_uc,
    list_posts as list_posts_uc,
    update_post as update_post_uc,
)
from linkup.domain.entities import PostMedia, User
from linkup.infrastructure.database import get_db
from linkup.interfaces.api.dependencies import get_current_user
from linkup.interfaces.api.schemas import PostCreate, PostRead, PostUpdate

router = APIRouter(prefix="/posts", tags=["posts"])


def _raise_http_error(exc: Exception) -> None:
    if isinstance(exc, NotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if isinstance(exc, PermissionError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("/", response_model=list[PostRead])
def list_posts(db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    """Return every post, newest first."""

    return [PostRead.model_validate(post) for post in list_posts_uc(db)]


@router.get("/user/{user_id}", response_model=list[PostRead])
def list_user_posts(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return [PostRead.model_validate(post) for post in list_posts_uc(db, user_id=user_id)]


@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    post_in: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        post = create_post_uc(
            db,
            user_id=current_user.id,
            content=post_in.content,
            media=[PostMedia(url=item.url, type=item.type) for item in post_in.media],
        )
    except ValueError as exc:
        _raise_http_error(exc)
    return PostRead.model_validate(post)


@router.put("/{post_id}", response_model=PostRead)
def update_post(
    post_id: int,
    post_in: PostUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        post = update_post_uc(db, post_id, user_id=current_user.id, content=post_in.content)
    except (ValueError, PermissionError) as exc:
        _raise_http_error(exc)
    return PostRead.model_validate(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a post together with its likes, comments and media."""

    try:
        delete_post_uc(db, post_id, user_id=current_user.id)
    except (ValueError, PermissionError) as exc:
        _raise_http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
