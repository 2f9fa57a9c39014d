"""Routes for liking posts."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from linkup.application.use_cases.errors import ConflictError, NotFoundError
from linkup.application.use_cases.likes import (
    is_post_liked,
    like_post as like_post_uc,
    list_liked_posts,
    unlike_post as unlike_post_uc,
)
from linkup.domain.entities import User
from linkup.infrastructure.database import get_db
from linkup.infrastructure.realtime import RealtimeEventPublisher
from linkup.interfaces.api.dependencies import get_current_user, get_realtime_publisher
from linkup.interfaces.api.schemas import (
    LikeCreate,
    LikeStatusRead,
    PostRead,
    StatusMessage,
)

router = APIRouter(prefix="/likes", tags=["likes"])
logger = logging.getLogger(__name__)


@router.get("/check", response_model=LikeStatusRead)
def check_like(
    post_id: int = Query(..., ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Tell whether the authenticated user liked ``post_id``."""

    return LikeStatusRead(liked=is_post_liked(db, post_id=post_id, user_id=current_user.id))


@router.post("/", response_model=StatusMessage, status_code=status.HTTP_201_CREATED)
def like_post(
    like_in: LikeCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    publisher: RealtimeEventPublisher = Depends(get_realtime_publisher),
):
    try:
        like_post_uc(db, publisher, post_id=like_in.post_id, user_id=current_user.id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except SQLAlchemyError as exc:
        logger.exception("Add like error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to like post",
        ) from exc
    return StatusMessage(message="Post liked")


@router.delete("/{post_id}", response_model=StatusMessage)
def unlike_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    unlike_post_uc(db, post_id=post_id, user_id=current_user.id)
    return StatusMessage(message="Post unliked")


@router.get("/liked/{user_id}", response_model=list[PostRead])
def liked_posts(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return [PostRead.model_validate(post) for post in list_liked_posts(db, user_id)]
