"""Routes for post comments."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from linkup.application.use_cases.comments import add_comment, list_comments
from linkup.application.use_cases.errors import NotFoundError
from linkup.domain.entities import User
from linkup.infrastructure.database import get_db
from linkup.infrastructure.realtime import RealtimeEventPublisher
from linkup.interfaces.api.dependencies import get_current_user, get_realtime_publisher
from linkup.interfaces.api.schemas import CommentCreate, CommentRead

router = APIRouter(prefix="/comments", tags=["comments"])
logger = logging.getLogger(__name__)


@router.get("/post/{post_id}", response_model=list[CommentRead])
def list_post_comments(
    post_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
):
    return [CommentRead.model_validate(comment) for comment in list_comments(db, post_id)]


@router.post("/", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_in: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    publisher: RealtimeEventPublisher = Depends(get_realtime_publisher),
):
    """Comment on a post and notify its author."""

    try:
        comment = add_comment(
            db,
            publisher,
            post_id=comment_in.post_id,
            user_id=current_user.id,
            content=comment_in.content,
        )
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SQLAlchemyError as exc:
        logger.exception("Create comment error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        ) from exc
    return CommentRead.model_validate(comment)
