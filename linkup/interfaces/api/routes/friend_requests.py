"""Routes for the friend request workflow."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from linkup.application.use_cases.errors import ConflictError, NotFoundError
from linkup.application.use_cases.friend_requests import (
    list_friend_requests,
    remove_friend as remove_friend_uc,
    respond_to_friend_request,
    send_friend_request as send_friend_request_uc,
)
from linkup.domain.entities import User
from linkup.infrastructure.database import get_db
from linkup.infrastructure.realtime import RealtimeEventPublisher
from linkup.interfaces.api.dependencies import get_current_user, get_realtime_publisher
from linkup.interfaces.api.schemas import (
    FriendRequestCreate,
    FriendRequestRead,
    FriendRequestUpdate,
)

router = APIRouter(prefix="/friend-requests", tags=["friend requests"])
logger = logging.getLogger(__name__)


def _raise_http_error(exc: Exception) -> None:
    if isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ConflictError):
        code = status.HTTP_409_CONFLICT
    elif isinstance(exc, PermissionError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, SQLAlchemyError):
        logger.exception("Friend request error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        ) from exc
    else:
        code = status.HTTP_400_BAD_REQUEST
    raise HTTPException(status_code=code, detail=str(exc)) from exc


@router.post("/", response_model=FriendRequestRead, status_code=status.HTTP_201_CREATED)
def send_friend_request(
    request_in: FriendRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    publisher: RealtimeEventPublisher = Depends(get_realtime_publisher),
):
    """Send a friend request and notify the receiver."""

    try:
        request = send_friend_request_uc(
            db, publisher, sender_id=current_user.id, receiver_id=request_in.receiver_id
        )
    except (ValueError, SQLAlchemyError) as exc:
        _raise_http_error(exc)
    return FriendRequestRead.model_validate(request)


@router.get("/", response_model=list[FriendRequestRead])
def list_requests(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Return the requests the authenticated user sent or received."""

    return [
        FriendRequestRead.model_validate(request)
        for request in list_friend_requests(db, current_user.id)
    ]


@router.put("/{request_id}", response_model=FriendRequestRead)
def answer_friend_request(
    request_id: int,
    update_in: FriendRequestUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    publisher: RealtimeEventPublisher = Depends(get_realtime_publisher),
):
    """Accept or reject a request; accepting notifies the original sender."""

    try:
        request = respond_to_friend_request(
            db, publisher, request_id, user_id=current_user.id, status=update_in.status
        )
    except (ValueError, PermissionError, SQLAlchemyError) as exc:
        _raise_http_error(exc)
    return FriendRequestRead.model_validate(request)


@router.delete("/friends/{friend_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_friend(
    friend_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    remove_friend_uc(db, user_id=current_user.id, friend_id=friend_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
