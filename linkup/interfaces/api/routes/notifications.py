"""Endpoints for notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from linkup.application.use_cases.errors import NotFoundError
from linkup.application.use_cases.notifications import (
    create_notification as create_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read,
)
from linkup.domain.entities import User
from linkup.infrastructure.database import get_db
from linkup.infrastructure.realtime import RealtimeEventPublisher
from linkup.interfaces.api.dependencies import get_current_user, get_realtime_publisher
from linkup.interfaces.api.schemas import NotificationCreate, NotificationRead, StatusMessage

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[NotificationRead]:
    """Return the notifications of the authenticated user, newest first."""

    return [
        NotificationRead.model_validate(notification)
        for notification in list_notifications_uc(db, current_user.id)
    ]


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_notification(
    notification_in: NotificationCreate,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_user),
    publisher: RealtimeEventPublisher = Depends(get_realtime_publisher),
) -> NotificationRead:
    """Persist a notification and push it to the owner's open connections."""

    try:
        notification = create_notification_uc(
            db,
            publisher,
            user_id=notification_in.user_id,
            type=notification_in.type,
            message=notification_in.message,
            from_user_id=notification_in.from_user_id,
            post_id=notification_in.post_id,
            comment_id=notification_in.comment_id,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except SQLAlchemyError as exc:
        logger.exception("Error creating notification")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create notification",
        ) from exc
    return NotificationRead.model_validate(notification)


@router.patch("/read-all", response_model=StatusMessage)
def read_all_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> StatusMessage:
    mark_all_notifications_read(db, current_user.id)
    return StatusMessage(message="All notifications marked as read")


@router.patch("/{notification_id}/read", response_model=StatusMessage)
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> StatusMessage:
    try:
        mark_notification_read(db, notification_id, user_id=current_user.id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return StatusMessage(message="Notification marked as read")
