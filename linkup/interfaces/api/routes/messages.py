"""Routes for reading message history and persisting read state."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from linkup.application.use_cases.messages import list_messages, mark_messages_read
from linkup.domain.entities import User
from linkup.infrastructure.database import get_db
from linkup.interfaces.api.dependencies import get_current_user
from linkup.interfaces.api.schemas import (
    MarkMessagesReadRequest,
    MarkMessagesReadResponse,
    MessageRead,
)

router = APIRouter(prefix="/messages", tags=["messages"])


@router.put("/mark-as-read", response_model=MarkMessagesReadResponse)
def mark_as_read(
    request_in: MarkMessagesReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Flag every unread message of the pair as read."""

    if request_in.receiver_id != current_user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the receiver can mark messages as read",
        )
    updated = mark_messages_read(
        db, sender_id=request_in.sender_id, receiver_id=request_in.receiver_id
    )
    return MarkMessagesReadResponse(updated=updated)


@router.get("/{contact_id}", response_model=list[MessageRead])
def read_messages(
    contact_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Return the conversation with ``contact_id``; ``0`` returns every message."""

    return [
        MessageRead.model_validate(message)
        for message in list_messages(db, current_user.id, contact_id)
    ]
