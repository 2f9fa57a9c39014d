"""Use cases for direct messaging."""

from .conversation import NEW_CONVERSATION_MAX_PRIOR, is_new_conversation
from .list_messages import ALL_CONTACTS, list_messages
from .read_receipts import broadcast_read_receipt, mark_messages_read
from .send_message import SEND_FAILED_MESSAGE, deliver_message, send_message, store_message

__all__ = [
    "ALL_CONTACTS",
    "NEW_CONVERSATION_MAX_PRIOR",
    "SEND_FAILED_MESSAGE",
    "broadcast_read_receipt",
    "deliver_message",
    "is_new_conversation",
    "list_messages",
    "mark_messages_read",
    "send_message",
    "store_message",
]
