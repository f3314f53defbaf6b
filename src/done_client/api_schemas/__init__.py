# Re-export all api schemas for easier access from done_client.api_schemas

from .base import BaseSchema, Timestamp, ensure_utc, format_timestamp
from .message import (
    DoneMessage,
    MessageStatusInfo,
    SendMessageOptions,
    SendMessageResponse,
)

__all__ = [
    # Base
    "BaseSchema",
    "Timestamp",
    "ensure_utc",
    "format_timestamp",
    # Message
    "DoneMessage",
    "MessageStatusInfo",
    "SendMessageOptions",
    "SendMessageResponse",
]
