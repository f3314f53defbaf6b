from typing import Any

from pydantic import ConfigDict, Field

from ..enums import MessageStatus
from .base import BaseSchema, Timestamp


class SendMessageOptions(BaseSchema):
    """Per-call delivery options for ``DoneClient.send_message``.

    Every field is optional; an unset field lets the service apply its default.
    """

    # Reject misspelled option names
    model_config = ConfigDict(extra="forbid")

    # Duration string such as "5m" / "1h", or an absolute point in time
    delay: str | Timestamp | None = None
    not_before: Timestamp | None = None
    # Forwarded to the callback; sent as "Done-<key>" headers
    headers: dict[str, str] | None = None
    max_attempts: int | None = Field(default=None, gt=0)
    failure_callback: str | None = None


class SendMessageResponse(BaseSchema):
    message_id: str
    scheduled_at: Timestamp


class MessageStatusInfo(BaseSchema):
    """Reduced message view returned when listing by status."""

    model_config = ConfigDict(extra="allow")

    id: str
    status: MessageStatus
    attempts: int
    scheduled_at: Timestamp
    last_attempt_at: Timestamp | None = None
    error: str | None = None


class DoneMessage(BaseSchema):
    """A message as stored by the Done service.

    Fields the client does not know about are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    callback_url: str
    body: Any = None
    headers: dict[str, str] | None = None
    scheduled_at: Timestamp
    status: MessageStatus
    attempts: int
    max_attempts: int
    created_at: Timestamp
    updated_at: Timestamp
    last_attempt_at: Timestamp | None = None
    error: str | None = None
