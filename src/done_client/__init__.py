# Public API of done_client

from .api_schemas import (
    DoneMessage,
    MessageStatusInfo,
    SendMessageOptions,
    SendMessageResponse,
)
from .client import DoneClient, DoneClientError, DoneResponseError
from .config import DoneClientConfig, DoneSettings
from .enums import MessageStatus
from .logging import (
    clear_correlation_id,
    configure_logging,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)

__all__ = [
    # Client
    "DoneClient",
    "DoneClientConfig",
    "DoneSettings",
    # Errors
    "DoneClientError",
    "DoneResponseError",
    # Schemas
    "DoneMessage",
    "MessageStatus",
    "MessageStatusInfo",
    "SendMessageOptions",
    "SendMessageResponse",
    # Logging
    "configure_logging",
    "get_logger",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
