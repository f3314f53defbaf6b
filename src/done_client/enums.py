import enum


class MessageStatus(str, enum.Enum):
    CREATED = "CREATED"  # Accepted by the service, not yet queued
    QUEUED = "QUEUED"  # Waiting for its scheduled time
    DELIVER = "DELIVER"  # Delivery in progress
    SENT = "SENT"
    RETRY = "RETRY"  # Last attempt failed, another one is scheduled
    DLQ = "DLQ"  # Attempt budget exhausted
    ARCHIVED = "ARCHIVED"
