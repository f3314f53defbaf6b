"""
Logging configuration for done_client.

Usage:
    from done_client.logging import configure_logging, get_logger

    # Once, in the embedding application's startup code
    configure_logging(service_name="billing_worker", log_level="DEBUG")

    # In any module
    logger = get_logger(__name__)
    logger.info("Message scheduled", message_id="msg_123")

The client itself only emits records; it never configures logging on import.
"""

import logging

import structlog

CORRELATION_ID_KEY = "correlation_id"


def configure_logging(
    service_name: str = "done_client",
    log_level: str = "INFO",
    json_format: bool = True,
) -> None:
    """
    Configure structlog for the embedding application.

    Args:
        service_name: Name attached to every record as ``service``
        log_level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON (production), False for console (development)
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    def add_service(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False, sort_keys=True)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_service,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def set_correlation_id(cid: str) -> None:
    """Attach correlation_id to every record logged from the current context."""
    structlog.contextvars.bind_contextvars(**{CORRELATION_ID_KEY: cid})


def get_correlation_id() -> str | None:
    return structlog.contextvars.get_contextvars().get(CORRELATION_ID_KEY)


def clear_correlation_id() -> None:
    structlog.contextvars.unbind_contextvars(CORRELATION_ID_KEY)
