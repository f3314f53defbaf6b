"""
Async client for the Done delayed-message queue.

Features:
- Enqueue a message for delivery to a callback URL after a delay
- Fetch a message by id, list messages by status
- Prometheus metrics and structured logging per request

The client never retries: every call is exactly one HTTP round trip.
"""

import json
import time
from collections.abc import Mapping
from typing import Any

import httpx

from done_client.api_schemas import (
    DoneMessage,
    MessageStatusInfo,
    SendMessageOptions,
    SendMessageResponse,
    format_timestamp,
)
from done_client.config import DoneClientConfig, DoneSettings
from done_client.enums import MessageStatus
from done_client.logging import get_logger
from done_client.metrics import done_request_duration_seconds, done_requests_total

logger = get_logger(__name__)

API_PREFIX = "/v1"
# Caller headers are tunnelled to the callback under this prefix
HEADER_PREFIX = "Done-"


# === Exceptions ===


class DoneClientError(Exception):
    """Base exception for done_client errors."""

    pass


class DoneResponseError(DoneClientError):
    """The Done service answered with a non-2xx status."""

    def __init__(self, operation: str, status_code: int, reason_phrase: str):
        self.operation = operation
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        super().__init__(f"{operation}: {status_code} {reason_phrase}")


# === Client ===


class DoneClient:
    """
    Client for a Done instance.

    Usage:
        async with DoneClient.create("https://done.example.com", token) as client:
            result = await client.send_message(
                "https://webhook.example.com/hook",
                {"order_id": 42},
                SendMessageOptions(delay="5m"),
            )
            message = await client.get_message(result.message_id)

    An ``httpx.AsyncClient`` passed in is used as-is and left open on
    ``close()``; otherwise one is created lazily and owned by this client.
    """

    def __init__(
        self,
        config: DoneClientConfig,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self._timeout = timeout

        # HTTP client
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def create(cls, base_url: str, auth_token: str) -> "DoneClient":
        """Shorthand for ``DoneClient(DoneClientConfig(base_url, auth_token))``."""
        return cls(DoneClientConfig(base_url=base_url, auth_token=auth_token))

    @classmethod
    def from_settings(cls, settings: DoneSettings | None = None) -> "DoneClient":
        """Build a client from ``DONE_*`` environment settings."""
        settings = settings or DoneSettings()
        return cls(settings.client_config(), timeout=settings.timeout)

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazy initialization of HTTP client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "DoneClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.config.auth_token}"}

    def _build_send_headers(self, options: SendMessageOptions | None) -> httpx.Headers:
        """
        Merge control headers and caller headers into one mapping.

        Caller headers are applied last, so a caller key that becomes e.g.
        ``Done-Delay`` after prefixing replaces the control header.
        """
        headers = httpx.Headers(
            {**self._auth_headers(), "Content-Type": "application/json"}
        )
        if options is None:
            return headers

        if isinstance(options.delay, str):
            headers["Done-Delay"] = options.delay
        elif options.delay is not None:
            headers["Done-Delay"] = format_timestamp(options.delay)

        if options.not_before is not None:
            headers["Done-Not-Before"] = format_timestamp(options.not_before)

        if options.max_attempts is not None:
            headers["Done-Max-Attempts"] = str(options.max_attempts)

        if options.failure_callback is not None:
            headers["Done-Failure-Callback"] = options.failure_callback

        for key, value in (options.headers or {}).items():
            headers[f"{HEADER_PREFIX}{key}"] = value

        return headers

    async def _request(
        self,
        operation: str,
        failure_label: str,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Perform one request and reject non-2xx responses.

        Transport errors (``httpx.RequestError``) propagate unchanged.

        Raises:
            DoneResponseError: Non-2xx response
        """
        client = await self._get_client()
        url = f"{self.base_url}{API_PREFIX}/{path}"

        start_time = time.perf_counter()
        status = "error"
        try:
            response = await client.request(method, url, **kwargs)
            status = str(response.status_code)
        finally:
            duration = time.perf_counter() - start_time
            done_requests_total.labels(
                operation=operation, method=method, status=status
            ).inc()
            done_request_duration_seconds.labels(
                operation=operation, method=method
            ).observe(duration)
            logger.debug(
                "Done request finished",
                operation=operation,
                method=method,
                status=status,
                duration_ms=round(duration * 1000),
            )

        if not response.is_success:
            logger.warning(
                "Done service rejected request",
                operation=operation,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
            raise DoneResponseError(
                failure_label, response.status_code, response.reason_phrase
            )
        return response

    async def send_message(
        self,
        callback_url: str,
        body: Any = None,
        options: SendMessageOptions | Mapping[str, Any] | None = None,
    ) -> SendMessageResponse:
        """
        Enqueue a message for delivery to ``callback_url``.

        Args:
            callback_url: Appended verbatim to ``{base_url}/v1/``
            body: JSON-serializable payload; None sends no body
            options: Delay, retry and forwarding options

        Returns:
            Id of the new message and its scheduled delivery time
        """
        if options is not None and not isinstance(options, SendMessageOptions):
            options = SendMessageOptions.model_validate(options)

        kwargs: dict[str, Any] = {"headers": self._build_send_headers(options)}
        if body is not None:
            kwargs["content"] = json.dumps(body, separators=(",", ":"))

        response = await self._request(
            "send_message", "Failed to send message", "POST", callback_url, **kwargs
        )
        return SendMessageResponse.model_validate(response.json())

    async def get_message(self, message_id: str) -> DoneMessage:
        """Fetch the current state of a message."""
        response = await self._request(
            "get_message",
            "Failed to get message",
            "GET",
            message_id,
            headers=self._auth_headers(),
        )
        return DoneMessage.model_validate(response.json())

    async def get_messages_by_status(
        self, status: MessageStatus
    ) -> list[MessageStatusInfo]:
        """List messages currently in ``status``, in server order."""
        status = MessageStatus(status)
        response = await self._request(
            "get_messages_by_status",
            "Failed to get messages by status",
            "GET",
            f"by-status/{status.value}",
            headers=self._auth_headers(),
        )
        return [MessageStatusInfo.model_validate(item) for item in response.json()]
