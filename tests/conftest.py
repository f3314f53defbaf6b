import httpx
import pytest

from done_client import DoneClient, DoneClientConfig

TEST_BASE_URL = "https://api.example.com"
TEST_AUTH_TOKEN = "test-token"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_handler)


@pytest.fixture
def client_factory():
    """Build a DoneClient whose HTTP traffic is answered by ``handler``."""

    def _make(handler) -> tuple[DoneClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        config = DoneClientConfig(base_url=TEST_BASE_URL, auth_token=TEST_AUTH_TOKEN)
        client = DoneClient(config, http_client=httpx.AsyncClient(transport=transport))
        return client, transport

    return _make
