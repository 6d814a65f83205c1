import io
from typing import List, Optional

import pytest
import requests


def make_response(status_code: int = 200, content: bytes = b"") -> requests.Response:
    """Build a real ``requests.Response`` backed by an in-memory body."""
    response = requests.Response()
    response.status_code = status_code
    response.raw = io.BytesIO(content)
    response.url = "http://localhost:4242/webhooks"
    return response


class RecordingTransport:
    """Transport double that records prepared requests instead of sending them."""

    def __init__(
        self,
        response: Optional[requests.Response] = None,
        error: Optional[Exception] = None,
    ):
        self.response = response if response is not None else make_response()
        self.error = error
        self.requests: List[requests.PreparedRequest] = []

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def clear_endpoint_env(monkeypatch):
    """Keep endpoint settings from the developer's shell out of the tests."""
    for name in ("ENDPOINT_URL", "ENDPOINT_CONNECT", "ENDPOINT_EVENTS", "ENDPOINT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def transport_factory():
    return RecordingTransport


@pytest.fixture
def transport():
    """Create a transport double returning an empty 200 response."""
    return RecordingTransport()


@pytest.fixture
def webhook_body():
    return '{"id": "evt_123", "type": "invoice.created"}'


@pytest.fixture
def webhook_headers():
    return {
        "Content-Type": "application/json",
        "Stripe-Signature": "t=1700000000,v1=abc123",
        "User-Agent": "Stripe/1.0 (+https://stripe.com/docs/webhooks)",
    }
