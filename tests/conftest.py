# tests/conftest.py
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import json
from urllib.parse import parse_qs

import httpx
import pytest

from charge_gateway.services.payment_providers.stripe import StripeGateway

TEST_SECRET_KEY = "sk_test_conftest123"
TEST_API_URL = "https://stripe.test/v1/charges"


class FakeProcessor:
    """Stands in for Stripe: records requests and replays queued replies."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._replies: list = []

    def reply(self, status_code: int = 200, body=None, *, content: bytes | None = None):
        if content is None:
            content = json.dumps(body).encode() if body is not None else b""
        self._replies.append(httpx.Response(status_code, content=content))
        return self

    def fail_with(self, exc: Exception):
        self._replies.append(exc)
        return self

    def form(self, index: int = -1) -> dict[str, str]:
        parsed = parse_qs(self.requests[index].content.decode())
        return {key: values[0] for key, values in parsed.items()}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


# ---------- Fixtures ----------

@pytest.fixture
def secret_key() -> str:
    return TEST_SECRET_KEY


@pytest.fixture
def api_url() -> str:
    return TEST_API_URL


@pytest.fixture
def processor() -> FakeProcessor:
    return FakeProcessor()


@pytest.fixture
def gateway(processor: FakeProcessor, secret_key: str, api_url: str) -> StripeGateway:
    return StripeGateway(
        secret_key,
        api_url=api_url,
        source_token="tok_visa",
        transport=httpx.MockTransport(processor),
    )


@pytest.fixture
def bob_smith(gateway: StripeGateway) -> StripeGateway:
    """Gateway filled with the sandbox cardholder used in the manual script."""
    return (
        gateway.set_name("Bob Smith")
        .set_address1("123 Test Street")
        .set_address2("Suite #4")
        .set_city("Morristown")
        .set_province("TN")
        .set_postal("37814")
        .set_country("US")
        .set_card_number("4007000000027")
        .set_expiration_date("10", "2021")
        .set_cvv("123")
    )
