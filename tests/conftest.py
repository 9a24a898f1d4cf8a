# tests/conftest.py

import json
from typing import Any, Dict, List, Optional

import django
import pytest
from django.conf import settings

if not settings.configured:
    settings.configure(
        DEBUG=False,
        SECRET_KEY="shwary-tests",
        INSTALLED_APPS=["shwary"],
        ROOT_URLCONF="shwary.urls",
        USE_TZ=True,
        SHWARY_MERCHANT_ID="settings-merchant",
        SHWARY_MERCHANT_KEY="settings-key",
        SHWARY_SANDBOX=True,
    )
    django.setup()

from shwary.config import ShwaryConfig  # noqa: E402
from shwary.utils.http_client import HTTPClient  # noqa: E402


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; returns or raises queued outcomes in order."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self):
        self.closed = True


def transaction_payload(**overrides) -> Dict[str, Any]:
    data = {
        "id": "txn_123",
        "userId": "user_456",
        "amount": 5000,
        "currency": "CDF",
        "type": "deposit",
        "status": "pending",
        "recipientPhoneNumber": "+243812345678",
        "referenceId": "ref_abc",
        "metadata": None,
        "failureReason": None,
        "completedAt": None,
        "createdAt": "2026-02-05T10:00:00+00:00",
        "updatedAt": "2026-02-05T10:00:00+00:00",
        "isSandbox": False,
        "pretiumTransactionId": None,
        "error": None,
    }
    data.update(overrides)
    return data


def snake_payload(**overrides) -> Dict[str, Any]:
    data = {
        "id": "txn_snake",
        "user_id": "user_789",
        "amount": 10000,
        "currency": "KES",
        "status": "pending",
        "recipient_phone_number": "+254700000000",
        "reference_id": "ref_def",
        "created_at": "2026-02-05T10:00:00+00:00",
        "updated_at": "2026-02-05T10:00:00+00:00",
        "is_sandbox": True,
    }
    data.update(overrides)
    return data


@pytest.fixture
def config() -> ShwaryConfig:
    return ShwaryConfig(merchant_id="test-merchant", merchant_key="test-key")


@pytest.fixture
def sandbox_config() -> ShwaryConfig:
    return ShwaryConfig(merchant_id="test-merchant", merchant_key="test-key", sandbox=True)


@pytest.fixture
def make_http_client(config):
    def _make(*outcomes, cfg: Optional[ShwaryConfig] = None):
        session = FakeSession(*outcomes)
        return HTTPClient(cfg or config, session=session), session

    return _make
