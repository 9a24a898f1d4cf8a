import json

import pytest
from django.test import RequestFactory
from django.urls import reverse

from shwary.signals import webhook_received
from shwary.views import webhook_callback
from tests.conftest import transaction_payload


@pytest.fixture
def rf():
    return RequestFactory()


def _post(rf, body):
    return rf.post(reverse("shwary_webhook"), data=body, content_type="application/json")


def test_valid_webhook_is_acknowledged_and_dispatched(rf):
    received = []

    def receiver(sender, transaction, **kwargs):
        received.append(transaction)

    webhook_received.connect(receiver)
    try:
        response = webhook_callback(_post(rf, json.dumps(transaction_payload(status="completed"))))
    finally:
        webhook_received.disconnect(receiver)

    body = json.loads(response.content)
    assert response.status_code == 200
    assert body["success"] is True
    assert body["message"] == "Webhook processed successfully"
    assert len(received) == 1
    assert received[0].id == "txn_123"
    assert received[0].is_terminal()


def test_invalid_json_is_rejected(rf):
    response = webhook_callback(_post(rf, "not json"))

    body = json.loads(response.content)
    assert response.status_code == 400
    assert body["success"] is False
    assert "Invalid webhook payload" in body["message"]


def test_missing_id_is_rejected(rf):
    response = webhook_callback(_post(rf, json.dumps({"status": "completed"})))

    assert response.status_code == 400
    assert "missing transaction ID" in json.loads(response.content)["message"]


def test_get_is_not_allowed(rf):
    response = webhook_callback(rf.get(reverse("shwary_webhook")))

    assert response.status_code == 405


def test_overflowing_amount_is_rejected_with_400(rf):
    body = json.dumps(transaction_payload()).replace('"amount": 5000', '"amount": 1e400')

    response = webhook_callback(_post(rf, body))

    assert response.status_code == 400
    assert json.loads(response.content)["success"] is False
