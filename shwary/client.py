"""
High-level client for the Shwary payment gateway.
"""

import logging
from typing import Any, Mapping, Optional, Union

from .config import ShwaryConfig
from .constants import Country
from .dtos import PaymentRequest, Transaction
from .services.payment_service import PaymentService
from .utils.http_client import HTTPClient
from .webhooks import WebhookHandler

logger = logging.getLogger(__name__)


class ShwaryClient:
    """
    Entry point for payments and webhooks against one merchant configuration.

    The client holds no mutable state beyond its HTTP session, so several
    clients with different configurations can be used side by side.
    """

    def __init__(self, config: ShwaryConfig, http_client: Optional[HTTPClient] = None):
        self.config = config
        self.http_client = http_client or HTTPClient(config)
        self.payment_service = PaymentService(config, self.http_client)
        self.webhook_handler = WebhookHandler()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShwaryClient":
        return cls(ShwaryConfig.from_dict(data))

    @classmethod
    def from_django_settings(cls) -> "ShwaryClient":
        return cls(ShwaryConfig.from_django_settings())

    def get_config(self) -> ShwaryConfig:
        return self.config

    def is_sandbox(self) -> bool:
        return self.config.sandbox

    def create_payment(self, request: PaymentRequest) -> Transaction:
        """Initiate a payment, routed to sandbox when the config says so."""
        return self.payment_service.create_payment(request)

    def create_sandbox_payment(self, request: PaymentRequest) -> Transaction:
        return self.payment_service.create_sandbox_payment(request)

    def pay(
        self,
        amount: int,
        phone: str,
        country: Union[Country, str],
        callback_url: Optional[str] = None,
    ) -> Transaction:
        """
        Validate and initiate a payment in one call.

        Raises:
            ValidationError: Before any network call, if the input is invalid
            AuthenticationError: If the merchant credentials are rejected
            APIError: If the gateway call fails
        """
        request = PaymentRequest.create(amount, phone, country, callback_url)
        return self.create_payment(request)

    def pay_drc(self, amount: int, phone: str, callback_url: Optional[str] = None) -> Transaction:
        return self.pay(amount, phone, Country.DRC, callback_url)

    def pay_kenya(self, amount: int, phone: str, callback_url: Optional[str] = None) -> Transaction:
        return self.pay(amount, phone, Country.KENYA, callback_url)

    def pay_uganda(self, amount: int, phone: str, callback_url: Optional[str] = None) -> Transaction:
        return self.pay(amount, phone, Country.UGANDA, callback_url)

    def webhook(self) -> WebhookHandler:
        return self.webhook_handler

    def parse_webhook(self, payload: Union[str, bytes]) -> Transaction:
        return self.webhook_handler.parse_payload(payload)

    def close(self):
        self.http_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
