"""
Payment service for Shwary mobile money payments.
Handles payment creation for live and sandbox modes.
"""

import logging
from typing import Optional

from ..config import ShwaryConfig
from ..constants import APIEndpoints
from ..dtos import PaymentRequest, Transaction
from ..exceptions import APIError
from ..signals import payment_initiated
from ..utils.http_client import HTTPClient

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Service for mobile money payment operations.

    Requests are validated when the PaymentRequest is built, so nothing
    reaches the network unless it already passed validation.
    """

    def __init__(self, config: ShwaryConfig, http_client: Optional[HTTPClient] = None):
        self.config = config
        self.http_client = http_client or HTTPClient(config)

    def create_payment(self, request: PaymentRequest, sandbox: Optional[bool] = None) -> Transaction:
        """
        Initiate a payment request on the gateway.

        Args:
            request: Validated payment request
            sandbox: Force sandbox routing; defaults to the configured mode

        Returns:
            Transaction returned by the gateway

        Raises:
            AuthenticationError: If the merchant credentials are rejected
            APIError: If the gateway call fails
            TransactionParseError: If the gateway response is not a transaction
        """
        if sandbox is None:
            sandbox = self.config.sandbox

        template = APIEndpoints.CREATE_SANDBOX_PAYMENT if sandbox else APIEndpoints.CREATE_PAYMENT
        endpoint = template.format(country=request.country.value)

        logger.info(
            f"Initiating {'sandbox ' if sandbox else ''}payment of "
            f"{request.amount} {request.country.currency} to {request.client_phone_number}"
        )

        try:
            response = self.http_client.post(endpoint=endpoint, data=request.to_dict())
        except APIError as e:
            if e.code == 404:
                logger.error(f"Client not found: {request.client_phone_number}")
                raise APIError.client_not_found(request.client_phone_number) from e
            logger.error(f"Payment initiation failed: {e.message}")
            raise

        transaction = Transaction.from_dict(response)

        logger.info(
            f"Payment initiated successfully. "
            f"Transaction ID: {transaction.id}, Status: {transaction.status.value}"
        )
        payment_initiated.send(sender=self.__class__, transaction=transaction, request=request)
        return transaction

    def create_sandbox_payment(self, request: PaymentRequest) -> Transaction:
        """Initiate a payment on the sandbox endpoint regardless of config."""
        return self.create_payment(request, sandbox=True)
