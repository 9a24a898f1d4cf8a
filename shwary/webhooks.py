"""
Webhook handling for Shwary transaction notifications.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from .constants import WEBHOOK_FAILURE_MESSAGE, WEBHOOK_SUCCESS_MESSAGE
from .dtos import Transaction
from .exceptions import WebhookError
from .utils.formatters import utc_now_iso

logger = logging.getLogger(__name__)


class WebhookHandler:
    """
    Decodes inbound webhook bodies and builds acknowledgement payloads.

    Payloads are trusted once received; no signature is checked here.
    """

    def parse_payload(self, payload: Union[str, bytes]) -> Transaction:
        """
        Parse a raw webhook body into a Transaction.

        Args:
            payload: Raw JSON body as sent by the gateway

        Returns:
            Parsed Transaction

        Raises:
            WebhookError: If the body is not a JSON object or has no transaction ID
            TransactionParseError: If another required field is missing or invalid
        """
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            logger.warning(f"Rejected webhook with undecodable body: {str(e)}")
            raise WebhookError.invalid_payload(str(e)) from e

        if not isinstance(data, dict):
            logger.warning("Rejected webhook whose body is not a JSON object")
            raise WebhookError.invalid_payload("expected a JSON object")

        if data.get('id') is None:
            raise WebhookError.missing_transaction_id()

        transaction = Transaction.from_dict(data)
        logger.info(
            f"Webhook received for transaction {transaction.id}: {transaction.status.value}"
        )
        return transaction

    def create_response(self, success: bool, message: Optional[str] = None) -> Dict[str, Any]:
        """
        Build the acknowledgement returned to the gateway.

        Args:
            success: Whether the webhook was processed
            message: Custom message; a default is used when omitted

        Returns:
            Dictionary with success, message and an ISO-8601 timestamp
        """
        if message is None:
            message = WEBHOOK_SUCCESS_MESSAGE if success else WEBHOOK_FAILURE_MESSAGE
        return {
            'success': success,
            'message': message,
            'timestamp': utc_now_iso(),
        }

    def is_terminal_status(self, transaction: Transaction) -> bool:
        return transaction.is_terminal()
