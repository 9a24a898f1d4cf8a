"""
Shwary Mobile Money SDK

A client for the Shwary payment gateway (DRC, Kenya, Uganda) with optional
Django integration for settings, webhooks and management commands.
"""

__version__ = "0.1.0"

from .client import ShwaryClient
from .config import ShwaryConfig
from .constants import Country, TransactionStatus
from .dtos import PaymentRequest, Transaction
from .exceptions import (
    ShwaryException,
    ValidationError,
    AuthenticationError,
    APIError,
    GatewayError,
    ConfigurationError,
    UnknownCountryError,
    TransactionParseError,
    InvalidStatusError,
    WebhookError,
)
from .webhooks import WebhookHandler

__all__ = [
    'ShwaryClient',
    'ShwaryConfig',
    'Country',
    'TransactionStatus',
    'PaymentRequest',
    'Transaction',
    'ShwaryException',
    'ValidationError',
    'AuthenticationError',
    'APIError',
    'GatewayError',
    'ConfigurationError',
    'UnknownCountryError',
    'TransactionParseError',
    'InvalidStatusError',
    'WebhookError',
    'WebhookHandler',
]
