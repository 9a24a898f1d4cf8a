"""
Constants and enums for Shwary payment operations.
"""

from enum import Enum

from .exceptions import UnknownCountryError


class Country(str, Enum):
    """Countries served by the Shwary gateway."""
    DRC = "DRC"
    KENYA = "KE"
    UGANDA = "UG"

    @classmethod
    def resolve(cls, code) -> "Country":
        """
        Look up a country by its gateway code.

        Args:
            code: Country code (DRC, KE, UG) or a Country member

        Returns:
            Matching Country

        Raises:
            UnknownCountryError: If the code is not served by the gateway
        """
        if isinstance(code, cls):
            return code
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            raise UnknownCountryError.for_code(code) from None

    @property
    def currency(self) -> str:
        return COUNTRY_META[self]["currency"]

    @property
    def dial_code(self) -> str:
        return COUNTRY_META[self]["dial_code"]

    @property
    def minimum_amount(self) -> int:
        return COUNTRY_META[self]["minimum_amount"]

    @property
    def display_name(self) -> str:
        return COUNTRY_META[self]["name"]


# Minimums are in the smallest currency unit; only DRC enforces one upstream.
COUNTRY_META = {
    Country.DRC: {
        "name": "République Démocratique du Congo",
        "currency": "CDF",
        "dial_code": "+243",
        "minimum_amount": 2900,
    },
    Country.KENYA: {
        "name": "Kenya",
        "currency": "KES",
        "dial_code": "+254",
        "minimum_amount": 0,
    },
    Country.UGANDA: {
        "name": "Ouganda",
        "currency": "UGX",
        "dial_code": "+256",
        "minimum_amount": 0,
    },
}


class TransactionStatus(str, Enum):
    """Transaction statuses reported by the gateway."""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        return self in TERMINAL_STATUSES

    def is_successful(self) -> bool:
        return self is TransactionStatus.COMPLETED


TERMINAL_STATUSES = frozenset({TransactionStatus.COMPLETED, TransactionStatus.FAILED})

DEFAULT_TRANSACTION_TYPE = "deposit"


# API Endpoints
class APIEndpoints:
    """Shwary API endpoints, relative to the versioned API root."""
    CREATE_PAYMENT = "merchants/payment/{country}"
    CREATE_SANDBOX_PAYMENT = "merchants/payment/sandbox/{country}"


# Auth headers
MERCHANT_ID_HEADER = "x-merchant-id"
MERCHANT_KEY_HEADER = "x-merchant-key"

# Default settings
DEFAULT_BASE_URL = "https://api.shwary.com"
API_VERSION_PATH = "/api/v1"
DEFAULT_TIMEOUT = 30  # seconds
MIN_TIMEOUT = 1

# Webhook acknowledgement messages
WEBHOOK_SUCCESS_MESSAGE = "Webhook processed successfully"
WEBHOOK_FAILURE_MESSAGE = "Webhook processing failed"
