"""
Custom exceptions for Shwary payment operations.

Every error carries a human message, a numeric HTTP-like code and a context
mapping suitable for structured logging. Errors are built through named
constructors so that the message template, code and context shape stay fixed.
"""

from typing import Any, Dict, Optional


class ShwaryException(Exception):
    """Base exception for all Shwary-related errors."""

    default_kind = "shwary_error"

    def __init__(
        self,
        message: str,
        code: int = 0,
        context: Optional[Dict[str, Any]] = None,
        response_data: Any = None,
        kind: Optional[str] = None,
    ):
        self.message = message
        self.code = code
        self.context = dict(context or {})
        self.response_data = response_data
        self.kind = kind or self.default_kind
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for logging and serialization."""
        return {
            'message': self.message,
            'code': self.code,
            'context': self.context,
        }


class ValidationError(ShwaryException):
    """Raised when input validation fails."""

    default_kind = "validation_error"

    @classmethod
    def invalid_amount(cls, amount: int, country) -> "ValidationError":
        minimum = country.minimum_amount
        return cls(
            f"Invalid amount: {amount} {country.currency}. "
            f"Amount must be greater than {minimum} for {country.display_name}.",
            code=400,
            context={
                'amount': amount,
                'minimum': minimum,
                'currency': country.currency,
                'country': country.value,
            },
            kind="invalid_amount",
        )

    @classmethod
    def invalid_phone_number(cls, phone: str, country) -> "ValidationError":
        return cls(
            f"Invalid phone number: {phone}. "
            f"Phone must start with {country.dial_code} for {country.display_name}.",
            code=400,
            context={
                'phone': phone,
                'expected_prefix': country.dial_code,
                'country': country.value,
            },
            kind="invalid_phone",
        )

    @classmethod
    def invalid_callback_url(cls, url: str) -> "ValidationError":
        return cls(
            f"Invalid callback URL: {url}. Must be a valid HTTPS URL.",
            code=400,
            context={'url': url},
            kind="invalid_callback_url",
        )

    @classmethod
    def missing_required_field(cls, field: str) -> "ValidationError":
        return cls(
            f"Missing required field: {field}",
            code=400,
            context={'field': field},
            kind="missing_field",
        )


class UnknownCountryError(ValidationError):
    """Raised when a country code is not served by the gateway."""

    default_kind = "unknown_country"

    @classmethod
    def for_code(cls, code: Any) -> "UnknownCountryError":
        return cls(
            f"Unknown country: {code}. Supported countries: DRC, KE, UG.",
            code=400,
            context={'country': code},
        )


class AuthenticationError(ShwaryException):
    """Raised when the merchant credentials are rejected or absent."""

    default_kind = "authentication_error"

    @classmethod
    def invalid_credentials(cls, response_data: Any = None) -> "AuthenticationError":
        return cls(
            "Invalid merchant credentials. Please verify your merchant ID and key.",
            code=401,
            response_data=response_data,
            kind="invalid_credentials",
        )

    @classmethod
    def missing_credentials(cls) -> "AuthenticationError":
        return cls(
            "Missing merchant credentials. Both merchant ID and key are required.",
            code=401,
            kind="missing_credentials",
        )


class APIError(ShwaryException):
    """Raised when the gateway call fails or the gateway returns an error."""

    default_kind = "api_error"
    default_gateway_message = "Payment gateway error"

    def __init__(self, *args, cause: Optional[BaseException] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.cause = cause

    @classmethod
    def network_error(cls, detail: str, cause: Optional[BaseException] = None) -> "APIError":
        return cls(
            f"Network error: {detail}",
            code=0,
            cause=cause,
            kind="network_error",
        )

    @classmethod
    def bad_gateway(cls, message: Optional[str] = None, response_data: Any = None) -> "APIError":
        return cls(
            message or cls.default_gateway_message,
            code=502,
            response_data=response_data,
            kind="bad_gateway",
        )

    @classmethod
    def client_not_found(cls, phone: str) -> "APIError":
        return cls(
            f"Client with phone number {phone} not found.",
            code=404,
            context={'phone': phone},
            kind="client_not_found",
        )

    @classmethod
    def from_response(cls, status_code: int, body: Any = None) -> ShwaryException:
        """
        Map a received HTTP error status to the matching exception.

        Args:
            status_code: HTTP status returned by the gateway
            body: Decoded JSON body (dict) or raw text

        Returns:
            AuthenticationError for 401, APIError otherwise
        """
        message = extract_error_message(body)

        if status_code == 401:
            return AuthenticationError.invalid_credentials(response_data=body)

        if status_code >= 500:
            return cls.bad_gateway(message, response_data=body)

        return cls(
            message or f"API request failed with status {status_code}",
            code=status_code,
            response_data=body,
            kind="client_error",
        )


GatewayError = APIError


class ConfigurationError(ShwaryException):
    """Raised when there's a configuration issue."""

    default_kind = "configuration_error"


class TransactionParseError(ShwaryException):
    """Raised when a gateway or webhook payload cannot be turned into a Transaction."""

    default_kind = "transaction_parse_error"

    @classmethod
    def missing_field(cls, field: str) -> "TransactionParseError":
        return cls(
            f"Missing required field in transaction payload: {field}",
            code=422,
            context={'field': field},
            kind="missing_field",
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any) -> "TransactionParseError":
        return cls(
            f"Invalid value for transaction field {field}: {value!r}",
            code=422,
            context={'field': field, 'value': value},
            kind="invalid_value",
        )


class InvalidStatusError(TransactionParseError):
    """Raised when a payload carries a status the SDK does not know."""

    default_kind = "invalid_status"

    @classmethod
    def for_value(cls, value: Any) -> "InvalidStatusError":
        return cls(
            f"Invalid transaction status: {value!r}. Expected one of pending, completed, failed.",
            code=422,
            context={'status': value},
        )


class WebhookError(ShwaryException):
    """Raised when an inbound webhook body cannot be decoded."""

    default_kind = "webhook_error"

    @classmethod
    def invalid_payload(cls, detail: str) -> "WebhookError":
        return cls(
            f"Invalid webhook payload: {detail}",
            code=400,
            kind="invalid_payload",
        )

    @classmethod
    def missing_transaction_id(cls) -> "WebhookError":
        return cls(
            "Invalid webhook payload: missing transaction ID",
            code=400,
            context={'field': 'id'},
            kind="missing_transaction_id",
        )


def extract_error_message(body: Any) -> Optional[str]:
    """Pull a human message out of an error body ('message', then 'error')."""
    if isinstance(body, dict):
        for key in ('message', 'error'):
            value = body.get(key)
            if value:
                return str(value)
    return None
