"""
Validation utilities for Shwary payment operations.

All validators are pure: they either return the validated value or raise a
ValidationError built by one of its named constructors.
"""

from typing import Any, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator

from ..constants import Country
from ..exceptions import ValidationError

_https_url_validator = URLValidator(schemes=['https'])


def validate_amount(amount: int, country: Country) -> int:
    """
    Validate a payment amount against the country minimum.

    Args:
        amount: Amount in the smallest currency unit
        country: Country the payment is made in

    Returns:
        Validated amount

    Raises:
        ValidationError: If amount is not strictly greater than the minimum
    """
    if amount <= country.minimum_amount:
        raise ValidationError.invalid_amount(amount, country)
    return amount


def validate_phone_number(phone: str, country: Country) -> str:
    """
    Validate that a phone number carries the country dial prefix.

    Args:
        phone: Phone number in international format (e.g. +243812345678)
        country: Country the payment is made in

    Returns:
        Validated phone number

    Raises:
        ValidationError: If the phone does not start with the dial code
    """
    if not isinstance(phone, str) or not phone.startswith(country.dial_code):
        raise ValidationError.invalid_phone_number(phone, country)
    return phone


def validate_callback_url(url: Optional[str]) -> Optional[str]:
    """
    Validate an optional callback URL. Only absolute HTTPS URLs are accepted.

    Raises:
        ValidationError: If the URL is present but not a valid HTTPS URL
    """
    if url is None:
        return None

    # URLValidator lowercases the scheme before comparing
    if not isinstance(url, str) or not url.startswith('https://'):
        raise ValidationError.invalid_callback_url(url)
    try:
        _https_url_validator(url)
    except DjangoValidationError:
        raise ValidationError.invalid_callback_url(url) from None
    return url


def require_field(name: str, value: Any) -> Any:
    """
    Ensure a required value is present.

    Raises:
        ValidationError: If value is None or an empty/blank string
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError.missing_required_field(name)
    return value
