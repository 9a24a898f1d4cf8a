"""
Utility modules for Shwary payment operations.
"""

from .http_client import HTTPClient
from .validators import (
    validate_amount,
    validate_phone_number,
    validate_callback_url,
    require_field,
)
from .formatters import (
    parse_timestamp,
    format_timestamp,
    format_currency,
)

__all__ = [
    'HTTPClient',
    'validate_amount',
    'validate_phone_number',
    'validate_callback_url',
    'require_field',
    'parse_timestamp',
    'format_timestamp',
    'format_currency',
]
