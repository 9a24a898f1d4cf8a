"""
Data formatting utilities for Shwary payment operations.
"""

from datetime import datetime, timezone
from typing import Optional, Union

from django.utils.dateparse import parse_datetime


def parse_timestamp(value: Union[str, datetime]) -> Optional[datetime]:
    """
    Parse a timestamp from a gateway payload.

    Accepts ISO-8601 strings with or without offset, ``Z`` suffix and
    fractional seconds. Naive values are treated as UTC.

    Args:
        value: Timestamp string or datetime

    Returns:
        Timezone-aware datetime, or None if the value cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = parse_datetime(str(value).strip())
        except ValueError:
            return None
        if parsed is None:
            return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """
    Format a datetime as ISO-8601 with offset (e.g. 2026-02-05T10:00:00+00:00).
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec='seconds')


def utc_now_iso() -> str:
    """Current time formatted like ``format_timestamp``."""
    return format_timestamp(datetime.now(timezone.utc))


def format_currency(amount: int, currency: str) -> str:
    """
    Format amount with currency code.

    Args:
        amount: Amount in the smallest currency unit
        currency: Currency code

    Returns:
        Formatted string (e.g., "CDF 5,000")
    """
    return f"{currency} {amount:,}"
