"""
Value objects exchanged with the Shwary gateway.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Sequence

from .constants import Country, DEFAULT_TRANSACTION_TYPE, TransactionStatus
from .exceptions import InvalidStatusError, TransactionParseError
from .utils.formatters import format_timestamp, parse_timestamp
from .utils.validators import (
    require_field,
    validate_amount,
    validate_callback_url,
    validate_phone_number,
)


@dataclass(frozen=True)
class PaymentRequest:
    """
    A validated request to collect a mobile money payment.

    Construction runs the amount, phone and callback URL checks in that order
    and raises the first ValidationError, so an instance is always valid.
    """

    amount: int
    client_phone_number: str
    country: Country
    callback_url: Optional[str] = None

    def __post_init__(self):
        require_field('amount', self.amount)
        require_field('country', self.country)
        country = Country.resolve(self.country)
        object.__setattr__(self, 'country', country)

        validate_amount(self.amount, country)
        validate_phone_number(self.client_phone_number, country)
        validate_callback_url(self.callback_url)

    @classmethod
    def create(
        cls,
        amount: int,
        phone: str,
        country: Country,
        callback_url: Optional[str] = None,
    ) -> "PaymentRequest":
        return cls(
            amount=amount,
            client_phone_number=phone,
            country=country,
            callback_url=callback_url,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Request body for the gateway; callbackUrl is omitted when unset."""
        data = {
            'amount': self.amount,
            'clientPhoneNumber': self.client_phone_number,
        }
        if self.callback_url is not None:
            data['callbackUrl'] = self.callback_url
        return data


# Candidate payload keys per attribute, camelCase first.
TRANSACTION_FIELD_KEYS: Dict[str, Sequence[str]] = {
    'id': ('id',),
    'user_id': ('userId', 'user_id'),
    'amount': ('amount',),
    'currency': ('currency',),
    'type': ('type',),
    'status': ('status',),
    'recipient_phone_number': ('recipientPhoneNumber', 'recipient_phone_number'),
    'reference_id': ('referenceId', 'reference_id'),
    'metadata': ('metadata',),
    'failure_reason': ('failureReason', 'failure_reason'),
    'completed_at': ('completedAt', 'completed_at'),
    'created_at': ('createdAt', 'created_at'),
    'updated_at': ('updatedAt', 'updated_at'),
    'is_sandbox': ('isSandbox', 'is_sandbox'),
    'pretium_transaction_id': ('pretiumTransactionId', 'pretium_transaction_id'),
    'error': ('error',),
}


def _lookup(data: Mapping[str, Any], attr: str) -> Any:
    for key in TRANSACTION_FIELD_KEYS[attr]:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _required(data: Mapping[str, Any], attr: str) -> Any:
    value = _lookup(data, attr)
    if value is None:
        raise TransactionParseError.missing_field(TRANSACTION_FIELD_KEYS[attr][0])
    return value


def _timestamp(attr: str, value: Any) -> datetime:
    parsed = parse_timestamp(value)
    if parsed is None:
        raise TransactionParseError.invalid_value(TRANSACTION_FIELD_KEYS[attr][0], value)
    return parsed


def _integer(attr: str, value: Any) -> int:
    if isinstance(value, bool):
        raise TransactionParseError.invalid_value(attr, value)
    try:
        return int(Decimal(str(value)))
    except (InvalidOperation, ValueError, OverflowError):
        raise TransactionParseError.invalid_value(attr, value) from None


@dataclass(frozen=True)
class Transaction:
    """
    A gateway transaction, as returned on payment creation or by a webhook.

    Transactions are never updated in place; a status change arrives as a new
    payload and produces a new instance.
    """

    id: str
    user_id: str
    amount: int
    currency: str
    status: TransactionStatus
    recipient_phone_number: str
    reference_id: str
    created_at: datetime
    updated_at: datetime
    type: str = DEFAULT_TRANSACTION_TYPE
    metadata: Optional[Dict[str, Any]] = field(default=None, hash=False)
    failure_reason: Optional[str] = None
    completed_at: Optional[datetime] = None
    is_sandbox: bool = False
    pretium_transaction_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        """
        Build a Transaction from a decoded gateway or webhook payload.

        Every field is looked up under its camelCase key first and its
        snake_case key second, so both conventions (or a mix) are accepted.

        Raises:
            TransactionParseError: If a required field is missing or a value
                cannot be converted
            InvalidStatusError: If the status is not pending/completed/failed
        """
        if not isinstance(data, Mapping):
            raise TransactionParseError.invalid_value('payload', data)

        raw_status = _required(data, 'status')
        try:
            status = TransactionStatus(raw_status)
        except ValueError:
            raise InvalidStatusError.for_value(raw_status) from None

        completed_at = _lookup(data, 'completed_at')
        transaction_type = _lookup(data, 'type')

        return cls(
            id=str(_required(data, 'id')),
            user_id=str(_required(data, 'user_id')),
            amount=_integer('amount', _required(data, 'amount')),
            currency=str(_required(data, 'currency')),
            type=transaction_type if transaction_type is not None else DEFAULT_TRANSACTION_TYPE,
            status=status,
            recipient_phone_number=str(_required(data, 'recipient_phone_number')),
            reference_id=str(_required(data, 'reference_id')),
            metadata=_lookup(data, 'metadata'),
            failure_reason=_lookup(data, 'failure_reason'),
            completed_at=_timestamp('completed_at', completed_at) if completed_at is not None else None,
            created_at=_timestamp('created_at', _required(data, 'created_at')),
            updated_at=_timestamp('updated_at', _required(data, 'updated_at')),
            is_sandbox=bool(_lookup(data, 'is_sandbox') or False),
            pretium_transaction_id=_lookup(data, 'pretium_transaction_id'),
            error=_lookup(data, 'error'),
        )

    def is_pending(self) -> bool:
        return self.status is TransactionStatus.PENDING

    def is_completed(self) -> bool:
        return self.status is TransactionStatus.COMPLETED

    def is_failed(self) -> bool:
        return self.status is TransactionStatus.FAILED

    def is_terminal(self) -> bool:
        return self.status.is_terminal()

    def to_dict(self) -> Dict[str, Any]:
        """Canonical camelCase representation; every key is always present."""
        return {
            'id': self.id,
            'userId': self.user_id,
            'amount': self.amount,
            'currency': self.currency,
            'type': self.type,
            'status': self.status.value,
            'recipientPhoneNumber': self.recipient_phone_number,
            'referenceId': self.reference_id,
            'metadata': self.metadata,
            'failureReason': self.failure_reason,
            'completedAt': format_timestamp(self.completed_at),
            'createdAt': format_timestamp(self.created_at),
            'updatedAt': format_timestamp(self.updated_at),
            'isSandbox': self.is_sandbox,
            'pretiumTransactionId': self.pretium_transaction_id,
            'error': self.error,
        }
