"""
Service modules for Shwary payment operations.
"""

from .payment_service import PaymentService

__all__ = [
    'PaymentService',
]
