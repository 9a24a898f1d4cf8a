"""
Signals for payment events.
"""
from django.dispatch import Signal

# Sent after the gateway accepted a payment request.
# Provides arguments:
# - transaction: The Transaction returned by the gateway
# - request: The PaymentRequest that was sent
payment_initiated = Signal()

# Sent when a webhook payload was parsed into a Transaction.
# Provides arguments:
# - transaction: The parsed Transaction
webhook_received = Signal()
