"""
Views for Shwary webhook callbacks.
"""

import logging
from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .exceptions import ShwaryException
from .signals import webhook_received
from .webhooks import WebhookHandler

logger = logging.getLogger(__name__)


@csrf_exempt
@require_POST
def webhook_callback(request):
    """
    Handle Shwary transaction status callbacks.

    Receivers of ``webhook_received`` do the application-specific work; the
    gateway only gets the acknowledgement payload back.
    """
    handler = WebhookHandler()

    try:
        transaction = handler.parse_payload(request.body)
    except ShwaryException as e:
        logger.error(f"Error processing Shwary webhook: {e.message}", extra={'shwary_error': e.to_dict()})
        return JsonResponse(handler.create_response(False, e.message), status=400)

    webhook_received.send(sender=WebhookHandler, transaction=transaction)
    return JsonResponse(handler.create_response(True))
