"""
Process-wide convenience access to a single configured ShwaryClient.

Core components never read from here; it only saves passing a client
around in small projects and management commands.
"""

from typing import Any, Mapping, Optional

from .client import ShwaryClient
from .config import ShwaryConfig
from .exceptions import ConfigurationError

_client: Optional[ShwaryClient] = None


def init(config: ShwaryConfig) -> ShwaryClient:
    """Register a client built from ``config`` and return it."""
    global _client
    _client = ShwaryClient(config)
    return _client


def init_from_dict(data: Mapping[str, Any]) -> ShwaryClient:
    return init(ShwaryConfig.from_dict(data))


def init_from_settings() -> ShwaryClient:
    return init(ShwaryConfig.from_django_settings())


def get_client() -> ShwaryClient:
    if _client is None:
        raise ConfigurationError(
            "Shwary SDK not initialized. Call shwary.facade.init() first."
        )
    return _client


def reset() -> None:
    global _client
    if _client is not None:
        _client.close()
    _client = None


def pay_drc(amount, phone, callback_url=None):
    return get_client().pay_drc(amount, phone, callback_url)


def pay_kenya(amount, phone, callback_url=None):
    return get_client().pay_kenya(amount, phone, callback_url)


def pay_uganda(amount, phone, callback_url=None):
    return get_client().pay_uganda(amount, phone, callback_url)


def create_payment(request):
    return get_client().create_payment(request)


def create_sandbox_payment(request):
    return get_client().create_sandbox_payment(request)


def parse_webhook(payload):
    return get_client().parse_webhook(payload)


def is_sandbox():
    return get_client().is_sandbox()


def get_config():
    return get_client().get_config()
