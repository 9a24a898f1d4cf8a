"""
Configuration management for the Shwary payment SDK.
"""

from typing import Any, Mapping

from .constants import API_VERSION_PATH, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, MIN_TIMEOUT
from .exceptions import AuthenticationError, ConfigurationError


class ShwaryConfig:
    """
    Merchant credentials and transport settings for the Shwary API.

    Values are validated once at construction and exposed read-only. Only
    ``from_django_settings`` reads global state.
    """

    def __init__(
        self,
        merchant_id: str,
        merchant_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        sandbox: bool = False,
    ):
        if not merchant_id:
            raise ConfigurationError("Merchant ID is required")
        if not merchant_key:
            raise ConfigurationError("Merchant Key is required")
        if timeout < MIN_TIMEOUT:
            raise ConfigurationError(
                "Timeout must be at least 1 second",
                context={'timeout': timeout},
            )

        self._merchant_id = merchant_id
        self._merchant_key = merchant_key
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip('/')
        self._timeout = int(timeout)
        self._sandbox = bool(sandbox)

    def __repr__(self):
        return (
            f"ShwaryConfig(merchant_id={self._merchant_id!r}, base_url={self._base_url!r}, "
            f"timeout={self._timeout!r}, sandbox={self._sandbox!r})"
        )

    @property
    def merchant_id(self) -> str:
        return self._merchant_id

    @property
    def merchant_key(self) -> str:
        return self._merchant_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> int:
        return self._timeout

    @property
    def sandbox(self) -> bool:
        return self._sandbox

    @property
    def api_url(self) -> str:
        """Versioned API root, e.g. https://api.shwary.com/api/v1."""
        return f"{self._base_url}{API_VERSION_PATH}"

    def get_full_url(self, endpoint: str) -> str:
        """
        Get full URL for an API endpoint.

        Args:
            endpoint: API endpoint path, relative to the versioned root

        Returns:
            Full URL combining API root and endpoint
        """
        return f"{self.api_url}/{endpoint.lstrip('/')}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShwaryConfig":
        """Build a config from a mapping with snake_case keys."""
        return cls(
            merchant_id=data.get('merchant_id', ''),
            merchant_key=data.get('merchant_key', ''),
            base_url=data.get('base_url') or DEFAULT_BASE_URL,
            timeout=int(data.get('timeout', DEFAULT_TIMEOUT)),
            sandbox=bool(data.get('sandbox', False)),
        )

    @classmethod
    def from_django_settings(cls) -> "ShwaryConfig":
        """
        Load configuration from Django settings.

        Reads SHWARY_MERCHANT_ID, SHWARY_MERCHANT_KEY, SHWARY_BASE_URL,
        SHWARY_TIMEOUT and SHWARY_SANDBOX.

        Raises:
            AuthenticationError: If merchant credentials are not configured
        """
        from django.conf import settings

        merchant_id = getattr(settings, 'SHWARY_MERCHANT_ID', '')
        merchant_key = getattr(settings, 'SHWARY_MERCHANT_KEY', '')
        if not merchant_id or not merchant_key:
            raise AuthenticationError.missing_credentials()

        return cls(
            merchant_id=merchant_id,
            merchant_key=merchant_key,
            base_url=getattr(settings, 'SHWARY_BASE_URL', DEFAULT_BASE_URL),
            timeout=int(getattr(settings, 'SHWARY_TIMEOUT', DEFAULT_TIMEOUT)),
            sandbox=bool(getattr(settings, 'SHWARY_SANDBOX', False)),
        )
