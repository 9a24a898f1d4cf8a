"""
HTTP client for Shwary API communication.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import ShwaryConfig
from ..constants import MERCHANT_ID_HEADER, MERCHANT_KEY_HEADER
from ..exceptions import APIError

logger = logging.getLogger(__name__)


class HTTPClient:
    """
    HTTP client wrapper for Shwary API requests.

    Attaches merchant credentials, decodes JSON bodies and maps failures onto
    the SDK exceptions. Requests are sent exactly once; callers decide whether
    to retry.
    """

    def __init__(self, config: ShwaryConfig, session: Optional[requests.Session] = None):
        """
        Initialize HTTP client.

        Args:
            config: Merchant credentials and transport settings
            session: Optional requests session (a new one is created if omitted)
        """
        self.config = config
        self.timeout = config.timeout
        self.session = session or requests.Session()

    def _get_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {
            MERCHANT_ID_HEADER: self.config.merchant_id,
            MERCHANT_KEY_HEADER: self.config.merchant_key,
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }
        if extra:
            headers.update(extra)
        return headers

    def _log_request(self, method: str, url: str, headers: Dict, data: Optional[Dict] = None):
        """Log API request details."""
        logger.info(f"Shwary API Request: {method} {url}")
        logger.debug(f"Headers: {self._sanitize_headers(headers)}")
        if data:
            logger.debug(f"Payload: {data}")

    def _log_response(self, response: requests.Response):
        """Log API response details."""
        logger.info(f"Shwary API Response: {response.status_code}")
        logger.debug(f"Response: {response.text}")

    def _sanitize_headers(self, headers: Dict) -> Dict:
        """Remove sensitive data from headers for logging."""
        sanitized = headers.copy()
        if MERCHANT_KEY_HEADER in sanitized:
            sanitized[MERCHANT_KEY_HEADER] = '***'
        return sanitized

    @staticmethod
    def _decode_body(response: requests.Response) -> Any:
        """Decode a JSON body; empty or non-JSON bodies decode to None."""
        if not response.text or not response.text.strip():
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def _handle_response(self, response: requests.Response) -> Dict[str, Any]:
        """
        Handle API response and extract data.

        Args:
            response: Response object from requests

        Returns:
            Response data as dictionary (empty for an empty or non-JSON body)

        Raises:
            AuthenticationError: On 401
            APIError: On any other 4xx or 5xx status
        """
        self._log_response(response)
        body = self._decode_body(response)

        if response.status_code >= 400:
            error = APIError.from_response(
                response.status_code,
                body if body is not None else response.text,
            )
            logger.error(
                f"Shwary API error {response.status_code}: {error.message}",
                extra={'shwary_error': error.to_dict()},
            )
            raise error

        if body is None:
            return {}
        return body

    def _request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        url = self.config.get_full_url(endpoint)
        headers = self._get_headers(headers)

        self._log_request(method, url, headers, data)

        try:
            response = self.session.request(
                method,
                url,
                json=data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Shwary API {method} {url} failed: {str(e)}")
            raise APIError.network_error(str(e), cause=e) from e

        return self._handle_response(response)

    def post(
        self,
        endpoint: str,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """
        Make POST request to API.

        Args:
            endpoint: API endpoint path
            data: Request payload
            headers: Extra request headers

        Returns:
            Response data
        """
        return self._request('POST', endpoint, data=data, headers=headers)

    def close(self):
        """Close the session."""
        self.session.close()
