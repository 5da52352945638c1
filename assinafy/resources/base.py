"""
Base Resource

Shared plumbing for the Assinafy resources: URL building, account id
resolution, request execution and error translation.
"""

import logging
from typing import Any, Dict, Optional

import requests

from ..config import DEFAULT_TIMEOUT
from ..exceptions import AssinafyAPIError, ValidationError
from ..utils import format_request_error, handle_response

logger = logging.getLogger(__name__)

MISSING_ACCOUNT_ID = 'Account ID is required. Provide it as a parameter or set a default in the client.'


class BaseResource:
    """
    Common behaviour for resources bound to a configured session.

    Args:
        session: Session carrying the auth headers
        base_url: API root, e.g. https://api.assinafy.com.br/v1/
        account_id: Default account for account-scoped calls
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        session: requests.Session,
        base_url: str,
        account_id: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        self.session = session
        self.base_url = base_url
        self.account_id = account_id
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def _resolve_account_id(self, account_id: Optional[str] = None, message: str = MISSING_ACCOUNT_ID) -> str:
        """Explicit account id first, then the client default."""
        resolved = account_id or self.account_id
        if not resolved:
            raise ValidationError(message, field='account_id')
        return resolved

    def _request(self, method: str, path: str, failure: str, **kwargs) -> requests.Response:
        """
        Send a request and translate transport failures.

        Args:
            method: HTTP method
            path: Path relative to the base URL
            failure: Message prefix used when the call fails

        Raises:
            AssinafyAPIError: On connection errors and non-2xx responses
        """
        kwargs.setdefault('timeout', self.timeout)
        url = self._url(path)
        logger.debug(f"Assinafy request: {method} {url}")

        try:
            response = self.session.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except requests.exceptions.RequestException as e:
            error_body = None
            status_code = None

            if e.response is not None:
                status_code = e.response.status_code
                error_body = e.response.text

            details = format_request_error(e)
            logger.error(f"{failure}: {details}")

            raise AssinafyAPIError(
                f"{failure}: {details}",
                status_code=status_code,
                response_body=error_body
            )

    def _json(self, response: requests.Response, failure: str) -> Any:
        """Decode a JSON body; empty bodies decode to None."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            logger.error(f"{failure}: invalid JSON in response")
            raise AssinafyAPIError(
                f"{failure}: invalid JSON in response",
                status_code=response.status_code,
                response_body=response.text
            )

    def _call(self, method: str, path: str, failure: str, **kwargs) -> Any:
        """Send a request and return the unwrapped envelope data."""
        response = self._request(method, path, failure, **kwargs)
        return handle_response(self._json(response, failure))

    def _call_object(self, method: str, path: str, failure: str, **kwargs) -> Dict[str, Any]:
        """Like _call, for endpoints that must return a single object."""
        data = self._call(method, path, failure, **kwargs)
        if not isinstance(data, dict):
            logger.error(f"{failure}: empty response")
            raise AssinafyAPIError(f"{failure}: empty response")
        return data

    def _delete(self, path: str, failure: str, what: str) -> None:
        response = self._request('DELETE', path, failure)
        if response.status_code != 200:
            raise AssinafyAPIError(
                f"Failed to delete {what}: HTTP {response.status_code}",
                status_code=response.status_code
            )
