"""
Response and error helpers shared by every resource.
"""

import json
import logging
from typing import Any, Dict, Mapping

import requests

from .exceptions import AssinafyAPIError

logger = logging.getLogger(__name__)

# Response bodies at or above this length are left out of error messages
MAX_ERROR_BODY_LENGTH = 500


def handle_response(body: Any) -> Any:
    """
    Unwrap the Assinafy response envelope.

    Assinafy wraps most payloads as ``{"status": 200, "data": ..., "message": ...}``.
    A successful status (200-299) yields ``data``; any other status raises
    AssinafyAPIError with the vendor message. Bodies without both ``status``
    and ``data`` (e.g. bare listings) are returned unchanged.

    Raises:
        AssinafyAPIError: If the envelope carries an error status
    """
    if not isinstance(body, dict) or 'status' not in body or 'data' not in body:
        return body

    status = body['status']
    if isinstance(status, bool) or not isinstance(status, int):
        return body

    if 200 <= status < 300:
        return body['data']

    message = body.get('message') or f"Request failed with status {status}"
    logger.error(f"Assinafy returned error envelope: status={status} message={message}")
    raise AssinafyAPIError(f"Assinafy API Error: {message}", status_code=status)


def _response_snippet(response: requests.Response) -> str:
    """Serialize a response body for error messages, or '' if unavailable."""
    try:
        return json.dumps(response.json())
    except (TypeError, ValueError):
        pass

    text = getattr(response, 'text', None)
    return text if isinstance(text, str) else ''


def format_request_error(error: requests.exceptions.RequestException) -> str:
    """
    Build a one-line description of a failed HTTP call.

    Example:
        GET https://api.assinafy.com.br/v1/documents/abc failed: 404 Client Error
        (HTTP 404 Not Found) - Response: {"message": "Not found"}
    """
    request = getattr(error, 'request', None)
    response = getattr(error, 'response', None)

    method = getattr(request, 'method', None)
    url = getattr(request, 'url', None)

    details = f"{method.upper() if method else 'REQUEST'} {url or 'unknown'} failed: {error}"

    status = getattr(response, 'status_code', None) if response is not None else None
    if status:
        reason = getattr(response, 'reason', None)
        details += f" (HTTP {status}"
        if reason:
            details += f" {reason}"
        details += ")"

    if response is not None:
        snippet = _response_snippet(response)
        if snippet and len(snippet) < MAX_ERROR_BODY_LENGTH:
            details += f" - Response: {snippet}"

    return details


def to_payload(data: Any) -> Dict[str, Any]:
    """Convert a payload dataclass or mapping into a JSON-ready dict."""
    if data is None:
        return {}
    if hasattr(data, 'to_dict'):
        return data.to_dict()
    if isinstance(data, Mapping):
        return dict(data)
    raise TypeError(f"Unsupported payload type: {type(data).__name__}")
