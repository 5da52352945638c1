"""
Assinafy Client Exceptions

Custom exceptions for request validation and API failures.
"""


class AssinafyError(Exception):
    """Base exception for all Assinafy client errors."""
    pass


class ValidationError(AssinafyError):
    """
    Raised when a call is missing required input.

    Always raised before any request is sent.
    """
    def __init__(self, message: str, field: str = None):
        self.field = field
        super().__init__(message)


class AssinafyAPIError(AssinafyError):
    """
    Raised when Assinafy API calls fail.

    Covers transport errors, HTTP error statuses and error envelopes.
    """
    def __init__(self, message: str, status_code: int = None, response_body: str = None):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)
