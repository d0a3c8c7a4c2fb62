"""Errors raised by the request executor."""

from openapi_codegen.core.models import ApiResult


class ApiError(Exception):
    """Raised when a response is classified as a failure.

    Carries the full result so callers can inspect the status and body.
    """

    def __init__(self, result: ApiResult, message: str):
        super().__init__(message)
        self.result = result
        self.url = result.url
        self.status = result.status
        self.status_text = result.status_text
        self.body = result.body


class HttpStatusError(ApiError):
    """Status code has an entry in the effective error table."""


class GenericRequestError(ApiError):
    """Response was not ok and its status has no table entry."""
