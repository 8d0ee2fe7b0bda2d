"""Structured exceptions for UpCloud API calls."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class UpCloudError(Exception):
    """Base exception for every error raised by this library."""

    pass


class ConfigurationError(UpCloudError):
    """Client misconfiguration detected before any network I/O.

    Raised for a malformed base URL, an unparseable request path or a missing
    request context. Not retryable without fixing the caller.
    """

    pass


class ContextError(UpCloudError):
    """The request context ended before the call completed."""

    pass


class ContextCancelledError(ContextError):
    """The request context was cancelled."""

    pass


class DeadlineExceededError(ContextError):
    """The request context deadline passed."""

    pass


class DecodeError(UpCloudError):
    """Response body could not be decoded into the expected shape."""

    def __init__(self, message: str, response: "httpx.Response | None" = None):
        super().__init__(message)
        self.response = response


class APIError(UpCloudError):
    """Non-success response carrying an UpCloud error envelope."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_code: str | None = None,
        error_message: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_code = error_code
        self.error_message = error_message


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity."""

    pass


class ServerError(APIError):
    """5xx server errors."""

    pass
