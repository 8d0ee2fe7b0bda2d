"""Error handling utilities for UpCloud HTTP responses."""

import httpx

from upcloud.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from upcloud.errors.models import ErrorDetail

_EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
}


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching APIError for a non-2xx response.

    The body must already be read. A body that does not decode as an UpCloud
    error envelope raises DecodeError instead of a synthetic APIError.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
        DecodeError: If the error body is malformed
    """
    if response.is_success:
        return

    detail = ErrorDetail.from_response(response)
    status_code = response.status_code

    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    raise exc_class(
        message=detail.to_exception_message(response),
        status_code=status_code,
        response=response,
        error_code=detail.error_code,
        error_message=detail.error_message,
    )
