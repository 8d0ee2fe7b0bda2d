"""UpCloud error envelope model."""

from dataclasses import dataclass

import httpx

from upcloud.errors.exceptions import DecodeError


@dataclass(frozen=True)
class ErrorDetail:
    """Payload of an UpCloud error response.

    The API wraps errors in a single ``error`` key::

        {"error": {"error_code": "ACCOUNT_NOT_FOUND", "error_message": "..."}}
    """

    error_code: str | None = None  # Machine-readable code
    error_message: str | None = None  # Human-readable explanation

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail":
        """Decode the error envelope of a non-success response.

        Args:
            response: HTTP response whose body has already been read

        Returns:
            ErrorDetail with whichever fields the envelope carried

        Raises:
            DecodeError: If the body is empty, is not JSON, or is not a JSON object
        """
        try:
            data = response.json()
        except (ValueError, UnicodeDecodeError) as e:
            raise DecodeError(f"Invalid error response body: {e}", response=response) from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"Error response body must be a JSON object, got {type(data).__name__}",
                response=response,
            )

        detail = data.get("error")
        if detail is None:
            return cls()
        if not isinstance(detail, dict):
            raise DecodeError("Error envelope 'error' field must be a JSON object", response=response)

        return cls(
            error_code=_optional_str(detail.get("error_code")),
            error_message=_optional_str(detail.get("error_message")),
        )

    def to_exception_message(self, response: httpx.Response) -> str:
        """Format as ``METHOD URL: STATUS CODE - MESSAGE``."""
        request = response.request
        return f"{request.method} {request.url}: {response.status_code} {self.error_code} - {self.error_message}"


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
