"""Tests for structured exceptions."""

import httpx
import pytest

from upcloud.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConfigurationError,
    ConflictError,
    ContextCancelledError,
    ContextError,
    DeadlineExceededError,
    DecodeError,
    ForbiddenError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    UpCloudError,
    ValidationError,
)


@pytest.mark.unit
def test_api_error_attributes():
    response = httpx.Response(status_code=500)

    error = APIError(
        message="GET /zone: 500 INTERNAL - boom",
        status_code=500,
        response=response,
        error_code="INTERNAL",
        error_message="boom",
    )

    assert str(error) == "GET /zone: 500 INTERNAL - boom"
    assert error.status_code == 500
    assert error.response is response
    assert error.error_code == "INTERNAL"
    assert error.error_message == "boom"


@pytest.mark.unit
def test_api_error_optional_attributes():
    error = APIError("Test error")

    assert error.status_code is None
    assert error.response is None
    assert error.error_code is None
    assert error.error_message is None


@pytest.mark.unit
def test_decode_error_keeps_response():
    response = httpx.Response(status_code=200)

    assert DecodeError("bad body", response=response).response is response
    assert DecodeError("bad body").response is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_class",
    [ConfigurationError, ContextError, DecodeError, APIError],
)
def test_top_level_errors_share_a_base(exc_class):
    assert issubclass(exc_class, UpCloudError)


@pytest.mark.unit
def test_context_errors():
    assert issubclass(ContextCancelledError, ContextError)
    assert issubclass(DeadlineExceededError, ContextError)


@pytest.mark.unit
@pytest.mark.parametrize(
    "exc_class",
    [BadRequestError, UnauthorizedError, ForbiddenError, NotFoundError, ConflictError, ValidationError],
)
def test_client_error_hierarchy(exc_class):
    assert issubclass(exc_class, ClientError)
    assert issubclass(exc_class, APIError)


@pytest.mark.unit
def test_server_error_is_not_client_error():
    assert issubclass(ServerError, APIError)
    assert not issubclass(ServerError, ClientError)


@pytest.mark.unit
def test_decode_error_is_not_api_error():
    assert not issubclass(DecodeError, APIError)
