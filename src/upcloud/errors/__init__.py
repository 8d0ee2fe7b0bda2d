"""Error taxonomy and UpCloud error envelope handling."""

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
from upcloud.errors.handler import raise_for_status
from upcloud.errors.models import ErrorDetail

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConfigurationError",
    "ConflictError",
    "ContextCancelledError",
    "ContextError",
    "DeadlineExceededError",
    "DecodeError",
    "ErrorDetail",
    "ForbiddenError",
    "NotFoundError",
    "ServerError",
    "UnauthorizedError",
    "UpCloudError",
    "ValidationError",
    "raise_for_status",
]
