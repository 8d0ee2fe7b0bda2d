"""Async client for the UpCloud API.

Covers accounts, zones, pricing, plans and timezones. Every call takes a
``Context`` for cancellation, authenticates with HTTP Basic auth through a
transport layer and decodes UpCloud's single-key JSON envelopes into pydantic
models.

Example:
    ```python
    from upcloud import Client, Context
    from upcloud.transport import BasicAuthTransport

    transport = BasicAuthTransport.from_env()  # UPCLOUD_USERNAME / UPCLOUD_PASSWORD

    async with Client(transport.client()) as client:
        account, response = await client.accounts.get_account_details(Context(timeout=30), "someUser")
    ```
"""

from upcloud.client import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, Client, encode_json
from upcloud.context import Context
from upcloud.errors import (
    APIError,
    ConfigurationError,
    ContextCancelledError,
    ContextError,
    DeadlineExceededError,
    DecodeError,
    UpCloudError,
)
from upcloud.transport import BasicAuthTransport
from upcloud.version import __version__

__all__ = [
    "APIError",
    "BasicAuthTransport",
    "Client",
    "ConfigurationError",
    "Context",
    "ContextCancelledError",
    "ContextError",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "DeadlineExceededError",
    "DecodeError",
    "UpCloudError",
    "__version__",
    "encode_json",
]
