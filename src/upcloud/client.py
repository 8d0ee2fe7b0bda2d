"""UpCloud API client: request construction and execution."""

import json
import logging
import os
from typing import Any, TypeVar
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from upcloud.auth import CredentialResolver
from upcloud.context import Context
from upcloud.errors import ConfigurationError, ContextError, DecodeError, raise_for_status
from upcloud.models import Envelope
from upcloud.services import (
    AccountService,
    PlanService,
    PricingService,
    TimezoneService,
    ZoneService,
)
from upcloud.transport import BasicAuthTransport
from upcloud.version import __version__

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.upcloud.com/1.3/"
DEFAULT_USER_AGENT = f"python-upcloud/{__version__}"
BASE_URL_ENV_VAR = "UPCLOUD_BASE_URL"

JSON_MEDIA_TYPE = "application/json"

E = TypeVar("E", bound=Envelope)


def encode_json(body: Any) -> bytes:
    """Serialize a request body to compact JSON.

    Pydantic models are dumped by alias with unset optional fields dropped.
    Non-ASCII text and ``&``, ``<``, ``>`` are written literally. NaN and
    infinite floats have no JSON form and raise ``ValueError``.
    """
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    text = json.dumps(body, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    return (text + "\n").encode("utf-8")


class Client:
    """Client for the UpCloud API.

    Args:
        http_client: The ``httpx.AsyncClient`` used to send requests. Pass
            ``BasicAuthTransport(...).client()`` to authenticate. A plain
            ``httpx.AsyncClient()`` is created when omitted.
        base_url: API root. Must be absolute and end with ``/``.
        user_agent: ``User-Agent`` header value; empty to omit the header.

    Example:
        ```python
        transport = BasicAuthTransport("api-user", "secret")
        async with Client(transport.client()) as client:
            account, response = await client.accounts.get_account_information(Context())
        ```
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        base_url: str | httpx.URL = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._http = http_client if http_client is not None else httpx.AsyncClient()
        self._base_url = httpx.URL(base_url)
        # httpx reports "/" for an empty path, so keep the path as written.
        self._base_path = urlsplit(str(base_url)).path
        self._user_agent = user_agent

        self.accounts = AccountService(self)
        self.pricing = PricingService(self)
        self.zones = ZoneService(self)
        self.plans = PlanService(self)
        self.timezones = TimezoneService(self)

    @classmethod
    def from_env(
        cls,
        *,
        username: str | None = None,
        password: str | None = None,
        resolver: CredentialResolver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> "Client":
        """Build an authenticated client from explicit values or the environment.

        Credentials come from ``UPCLOUD_USERNAME`` / ``UPCLOUD_PASSWORD`` (or a
        .env file) unless given explicitly. ``UPCLOUD_BASE_URL`` overrides the
        API root.
        """
        resolver = resolver or CredentialResolver()
        resolved_username, resolved_password = resolver.resolve_basic_auth(username, password)
        base_url = os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL
        logger.debug(f"Using base URL {base_url}")
        auth_transport = BasicAuthTransport(resolved_username, resolved_password, transport=transport)
        return cls(auth_transport.client(), base_url=base_url, user_agent=user_agent)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    def new_request(self, method: str, path: str, body: Any = None) -> httpx.Request:
        """Build an API request for ``path`` relative to the base URL.

        Args:
            method: HTTP method
            path: Path relative to the base URL, e.g. ``"account/list"``
            body: Optional JSON body (pydantic model or JSON-compatible value)

        Returns:
            The request, ready for ``do``. Nothing is sent.

        Raises:
            ConfigurationError: If the base URL is not absolute with a trailing
                slash, or ``path`` is not a valid URL reference
            ValueError: If ``body`` holds NaN or an infinite float
        """
        if not self._base_url.is_absolute_url or not self._base_path.endswith("/"):
            raise ConfigurationError(f"base_url must be absolute with a trailing slash, but {self._base_url} is not")

        try:
            url = self._base_url.join(path)
        except httpx.InvalidURL as e:
            raise ConfigurationError(f"Invalid request path {path!r}: {e}") from e

        headers = {"Accept": JSON_MEDIA_TYPE}
        content = None
        if body is not None:
            content = encode_json(body)
            headers["Content-Type"] = JSON_MEDIA_TYPE
        if self._user_agent:
            headers["User-Agent"] = self._user_agent

        return httpx.Request(method, url, headers=headers, content=content)

    async def do(
        self,
        ctx: Context | None,
        request: httpx.Request,
        envelope: type[E] | None = None,
    ) -> tuple[httpx.Response, E | None]:
        """Send ``request`` and decode the response.

        Exactly one attempt is made. The response body is read in full and the
        response closed before this returns or raises.

        Args:
            ctx: Context bounding the call. Required.
            request: Request built by ``new_request``
            envelope: Envelope model to decode a 2xx body into

        Returns:
            Tuple of (response, decoded envelope). The envelope is None when no
            model was given or the body was blank.

        Raises:
            ConfigurationError: If ``ctx`` is None
            ContextCancelledError: If ``ctx`` was cancelled before or during the call
            DeadlineExceededError: If ``ctx`` expired before or during the call
            httpx.TransportError: On network failures not caused by ``ctx``
            DecodeError: If the success or error body does not decode
            APIError: For any non-2xx status with an error envelope
        """
        if ctx is None:
            raise ConfigurationError("A request context is required")

        try:
            async with ctx.bind():
                response = await self._http.send(request, stream=True)
                try:
                    await response.aread()
                finally:
                    await response.aclose()
        except ContextError:
            raise
        except Exception as e:
            error = ctx.err()
            if error is not None:
                raise error from e
            raise

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")

        if not response.is_success:
            raise_for_status(response)

        if envelope is None or not response.content.strip():
            return response, None

        try:
            return response, envelope.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise DecodeError(f"Cannot decode {envelope.__name__} from response body: {e}", response=response) from e
