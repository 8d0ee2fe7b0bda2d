"""HTTP Basic authentication as a transport layer.

UpCloud authenticates every API call with HTTP Basic auth. Rather than
setting the header on each request, ``BasicAuthTransport`` wraps another
httpx transport and adds the header on the way out:

```python
from upcloud import Client
from upcloud.transport import BasicAuthTransport

transport = BasicAuthTransport("api-user", "secret")
client = Client(transport.client())
```

The caller's request is never modified. The transport sends a copy with its
own header collection, so one request object can be handed to several
concurrent calls without credentials leaking between them.
"""

import base64
import logging

import httpx

from upcloud.auth import CredentialResolver

logger = logging.getLogger(__name__)


def basic_auth_header(username: str, password: str) -> str:
    """Build the ``Authorization`` header value for a username/password pair."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


class BasicAuthTransport(httpx.AsyncBaseTransport):
    """Transport that authenticates all requests with HTTP Basic auth.

    Args:
        username: UpCloud API username
        password: UpCloud API password
        transport: The underlying transport to wrap. A default
            ``httpx.AsyncHTTPTransport`` is used when omitted.
    """

    def __init__(
        self,
        username: str,
        password: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.username = username
        self._password = password
        self.transport = transport
        self._default_transport: httpx.AsyncBaseTransport | None = None
        if transport is None:
            self._default_transport = httpx.AsyncHTTPTransport()

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "BasicAuthTransport":
        """Create a transport from ``UPCLOUD_USERNAME`` and ``UPCLOUD_PASSWORD``."""
        resolver = resolver or CredentialResolver()
        username, password = resolver.resolve_basic_auth()
        return cls(username, password, transport=transport)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(username={self.username!r}, password='***')"

    def _wrapped(self) -> httpx.AsyncBaseTransport:
        if self.transport is not None:
            return self.transport
        return self._default_transport

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped().__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped().__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._wrapped().aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Send an authenticated copy of ``request`` through the wrapped transport.

        Args:
            request: The HTTP request to send. It is left untouched.

        Returns:
            The wrapped transport's response
        """
        authed = httpx.Request(
            method=request.method,
            url=request.url,
            headers=request.headers.copy(),
            stream=request.stream,
            extensions=dict(request.extensions),
        )
        authed.headers["Authorization"] = basic_auth_header(self.username, self._password)

        logger.debug(f"Authenticating {request.method} {request.url} as {self.username}")
        return await self._wrapped().handle_async_request(authed)

    def client(self, **kwargs) -> httpx.AsyncClient:
        """Return an ``httpx.AsyncClient`` whose requests go through this transport."""
        return httpx.AsyncClient(transport=self, **kwargs)
