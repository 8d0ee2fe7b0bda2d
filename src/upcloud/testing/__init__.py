"""Testing utilities for code built on the UpCloud client.

Example:
    ```python
    from upcloud import Context
    from upcloud.testing import RecordingHandler, json_response, mock_client


    async def test_lists_zones():
        handler = RecordingHandler(json_response(200, {"zones": {"zone": [{"id": "fi-hel1"}]}}))
        client = mock_client(handler)

        zones, _ = await client.zones.list_available_zones(Context())

        assert zones.zones[0].id == "fi-hel1"
        assert handler.requests[0].url.path == "/1.3/zone"
    ```
"""

import json
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from upcloud.client import DEFAULT_BASE_URL, Client

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


def json_response(status_code: int, payload: Any = None, **kwargs: Any) -> httpx.Response:
    """Build a canned response with an optional JSON body."""
    if payload is None:
        return httpx.Response(status_code, **kwargs)
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode(),
        headers={"Content-Type": "application/json"},
        **kwargs,
    )


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses.

    Responses are returned in order; the last one repeats once the list runs
    out. An exception instance in the list is raised instead of returned.
    """

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self._responses = list(responses) or [httpx.Response(200)]
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        response = self._responses[index]
        if isinstance(response, Exception):
            raise response
        # httpx binds a response to one request, so hand out a fresh copy.
        return httpx.Response(
            response.status_code,
            headers=response.headers,
            content=response.content,
        )


def mock_client(
    handler: Handler,
    *,
    base_url: str = DEFAULT_BASE_URL,
    **kwargs: Any,
) -> Client:
    """Create a Client whose requests are answered by ``handler``."""
    return Client(httpx.AsyncClient(transport=httpx.MockTransport(handler)), base_url=base_url, **kwargs)


__all__ = ["Handler", "RecordingHandler", "json_response", "mock_client"]
