"""Shared plumbing for resource services."""

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

import httpx

from upcloud.context import Context
from upcloud.models import Envelope, Resource

if TYPE_CHECKING:
    from upcloud.client import Client

R = TypeVar("R", bound=Resource)


def path_segment(value: str) -> str:
    """Percent-encode ``value`` for use as a single URL path segment."""
    return quote(value, safe="")


class Service:
    """Base class for resource services.

    A service holds a reference to the client that created it and routes every
    call through ``Client.new_request`` and ``Client.do``.
    """

    def __init__(self, client: "Client") -> None:
        self._client = client

    async def _get(
        self,
        ctx: Context | None,
        path: str,
        envelope: type[Envelope],
        payload: type[R],
    ) -> tuple[R, httpx.Response]:
        request = self._client.new_request("GET", path)
        response, decoded = await self._client.do(ctx, request, envelope)
        if decoded is None:
            return payload(), response
        return decoded.unwrap(), response

    async def _send(
        self,
        ctx: Context | None,
        method: str,
        path: str,
        body: Any = None,
    ) -> httpx.Response:
        request = self._client.new_request(method, path, body)
        response, _ = await self._client.do(ctx, request)
        return response
