"""Tests for the Basic authentication transport."""

import asyncio
import base64

import httpx
import pytest

from upcloud.auth import CredentialNotFoundError, CredentialResolver
from upcloud.transport import BasicAuthTransport, basic_auth_header


def _expected(username: str, password: str) -> str:
    return "Basic " + base64.b64encode(f"{username}:{password}".encode()).decode()


class TestBasicAuthTransport:
    """Test BasicAuthTransport request handling."""

    @pytest.mark.unit
    async def test_adds_authorization_header(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        transport = BasicAuthTransport("alice", "s3cret", transport=httpx.MockTransport(handler))

        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get("https://api.upcloud.com/1.3/account")

        assert response.status_code == 200
        assert seen[0].headers["Authorization"] == _expected("alice", "s3cret")

    @pytest.mark.unit
    async def test_does_not_mutate_caller_request(self):
        """The request handed in keeps its original headers."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        transport = BasicAuthTransport("alice", "s3cret", transport=httpx.MockTransport(handler))
        request = httpx.Request(
            "PUT",
            "https://api.upcloud.com/1.3/account/details/alice",
            headers={"Accept": "application/json", "X-Trace": "abc"},
            content=b'{"account":{}}',
        )
        before = list(request.headers.multi_items())

        await transport.handle_async_request(request)

        assert list(request.headers.multi_items()) == before
        assert "Authorization" not in request.headers
        sent = seen[0]
        assert sent is not request
        assert sent.headers is not request.headers
        assert sent.method == "PUT"
        assert sent.url == request.url
        assert sent.headers["X-Trace"] == "abc"
        assert sent.content == b'{"account":{}}'

    @pytest.mark.unit
    async def test_concurrent_calls_share_a_template_request(self):
        """Two transports sending the same request object do not see each other's credentials."""
        seen: dict[str, list[str]] = {"first": [], "second": []}

        def recorder(name: str):
            async def handler(request: httpx.Request) -> httpx.Response:
                await asyncio.sleep(0)
                seen[name].append(request.headers["Authorization"])
                return httpx.Response(204)

            return handler

        first = BasicAuthTransport("first", "one", transport=httpx.MockTransport(recorder("first")))
        second = BasicAuthTransport("second", "two", transport=httpx.MockTransport(recorder("second")))
        template = httpx.Request("GET", "https://api.upcloud.com/1.3/zone", headers={"Accept": "application/json"})

        await asyncio.gather(
            *(first.handle_async_request(template) for _ in range(5)),
            *(second.handle_async_request(template) for _ in range(5)),
        )

        assert seen["first"] == [_expected("first", "one")] * 5
        assert seen["second"] == [_expected("second", "two")] * 5
        assert "Authorization" not in template.headers

    @pytest.mark.unit
    async def test_replaces_existing_authorization_on_the_copy_only(self):
        seen: list[httpx.Request] = []
        transport = BasicAuthTransport(
            "alice",
            "pw",
            transport=httpx.MockTransport(lambda request: seen.append(request) or httpx.Response(200)),
        )
        request = httpx.Request("GET", "https://api.upcloud.com/1.3/zone", headers={"Authorization": "Bearer old"})

        await transport.handle_async_request(request)

        assert request.headers["Authorization"] == "Bearer old"
        assert seen[0].headers.get_list("Authorization") == [_expected("alice", "pw")]

    @pytest.mark.unit
    def test_falls_back_to_default_transport(self):
        transport = BasicAuthTransport("alice", "pw")

        assert transport.transport is None
        assert isinstance(transport._wrapped(), httpx.AsyncHTTPTransport)

    @pytest.mark.unit
    def test_wrapped_transport_is_used_when_given(self):
        inner = httpx.MockTransport(lambda request: httpx.Response(200))
        transport = BasicAuthTransport("alice", "pw", transport=inner)

        assert transport._wrapped() is inner

    @pytest.mark.unit
    def test_client_routes_through_transport(self):
        transport = BasicAuthTransport("alice", "pw")
        client = transport.client()

        assert isinstance(client, httpx.AsyncClient)
        assert client._transport is transport

    @pytest.mark.unit
    def test_repr_hides_password(self):
        transport = BasicAuthTransport("alice", "hunter2")

        assert "hunter2" not in repr(transport)
        assert "alice" in repr(transport)

    @pytest.mark.unit
    async def test_aclose_delegates(self):
        closed = []

        class ClosingTransport(httpx.MockTransport):
            async def aclose(self) -> None:
                closed.append(True)

        transport = BasicAuthTransport("a", "b", transport=ClosingTransport(lambda request: httpx.Response(200)))
        await transport.aclose()

        assert closed == [True]


class TestFromEnv:
    """Test BasicAuthTransport.from_env."""

    @pytest.mark.unit
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("UPCLOUD_USERNAME", "env-user")
        monkeypatch.setenv("UPCLOUD_PASSWORD", "env-pass")

        transport = BasicAuthTransport.from_env(CredentialResolver(load_dotenv=False))

        assert transport.username == "env-user"
        assert transport._password == "env-pass"

    @pytest.mark.unit
    def test_missing_credentials_raise(self):
        with pytest.raises(CredentialNotFoundError):
            BasicAuthTransport.from_env(CredentialResolver(load_dotenv=False))


@pytest.mark.unit
def test_basic_auth_header():
    assert basic_auth_header("Aladdin", "open sesame") == "Basic QWxhZGRpbjpvcGVuIHNlc2FtZQ=="
