"""Tests for the HTTP client factory and the single-shot send helper."""

import httpx
import pytest
from poker_backend.config import ClientSettings
from poker_backend.http_client import build_client, build_headers, send
from poker_shared.errors import ClientConstructionError, NetworkError


class TestBuildHeaders:
    def test_fixed_headers(self, settings):
        headers = build_headers(settings)
        assert headers["Accept"] == "application/json"
        assert headers["User-Agent"].startswith("PrimoPoker-Desktop/")
        assert "Authorization" not in headers

    def test_bearer_injection(self, settings):
        headers = build_headers(settings, "tok-123")
        assert headers["Authorization"] == "Bearer tok-123"

    def test_token_with_newline_rejected(self, settings):
        with pytest.raises(ClientConstructionError, match="Authorization"):
            build_headers(settings, "tok\r\nX-Injected: 1")

    def test_non_ascii_user_agent_rejected(self):
        with pytest.raises(ClientConstructionError, match="User-Agent"):
            build_headers(ClientSettings(user_agent="Pokér/1.0"))


class TestBuildClient:
    async def test_timeouts(self, settings, backend_url):
        async with build_client(backend_url, settings) as client:
            assert client.timeout.connect == 10.0
            assert client.timeout.read == 30.0
            assert client.timeout.write == 30.0

    async def test_path_prefix_kept(self, settings, make_transport):
        transport = make_transport(httpx.Response(200))
        async with build_client("https://poker.test/v2/", settings, transport=transport) as client:
            await send(client, "GET", "/api/health")
        assert transport.requests[0].url == "https://poker.test/v2/api/health"

    def test_empty_url_rejected(self, settings):
        with pytest.raises(ClientConstructionError):
            build_client("", settings)

    async def test_custom_timeouts(self, backend_url):
        custom = ClientSettings(request_timeout=5.0, connect_timeout=2.0)
        async with build_client(backend_url, custom) as client:
            assert client.timeout.connect == 2.0
            assert client.timeout.pool == 5.0


class TestSend:
    async def test_returns_response(self, settings, backend_url, make_transport):
        transport = make_transport(httpx.Response(204))
        async with build_client(backend_url, settings, "tok", transport) as client:
            response = await send(client, "GET", "/api/health")
        assert response.status_code == 204
        request = transport.requests[0]
        assert request.url == "https://poker.test/api/health"
        assert request.headers["Authorization"] == "Bearer tok"

    async def test_connect_error_becomes_network_error(self, settings, backend_url, make_transport):
        transport = make_transport(httpx.ConnectError("connection refused"))
        async with build_client(backend_url, settings, transport=transport) as client:
            with pytest.raises(NetworkError, match="connection refused"):
                await send(client, "GET", "/api/tables")

    async def test_timeout_becomes_network_error(self, settings, backend_url, make_transport):
        transport = make_transport(httpx.ReadTimeout(""))
        async with build_client(backend_url, settings, transport=transport) as client:
            with pytest.raises(NetworkError, match="ReadTimeout"):
                await send(client, "GET", "/api/tables")

    async def test_no_retry_on_failure(self, settings, backend_url, make_transport):
        transport = make_transport(httpx.ConnectError("down"), httpx.Response(200))
        async with build_client(backend_url, settings, transport=transport) as client:
            with pytest.raises(NetworkError):
                await send(client, "GET", "/api/tables")
        assert len(transport.requests) == 1

    async def test_undecodable_body_becomes_network_error(self, settings, backend_url, make_transport):
        transport = make_transport(
            httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"not gzip"),
            )
        )
        async with build_client(backend_url, settings, transport=transport) as client:
            with pytest.raises(NetworkError, match="GET /api/tables failed"):
                await send(client, "GET", "/api/tables")

    async def test_redirect_loop_becomes_network_error(self, settings, backend_url, make_transport):
        loop = [
            httpx.Response(302, headers={"Location": "/api/tables"})
            for _ in range(25)
        ]
        transport = make_transport(*loop)
        async with build_client(backend_url, settings, transport=transport) as client:
            with pytest.raises(NetworkError):
                await send(client, "GET", "/api/tables", follow_redirects=True)
