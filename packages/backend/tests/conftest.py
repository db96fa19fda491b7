"""Shared test fixtures for backend client tests.

Provides:
  - Mock HTTP transport for httpx (records requests, pops canned responses)
  - An in-memory credential store driven by the shared frozen clock
  - A store pre-loaded with a usable credential
"""

from __future__ import annotations

from datetime import timedelta

import httpx
import pytest
from poker_backend.config import ClientSettings
from poker_credentials.policy import ExpiryPolicy
from poker_credentials.store import MemoryCredentialStore
from poker_shared.auth_models import Credential


class MockTransport(httpx.AsyncBaseTransport):
    """Mock HTTP transport that returns preconfigured responses.

    Usage:
        transport = MockTransport(responses=[
            httpx.Response(200, json={"success": True, "data": [...]}),
        ])

    Each call to handle_async_request pops the next item. An exception
    instance is raised instead of returned, to simulate transport failures.
    Responses built with `stream=` are handed over unread.
    If the list is exhausted, returns a 500 error.
    """

    def __init__(self, responses: list[httpx.Response | Exception] | None = None) -> None:
        self.responses = list(responses or [])
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            response = self.responses.pop(0)
            if isinstance(response, Exception):
                raise response
            if response.is_stream_consumed:
                response.stream = httpx.ByteStream(response.content)
            return response
        return httpx.Response(500, json={"error": "No more mock responses"})


@pytest.fixture
def backend_url() -> str:
    return "https://poker.test"


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings()


@pytest.fixture
def store(clock) -> MemoryCredentialStore:
    return MemoryCredentialStore(policy=ExpiryPolicy(clock=clock))


@pytest.fixture
def credential(clock) -> Credential:
    return Credential(
        access_token="access-abc",
        refresh_token="refresh-xyz",
        expires_at=clock.now + timedelta(hours=1),
    )


@pytest.fixture
def logged_in_store(store, credential) -> MemoryCredentialStore:
    store.blob = credential.model_dump_json()
    return store


@pytest.fixture
def expired_store(store, clock) -> MemoryCredentialStore:
    stale = Credential(
        access_token="stale-access",
        refresh_token="stale-refresh",
        expires_at=clock.now - timedelta(seconds=1),
    )
    store.blob = stale.model_dump_json()
    return store


@pytest.fixture
def make_transport():
    """Factory: make_transport(response, ...) -> MockTransport."""

    def _make(*responses: httpx.Response | Exception) -> MockTransport:
        return MockTransport(list(responses))

    return _make


@pytest.fixture
def table_record() -> dict:
    return {
        "id": "tbl-001",
        "name": "High Rollers",
        "playerCount": 3,
        "maxPlayers": 9,
        "gamePhase": "pre_flop",
        "pot": 150,
        "blinds": {"small": 25, "big": 50},
    }
