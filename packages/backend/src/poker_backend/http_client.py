"""HTTP client factory.

Every operation builds its client here so headers and timeouts are identical
across calls: fixed User-Agent and Accept, a 30s overall timeout with a
shorter 10s connect timeout, and the bearer header when a token is supplied.

Tests pass a transport to replace the network entirely.
"""

from __future__ import annotations

import httpx
from poker_shared.errors import ClientConstructionError, NetworkError

from poker_backend.config import ClientSettings


def _check_header_value(name: str, value: str) -> None:
    """Reject values httpx would only refuse at send time (or never)."""
    if not value.isascii() or not value.isprintable():
        raise ClientConstructionError(f"Invalid value for header '{name}'")


def build_headers(settings: ClientSettings, access_token: str | None = None) -> dict[str, str]:
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if access_token is not None:
        headers["Authorization"] = f"Bearer {access_token}"
    for name, value in headers.items():
        _check_header_value(name, value)
    return headers


def build_client(
    backend_url: str,
    settings: ClientSettings,
    access_token: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create a configured AsyncClient for one operation.

    Raises:
        ClientConstructionError: bad header value or unusable backend URL.
    """
    headers = build_headers(settings, access_token)
    base_url = backend_url.rstrip("/")
    if not base_url:
        raise ClientConstructionError("Backend URL is empty")
    try:
        return httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(settings.request_timeout, connect=settings.connect_timeout),
            transport=transport,
        )
    except (httpx.InvalidURL, ValueError, TypeError) as e:
        raise ClientConstructionError(f"Cannot build HTTP client for '{backend_url}': {e}") from e


async def send(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    **kwargs: object,
) -> httpx.Response:
    """Issue one request. Any httpx request failure becomes NetworkError.

    That covers transport failures and timeouts, but also bodies that fail to
    decode and redirect loops. No retries: a failure is reported once,
    immediately.
    """
    try:
        return await client.request(method, url, **kwargs)  # type: ignore[arg-type]
    except httpx.RequestError as e:
        reason = str(e) or type(e).__name__
        raise NetworkError(f"{method} {url} failed: {reason}") from e
