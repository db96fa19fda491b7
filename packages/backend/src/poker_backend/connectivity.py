"""Connectivity probe: is the backend reachable, and how fast?

Independent of auth. A plain GET to the health endpoint, timed with a
monotonic clock. Any failure to reach the backend, including an unusable
URL, degrades to connected=False with no latency instead of an error, so the
shell can render a disconnected state without special cases.
"""

from __future__ import annotations

import logging
import time

import httpx
from poker_shared.errors import ClientError
from poker_shared.models import ConnectionStatus

from poker_backend import endpoints
from poker_backend.config import ClientSettings
from poker_backend.http_client import build_client, send

logger = logging.getLogger(__name__)


async def check_connection(
    backend_url: str,
    *,
    settings: ClientSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ConnectionStatus:
    """Probe the health endpoint. Never raises for an unreachable backend."""
    try:
        async with build_client(backend_url, settings, transport=transport) as client:
            start = time.monotonic()
            response = await send(client, "GET", endpoints.HEALTH)
            latency_ms = (time.monotonic() - start) * 1000
    except ClientError as e:
        logger.debug(f"Backend {backend_url} unreachable: {e.message}")
        return ConnectionStatus(connected=False, backend_url=backend_url)

    connected = response.is_success
    logger.debug(f"Health check {backend_url}: HTTP {response.status_code} in {latency_ms:.1f}ms")
    return ConnectionStatus(
        connected=connected,
        backend_url=backend_url,
        latency_ms=round(latency_ms, 2),
    )
