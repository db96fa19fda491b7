"""Backend verification script.

Probes a live backend the way the desktop client does: health check, table
listing (logged out), and optionally a login round-trip that stores the
credential in an in-memory store so the real OS keyring is left alone.

Prerequisites:
  - Dependencies installed: `pip install -e .`
  - A reachable backend (defaults to POKER_BACKEND_URL or the production URL)

Usage:
  python scripts/verify_backend.py
  python scripts/verify_backend.py --url http://localhost:8787
  POKER_TEST_EMAIL=... POKER_TEST_PASSWORD=... python scripts/verify_backend.py --login
"""

import argparse
import asyncio
import logging
import os
import sys

from poker_backend import BackendClient, ClientSettings
from poker_credentials import MemoryCredentialStore

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def verify(backend_url: str, with_login: bool) -> bool:
    """Run the checks; return True when every step succeeded."""
    settings = ClientSettings.from_env()
    client = BackendClient(MemoryCredentialStore(), settings)

    status = await client.check_connection(backend_url)
    if not status.connected:
        logger.error(f"Backend {backend_url} is not reachable")
        return False
    logger.info(f"Backend reachable in {status.latency_ms}ms")

    listing = await client.list_tables(backend_url)
    if not listing.success:
        logger.error(f"Listing tables failed ({listing.error_type}): {listing.message}")
        return False
    logger.info(f"Lobby has {len(listing.tables)} tables")

    if not with_login:
        return True

    email = os.environ.get("POKER_TEST_EMAIL", "")
    password = os.environ.get("POKER_TEST_PASSWORD", "")
    if not email or not password:
        logger.error("--login needs POKER_TEST_EMAIL and POKER_TEST_PASSWORD")
        return False

    login = await client.login(backend_url, email, password)
    if not login.success:
        logger.error(f"Login failed ({login.error_type}): {login.message}")
        return False
    user = await client.get_current_user()
    identity = user.user.username if user.user else "identity unknown"
    logger.info(f"Logged in ({identity}), credential valid until {login.expires_at}")

    await client.logout()
    logger.info("VERIFICATION PASSED")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Verify a poker backend from the client side")
    parser.add_argument("--url", default=None, help="Backend URL (default: POKER_BACKEND_URL)")
    parser.add_argument("--login", action="store_true", help="Also verify a login round-trip")
    args = parser.parse_args()

    backend_url = args.url or ClientSettings.from_env().backend_url
    ok = asyncio.run(verify(backend_url, args.login))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
