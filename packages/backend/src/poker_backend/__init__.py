"""Authenticated backend client for the poker desktop app.

Usage:
    from poker_backend import BackendClient
    from poker_credentials import KeyringCredentialStore

    client = BackendClient(KeyringCredentialStore())
    result = await client.login(url, "player@example.com", "hunter22")
    tables = await client.list_tables(url)
"""

from poker_backend.client import BackendClient
from poker_backend.config import ClientSettings

__version__ = "0.1.0"
__all__ = ["BackendClient", "ClientSettings"]
