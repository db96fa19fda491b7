"""Credential Store and Expiry Policy for the poker desktop client."""

from poker_credentials.policy import ExpiryPolicy
from poker_credentials.store import (
    CredentialStore,
    KeyringCredentialStore,
    MemoryCredentialStore,
)

__all__ = [
    "CredentialStore",
    "ExpiryPolicy",
    "KeyringCredentialStore",
    "MemoryCredentialStore",
]
