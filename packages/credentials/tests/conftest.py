"""Test fixtures for the credential store: stores bound to the shared frozen clock."""

from __future__ import annotations

import pytest
from poker_credentials.policy import ExpiryPolicy
from poker_credentials.store import KeyringCredentialStore, MemoryCredentialStore


@pytest.fixture
def policy(clock) -> ExpiryPolicy:
    return ExpiryPolicy(clock=clock)


@pytest.fixture
def memory_store(policy) -> MemoryCredentialStore:
    return MemoryCredentialStore(policy=policy)


@pytest.fixture
def keyring_store(policy) -> KeyringCredentialStore:
    return KeyringCredentialStore("primo-poker-test", "auth-token", policy=policy)
