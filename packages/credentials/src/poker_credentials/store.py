"""Credential Store: one credential slot in the OS secret store.

The ABC owns the behavior every backend shares:

  - JSON serialization of the Credential
  - expiry evaluation on every read, with lazy eviction of stale entries
  - idempotent delete

Subclasses only implement raw read/write/erase of the serialized blob. The
keyring-backed store talks to macOS Keychain, Windows Credential Locker or the
Secret Service on Linux; the in-memory store has the same contract for tests
and for hosts without a secret service.

Nothing is cached between calls. Every get/set/delete round-trips the
backend, so two operations never race on an in-process copy.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod

import keyring
from keyring.errors import KeyringError, PasswordDeleteError
from pydantic import ValidationError
from poker_shared.auth_models import Credential
from poker_shared.errors import StoreError

from poker_credentials.keys import DEFAULT_ACCOUNT, DEFAULT_SERVICE, slot_label
from poker_credentials.policy import ExpiryPolicy

logger = logging.getLogger(__name__)


class CredentialStore(ABC):
    """Abstract single-slot credential store addressed by (service, account)."""

    def __init__(
        self,
        service: str = DEFAULT_SERVICE,
        account: str = DEFAULT_ACCOUNT,
        policy: ExpiryPolicy | None = None,
    ) -> None:
        self.service = service
        self.account = account
        self.policy = policy or ExpiryPolicy()

    @property
    def label(self) -> str:
        return slot_label(self.service, self.account)

    @abstractmethod
    def _read(self) -> str | None:
        """Return the stored blob, or None when the slot is empty."""

    @abstractmethod
    def _write(self, blob: str) -> None:
        """Replace the slot contents with `blob`."""

    @abstractmethod
    def _erase(self) -> None:
        """Empty the slot. Must not fail when it is already empty."""

    async def get(self) -> Credential | None:
        """Return the stored credential if it is still usable.

        An expired or unreadable entry is deleted and None is returned, so
        callers never see a stale credential.
        """
        blob = await asyncio.to_thread(self._read)
        if blob is None:
            return None

        try:
            credential = Credential.model_validate_json(blob)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable credential in {self.label}: {e.error_count()} errors")
            await self.delete()
            return None

        if not self.policy.is_usable(credential):
            logger.debug(f"Credential in {self.label} expired at {credential.expires_at.isoformat()}, evicting")
            await self.delete()
            return None

        return credential

    async def set(self, credential: Credential) -> None:
        """Replace the stored credential. Raises StoreError on failure."""
        await asyncio.to_thread(self._write, credential.model_dump_json())

    async def delete(self) -> None:
        """Remove the stored credential. Succeeds when nothing is stored."""
        await asyncio.to_thread(self._erase)


class KeyringCredentialStore(CredentialStore):
    """Credential store backed by the platform secret facility via `keyring`."""

    def _read(self) -> str | None:
        try:
            return keyring.get_password(self.service, self.account)
        except KeyringError as e:
            raise StoreError(f"Failed to read credential from {self.label}: {e}") from e

    def _write(self, blob: str) -> None:
        try:
            keyring.set_password(self.service, self.account, blob)
        except KeyringError as e:
            raise StoreError(f"Failed to store credential in {self.label}: {e}") from e

    def _erase(self) -> None:
        try:
            keyring.delete_password(self.service, self.account)
        except PasswordDeleteError as e:
            # Backends raise this for a missing entry; only a surviving entry is a failure.
            if self._read() is None:
                return
            raise StoreError(f"Failed to delete credential from {self.label}: {e}") from e
        except KeyringError as e:
            raise StoreError(f"Failed to delete credential from {self.label}: {e}") from e


class MemoryCredentialStore(CredentialStore):
    """In-process credential store with the same contract as the keyring store."""

    def __init__(
        self,
        service: str = DEFAULT_SERVICE,
        account: str = DEFAULT_ACCOUNT,
        policy: ExpiryPolicy | None = None,
    ) -> None:
        super().__init__(service, account, policy)
        self.blob: str | None = None

    def _read(self) -> str | None:
        return self.blob

    def _write(self, blob: str) -> None:
        self.blob = blob

    def _erase(self) -> None:
        self.blob = None
