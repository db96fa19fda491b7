"""Expiry policy: how credentials are issued and when they stop being usable.

Credentials get a fixed validity window (24 hours) counted from local
issuance time. Any expiry hint the backend sends is ignored on purpose. The
clock is injectable so issuance and evaluation are deterministic in tests.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from poker_shared.auth_models import Credential

DEFAULT_VALIDITY = timedelta(hours=24)


def utc_now() -> datetime:
    return datetime.now(UTC)


class ExpiryPolicy:
    """Issues credentials and decides whether a stored one is still usable."""

    def __init__(
        self,
        validity: timedelta = DEFAULT_VALIDITY,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.validity = validity
        self._clock = clock

    def now(self) -> datetime:
        return self._clock()

    def issue(self, access_token: str, refresh_token: str) -> Credential:
        """Build a credential expiring exactly `validity` after now."""
        return Credential(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=self.now() + self.validity,
        )

    def is_usable(self, credential: Credential) -> bool:
        return credential.is_usable(self.now())
