"""Client settings, resolved from POKER_* environment variables.

The backend URL here is only a default for hosts that want one; every
operation still takes the backend URL explicitly per call.
"""

from __future__ import annotations

import os

from poker_credentials.keys import DEFAULT_ACCOUNT, DEFAULT_SERVICE
from pydantic import BaseModel

CLIENT_VERSION = "0.1.0"
DEFAULT_BACKEND_URL = "https://primo-poker-server.alabamamike.workers.dev"


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from e


class ClientSettings(BaseModel):
    """HTTP and secret-store settings shared by every operation."""

    backend_url: str = DEFAULT_BACKEND_URL
    keyring_service: str = DEFAULT_SERVICE
    keyring_account: str = DEFAULT_ACCOUNT
    request_timeout: float = 30.0
    connect_timeout: float = 10.0
    user_agent: str = f"PrimoPoker-Desktop/{CLIENT_VERSION}"

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Build settings from the environment, falling back to defaults."""
        env = os.environ
        defaults = cls()
        return cls(
            backend_url=env.get("POKER_BACKEND_URL", defaults.backend_url),
            keyring_service=env.get("POKER_KEYRING_SERVICE", defaults.keyring_service),
            keyring_account=env.get("POKER_KEYRING_ACCOUNT", defaults.keyring_account),
            request_timeout=_env_float("POKER_REQUEST_TIMEOUT", defaults.request_timeout),
            connect_timeout=_env_float("POKER_CONNECT_TIMEOUT", defaults.connect_timeout),
            user_agent=env.get("POKER_USER_AGENT", defaults.user_agent),
        )
