"""Auth models: the stored credential, the login wire payload, session users.

Credential is the only persisted type. It is serialized with plain snake_case
field names into the OS secret store; nothing else about the session is kept
on disk. The login payload and SessionUser cross the HTTP boundary and use
camelCase aliases via WireModel.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import AliasChoices, BaseModel, Field, field_validator

from poker_shared.models import ClientResult, WireModel

# ============================================================================
# Persisted credential
# ============================================================================


class Credential(BaseModel):
    """Access + refresh token pair with a locally computed expiry.

    The refresh token is stored but never exchanged: there is no refresh flow,
    so once `expires_at` passes the only recovery is a fresh login.
    """

    access_token: str
    refresh_token: str
    expires_at: datetime

    @field_validator("expires_at")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def is_usable(self, now: datetime) -> bool:
        """Usable iff the expiry is strictly after `now`."""
        return self.expires_at > now

    def expires_in_seconds(self, now: datetime) -> int:
        return max(0, int((self.expires_at - now).total_seconds()))


# ============================================================================
# Wire models
# ============================================================================


class AuthTokens(WireModel):
    """Token block of the login response.

    `expires_at` is whatever hint the backend sent (if any). It is kept for
    display only; local expiry is always issuance + the policy window.
    """

    access_token: str
    refresh_token: str
    expires_at: str | None = None


class SessionUser(WireModel):
    """The logged-in user as reported by the backend or decoded from claims."""

    id: str
    username: str
    email: str = ""
    display_name: str | None = Field(
        default=None, validation_alias=AliasChoices("displayName", "display_name", "name")
    )
    player_id: str | None = None
    roles: list[str] = []


class LoginPayload(WireModel):
    """Flat body returned by POST /api/auth/login."""

    user: SessionUser
    tokens: AuthTokens
    message: str = ""


# ============================================================================
# Operation results
# ============================================================================


class LoginResult(ClientResult):
    """Result of login. `expires_at` is the local credential expiry."""

    user: SessionUser | None = None
    tokens: AuthTokens | None = None
    expires_at: datetime | None = None


class AuthTokenResult(ClientResult):
    """Result of get_auth_token: the usable access token, or None when logged out."""

    access_token: str | None = None
    expires_at: datetime | None = None


class CurrentUserResult(ClientResult):
    """Result of get_current_user.

    `authenticated` says whether a usable credential exists. `identity_known`
    says whether its claims could be decoded into a SessionUser. An
    authenticated session with unknown identity carries `user=None`, never a
    placeholder record.
    """

    authenticated: bool = False
    identity_known: bool = False
    user: SessionUser | None = None
