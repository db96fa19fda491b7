"""Auth flow: login, logout, and read-only views of the stored session.

Login is the only place a credential is created. The flow is:

  1. POST the identifier + password to the login endpoint
  2. Decode the flat login payload (not the table envelope)
  3. Issue a credential through the store's expiry policy (local 24h window)
  4. Persist it, then return the payload to the caller

A credential that cannot be persisted fails the whole login: the shell must
never believe it is logged in when the next call will find an empty store.
"""

from __future__ import annotations

import json
import logging

import httpx
import jwt as pyjwt
from poker_credentials.store import CredentialStore
from poker_shared.auth_models import (
    AuthTokenResult,
    CurrentUserResult,
    LoginResult,
    SessionUser,
)
from poker_shared.errors import ClientError, HttpStatusError, StoreError
from poker_shared.models import ClientResult
from pydantic import ValidationError

from poker_backend import endpoints
from poker_backend.config import ClientSettings
from poker_backend.envelope import decode_login
from poker_backend.http_client import build_client, send

logger = logging.getLogger(__name__)


def _rejection_message(error: HttpStatusError) -> str:
    """Pull the backend's own wording out of an error body, if it has any."""
    try:
        body = json.loads(error.body)
    except ValueError:
        return error.body
    if isinstance(body, dict):
        detail = body.get("error") or body.get("message")
        if isinstance(detail, dict):
            detail = detail.get("message")
        if isinstance(detail, str) and detail:
            return detail
    return error.body


async def login(
    backend_url: str,
    identifier: str,
    password: str,
    *,
    store: CredentialStore,
    settings: ClientSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> LoginResult:
    """Authenticate and persist the resulting credential."""
    body = {endpoints.LOGIN_IDENTIFIER_FIELD: identifier, "password": password}
    try:
        async with build_client(backend_url, settings, transport=transport) as client:
            response = await send(client, "POST", endpoints.LOGIN, json=body)
        payload = decode_login(response)
        credential = store.policy.issue(
            payload.tokens.access_token, payload.tokens.refresh_token
        )
        await store.set(credential)
    except HttpStatusError as e:
        message = _rejection_message(e)
        logger.warning(f"Login rejected with HTTP {e.status_code}: {message}")
        return LoginResult(success=False, message=message, error_type=e.error_type)
    except ClientError as e:
        logger.warning(f"Login failed ({e.error_type}): {e.message}")
        return LoginResult.failed(e)

    logger.info(f"Logged in as '{payload.user.username}', credential valid until {credential.expires_at.isoformat()}")
    return LoginResult(
        success=True,
        message=payload.message or "Login successful",
        user=payload.user,
        tokens=payload.tokens,
        expires_at=credential.expires_at,
    )


async def logout(store: CredentialStore) -> ClientResult:
    """Forget the stored credential. Logging out twice is not an error."""
    try:
        await store.delete()
    except StoreError as e:
        logger.warning(f"Logout failed: {e.message}")
        return ClientResult.failed(e)
    logger.info("Logged out")
    return ClientResult(success=True, message="Logged out")


async def get_auth_token(store: CredentialStore) -> AuthTokenResult:
    """Return the usable access token, e.g. for opening the game websocket."""
    try:
        credential = await store.get()
    except StoreError as e:
        return AuthTokenResult.failed(e)
    if credential is None:
        return AuthTokenResult(success=True, message="Not logged in")
    return AuthTokenResult(
        success=True,
        access_token=credential.access_token,
        expires_at=credential.expires_at,
    )


def decode_identity(access_token: str) -> SessionUser | None:
    """Read the user out of the access token's claims.

    The signature is not verified: the client holds no key, and the backend
    verifies every request anyway. Returns None when the token is not a JWT
    or carries no subject.
    """
    try:
        claims = pyjwt.decode(access_token, options={"verify_signature": False})
    except pyjwt.PyJWTError:
        return None

    subject = claims.get("sub") or claims.get("userId")
    if not subject:
        return None
    roles = claims.get("roles") or []
    try:
        return SessionUser(
            id=str(subject),
            username=claims.get("username") or claims.get("preferred_username") or "",
            email=claims.get("email") or "",
            display_name=claims.get("name"),
            player_id=claims.get("playerId"),
            roles=[str(role) for role in roles] if isinstance(roles, list) else [],
        )
    except ValidationError:
        return None


async def get_current_user(store: CredentialStore) -> CurrentUserResult:
    """Describe the current session without contacting the backend."""
    try:
        credential = await store.get()
    except StoreError as e:
        return CurrentUserResult.failed(e)
    if credential is None:
        return CurrentUserResult(success=True, message="Not logged in")

    user = decode_identity(credential.access_token)
    if user is None:
        return CurrentUserResult(
            success=True,
            message="Authenticated, identity unknown",
            authenticated=True,
        )
    return CurrentUserResult(
        success=True,
        authenticated=True,
        identity_known=True,
        user=user,
    )
