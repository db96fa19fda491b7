"""Response decoding: the {success, data, error} envelope and the flat login payload.

Two decode paths on purpose. Table endpoints wrap their data in an envelope;
the login endpoint returns a flat payload. Forcing both through one generic
decoder would hide contract drift between them.

Failure classes, in the order they are checked:
  1. Non-2xx status  -> HttpStatusError with the raw body (envelope bypassed)
  2. Body not JSON   -> MalformedResponseError
  3. Wrong shape     -> MalformedResponseError
  4. success=false   -> BackendRejectedError with error.message or a fallback
"""

from __future__ import annotations

from typing import Any

import httpx
from poker_shared.auth_models import LoginPayload
from poker_shared.errors import BackendRejectedError, HttpStatusError, MalformedResponseError
from pydantic import BaseModel, ValidationError, field_validator

UNKNOWN_ERROR = "Unknown error"
GENERIC_FAILURE = "Request failed"


class EnvelopeErrorBody(BaseModel):
    message: str | None = None


class Envelope(BaseModel):
    """The table endpoints' wire shape. Only one of data/error is meaningful."""

    success: bool
    data: Any = None
    error: EnvelopeErrorBody | None = None

    @field_validator("error", mode="before")
    @classmethod
    def _accept_bare_string(cls, value: Any) -> Any:
        # Some handlers send `"error": "text"` instead of `{"message": "text"}`.
        if isinstance(value, str):
            return {"message": value}
        return value


def raise_for_status(response: httpx.Response) -> None:
    """Raise HttpStatusError carrying the body text for any non-2xx response."""
    if response.is_success:
        return
    try:
        body = response.text
    except (httpx.ResponseNotRead, UnicodeDecodeError):
        body = ""
    raise HttpStatusError(response.status_code, body or UNKNOWN_ERROR)


def parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(f"Response is not valid JSON: {e}") from e


def unwrap(payload: Any) -> Any:
    """Validate an already-parsed envelope and return its data."""
    try:
        envelope = Envelope.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(f"Response is not a valid envelope: {e.error_count()} errors") from e

    if envelope.success:
        return envelope.data

    message = envelope.error.message if envelope.error and envelope.error.message else None
    raise BackendRejectedError(message or GENERIC_FAILURE)


def decode_envelope(response: httpx.Response) -> Any:
    """Decode an enveloped response into its data (None when data is absent)."""
    raise_for_status(response)
    return unwrap(parse_json(response))


def decode_login(response: httpx.Response) -> LoginPayload:
    """Decode the flat login payload.

    A body that arrives wrapped in an envelope is unwrapped here, explicitly,
    rather than by sending login through decode_envelope.
    """
    raise_for_status(response)
    payload = parse_json(response)
    if isinstance(payload, dict) and "success" in payload and "user" not in payload:
        payload = unwrap(payload)
    try:
        return LoginPayload.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Login response is missing user or tokens: {e.error_count()} errors"
        ) from e
