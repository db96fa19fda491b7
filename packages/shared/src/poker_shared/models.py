"""Pydantic base models shared across components.

Every public client operation returns a ClientResult (or a subclass) so the
desktop shell has one interface for checking success/failure without catching
exceptions for expected failures such as a rejected login or a dropped network.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from poker_shared.errors import ClientError


class ClientResult(BaseModel):
    """Standard result returned by client operations.

    On failure, `error_type` names the failure class (see poker_shared.errors)
    and `message` carries the human-readable text for the shell to present.
    """

    success: bool
    message: str = ""
    error_type: str | None = None

    @classmethod
    def failed(cls, error: ClientError, **fields: Any) -> Self:
        """Build a failed result of this type from a ClientError."""
        return cls(success=False, message=error.message, error_type=error.error_type, **fields)


class WireModel(BaseModel):
    """Base for models that cross the HTTP boundary.

    The backend speaks camelCase; Python code uses snake_case. Either name is
    accepted on input, and request bodies are dumped with `by_alias=True`.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ConnectionStatus(BaseModel):
    """Returned by the connectivity probe.

    Deliberately not a ClientResult: an unreachable backend is a normal,
    renderable state, not a failure.
    """

    connected: bool
    backend_url: str
    latency_ms: float | None = None
