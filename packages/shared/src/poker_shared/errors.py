"""Client error taxonomy.

Lower layers (credential store, HTTP client factory, envelope decoder) raise
these. Public operations catch ClientError at their boundary and turn it into
a failed ClientResult carrying `error_type` and the message.
"""

from __future__ import annotations


class ClientError(Exception):
    """Base for every failure the client reports as a typed result."""

    error_type = "client"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkError(ClientError):
    """Transport failure: DNS, refused connection, TLS, or timeout."""

    error_type = "network"


class ClientConstructionError(ClientError):
    """The HTTP client could not be built (bad header value, bad base URL)."""

    error_type = "client_construction"


class HttpStatusError(ClientError):
    """The backend answered with a non-success status code."""

    error_type = "http_status"

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(body)
        self.status_code = status_code
        self.body = body


class EnvelopeError(ClientError):
    """The response body could not be turned into a usable result."""

    error_type = "envelope"


class MalformedResponseError(EnvelopeError):
    """Body is not valid JSON, or not the shape the endpoint promises."""

    error_type = "malformed_response"


class BackendRejectedError(EnvelopeError):
    """The backend returned a well-formed envelope with success=false."""

    error_type = "backend_rejected"


class StoreError(ClientError):
    """The OS secret store failed a get/set/delete."""

    error_type = "store"


class NotAuthenticatedError(ClientError):
    """The operation needs a usable credential and none is stored."""

    error_type = "not_authenticated"

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)
