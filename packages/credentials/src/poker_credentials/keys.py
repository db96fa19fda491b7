"""Secret-store addressing for the stored credential.

The client keeps exactly one credential, addressed by a fixed
(service, account) pair for the whole application. There is no per-user
namespacing: logging in as someone else replaces the slot.
"""

DEFAULT_SERVICE = "primo-poker"
DEFAULT_ACCOUNT = "auth-token"


def slot_label(service: str, account: str) -> str:
    """Human-readable name of a slot for log lines and error messages."""
    return f"{service}/{account}"
