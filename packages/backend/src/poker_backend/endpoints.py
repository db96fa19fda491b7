"""Backend paths, relative to the caller-supplied backend URL."""

from urllib.parse import quote

HEALTH = "/api/health"
LOGIN = "/api/auth/login"
TABLES = "/api/tables"

# The login endpoint names the identifier field "email".
LOGIN_IDENTIFIER_FIELD = "email"


def join_table(table_id: str) -> str:
    return f"{TABLES}/{quote(table_id, safe='')}/join"
