"""Authenticated table operations: list, create, join.

Every operation follows the same template:

  1. Read a usable credential from the store (expired ones are evicted there)
  2. If the operation requires one and there is none, fail with
     NotAuthenticatedError before touching the network
  3. Send the request with the bearer header attached
  4. Decode the envelope
  5. Map the decoded data (or the ClientError) onto the operation's result

Listing is the one read allowed without identity: with no credential, or one
the secret store cannot read, it degrades to an unauthenticated request
instead of failing.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from poker_credentials.store import CredentialStore
from poker_shared.errors import (
    ClientError,
    MalformedResponseError,
    NotAuthenticatedError,
    StoreError,
)
from poker_shared.table_models import (
    JoinTableResult,
    Table,
    TableConfig,
    TableListResult,
    TableResult,
)
from pydantic import TypeAdapter, ValidationError

from poker_backend import endpoints
from poker_backend.config import ClientSettings
from poker_backend.envelope import decode_envelope
from poker_backend.http_client import build_client, send

logger = logging.getLogger(__name__)

_TABLE_LIST = TypeAdapter(list[Table])


async def _access_token(store: CredentialStore, required: bool) -> str | None:
    try:
        credential = await store.get()
    except StoreError as e:
        if required:
            raise
        logger.warning(f"Ignoring unreadable credential ({e.message}), continuing unauthenticated")
        return None
    if credential is None:
        if required:
            raise NotAuthenticatedError("Not authenticated: log in first")
        return None
    return credential.access_token


def _parse_tables(data: Any) -> list[Table]:
    """Accept either a bare list or an object with a `tables` list."""
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("tables", [])
    try:
        return _TABLE_LIST.validate_python(data)
    except ValidationError as e:
        raise MalformedResponseError(f"Table list has unexpected shape: {e.error_count()} errors") from e


async def list_tables(
    backend_url: str,
    *,
    store: CredentialStore,
    settings: ClientSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TableListResult:
    """List open tables. Works logged out."""
    try:
        token = await _access_token(store, required=False)
        async with build_client(backend_url, settings, token, transport) as client:
            response = await send(client, "GET", endpoints.TABLES)
        tables = _parse_tables(decode_envelope(response))
    except ClientError as e:
        logger.warning(f"Listing tables failed ({e.error_type}): {e.message}")
        return TableListResult.failed(e)

    return TableListResult(
        success=True,
        message=f"Found {len(tables)} tables",
        tables=tables,
    )


async def create_table(
    backend_url: str,
    config: TableConfig,
    *,
    store: CredentialStore,
    settings: ClientSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TableResult:
    """Create a table from `config`. Requires a usable credential."""
    try:
        token = await _access_token(store, required=True)
        async with build_client(backend_url, settings, token, transport) as client:
            response = await send(
                client, "POST", endpoints.TABLES, json=config.model_dump(by_alias=True)
            )
        data = decode_envelope(response)
        table = Table.model_validate(data) if data is not None else None
    except ValidationError as e:
        error = MalformedResponseError(f"Created table has unexpected shape: {e.error_count()} errors")
        logger.warning(f"Creating table '{config.name}' failed: {error.message}")
        return TableResult.failed(error)
    except ClientError as e:
        logger.warning(f"Creating table '{config.name}' failed ({e.error_type}): {e.message}")
        return TableResult.failed(e)

    if table is None:
        return TableResult(success=True, message="Table created")
    logger.info(f"Created table '{table.name}' ({table.id})")
    return TableResult(success=True, message=f"Created table '{table.name}'", table=table)


async def join_table(
    backend_url: str,
    table_id: str,
    buy_in: float,
    *,
    store: CredentialStore,
    settings: ClientSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> JoinTableResult:
    """Take a seat at `table_id` with `buy_in` chips. Requires a usable credential."""
    try:
        token = await _access_token(store, required=True)
        async with build_client(backend_url, settings, token, transport) as client:
            response = await send(
                client, "POST", endpoints.join_table(table_id), json={"buyIn": buy_in}
            )
        data = decode_envelope(response)
    except ClientError as e:
        logger.warning(f"Joining table {table_id} failed ({e.error_type}): {e.message}")
        return JoinTableResult.failed(e, table_id=table_id)

    logger.info(f"Joined table {table_id} with buy-in {buy_in}")
    return JoinTableResult(
        success=True,
        message=f"Joined table {table_id}",
        table_id=table_id,
        data=data,
    )
