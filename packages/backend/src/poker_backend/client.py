"""BackendClient: the operations the desktop shell calls, bound to one store.

The store is injected, never global, so the shell decides where credentials
live (OS keyring in the app, in-memory in tests) and which (service, account)
slot they use. Each method is a thin binding over the module-level operation.
"""

from __future__ import annotations

import httpx
from poker_credentials.store import CredentialStore, KeyringCredentialStore
from poker_shared.auth_models import AuthTokenResult, CurrentUserResult, LoginResult
from poker_shared.models import ClientResult, ConnectionStatus
from poker_shared.table_models import (
    JoinTableResult,
    TableConfig,
    TableListResult,
    TableResult,
)

from poker_backend import auth, connectivity, tables
from poker_backend.config import ClientSettings


class BackendClient:
    """Authenticated client for the poker backend.

    Args:
        store: Where the credential lives.
        settings: Headers, timeouts and defaults. Defaults to ClientSettings().
        transport: Optional httpx transport; replaces the network in tests.
    """

    def __init__(
        self,
        store: CredentialStore,
        settings: ClientSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.store = store
        self.settings = settings or ClientSettings()
        self._transport = transport

    @classmethod
    def from_env(cls) -> BackendClient:
        """Keyring-backed client configured from POKER_* environment variables."""
        settings = ClientSettings.from_env()
        store = KeyringCredentialStore(settings.keyring_service, settings.keyring_account)
        return cls(store, settings)

    async def login(self, backend_url: str, identifier: str, password: str) -> LoginResult:
        return await auth.login(
            backend_url,
            identifier,
            password,
            store=self.store,
            settings=self.settings,
            transport=self._transport,
        )

    async def logout(self) -> ClientResult:
        return await auth.logout(self.store)

    async def get_auth_token(self) -> AuthTokenResult:
        return await auth.get_auth_token(self.store)

    async def get_current_user(self) -> CurrentUserResult:
        return await auth.get_current_user(self.store)

    async def list_tables(self, backend_url: str) -> TableListResult:
        return await tables.list_tables(
            backend_url, store=self.store, settings=self.settings, transport=self._transport
        )

    async def create_table(self, backend_url: str, config: TableConfig) -> TableResult:
        return await tables.create_table(
            backend_url, config, store=self.store, settings=self.settings, transport=self._transport
        )

    async def join_table(self, backend_url: str, table_id: str, buy_in: float) -> JoinTableResult:
        return await tables.join_table(
            backend_url,
            table_id,
            buy_in,
            store=self.store,
            settings=self.settings,
            transport=self._transport,
        )

    async def check_connection(self, backend_url: str) -> ConnectionStatus:
        return await connectivity.check_connection(
            backend_url, settings=self.settings, transport=self._transport
        )
