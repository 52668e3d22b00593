"""
MonoClient - entry point wiring settings, transport and resource clients.
"""

from typing import Optional

from mono_sdk.application.services import StatementService
from mono_sdk.core.config import Settings, get_settings
from mono_sdk.domain.interfaces import ApiClient
from mono_sdk.infrastructure.clients import AccountsClient, HttpApiClient


class MonoClient:
    """
    Facade over the Mono API.

    Usage:
        client = MonoClient("live_sk_...")
        response = await client.accounts.get_information(account_id)
        if response.ok:
            print(response.data.account.balance)
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        *,
        settings: Optional[Settings] = None,
        api_client: Optional[ApiClient] = None,
    ):
        settings = settings or get_settings()
        if secret_key is not None:
            settings = settings.model_copy(update={"secret_key": secret_key})

        self.settings = settings
        self.api_client = api_client or HttpApiClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
        )
        self.accounts = AccountsClient(self.api_client, settings)
        self.statements = StatementService(self.accounts, settings)
