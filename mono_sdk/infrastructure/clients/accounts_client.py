"""Accounts resource client: validation, path building and response wrapping."""

from typing import Callable, Optional, Type
from urllib.parse import quote

import structlog

from mono_sdk.core.config import Settings
from mono_sdk.core.metrics import record_validation_failure
from mono_sdk.domain.entities import (
    ApiResponse,
    IdentityResponse,
    IncomeResponse,
    InformationResponse,
    OutputType,
    StatementPdfResponse,
    StatementRequest,
    StatementResponse,
    TransactionQuery,
    TransactionsResponse,
)
from mono_sdk.domain.exceptions import (
    ConstructionException,
    InvalidArgumentException,
    TransportException,
)
from mono_sdk.domain.interfaces import AccountsAPIClient, ApiClient
from mono_sdk.domain.interfaces.clients import ModelT

from .auth import SecretKeyAuthHeader

logger = structlog.get_logger(__name__)


def _require_id(field: str, value: Optional[str]) -> str:
    """
    Reject missing, non-string or whitespace-only identifiers.

    Returns the id percent-encoded so it fills exactly one path segment.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentException(
            field,
            f"{field} is required and must be a non-blank string",
        )
    return quote(value, safe="")


class AccountsClient(AccountsAPIClient):
    """
    Client for Mono account resources.

    Holds only its transport and auth header provider, so a single
    instance can serve any number of concurrent calls.
    """

    def __init__(self, api_client: ApiClient, config: Settings):
        if api_client is None:
            raise ConstructionException("api_client")
        if config is None:
            raise ConstructionException("config")
        self._api_client = api_client
        self._auth_header = SecretKeyAuthHeader(config)

    async def get_information(
        self, account_id: str, *, timeout: Optional[float] = None
    ) -> ApiResponse[InformationResponse]:
        """Fetch account details and balance."""
        return await self._fetch(
            lambda: f"accounts/{_require_id('account_id', account_id)}",
            InformationResponse,
            timeout,
        )

    async def get_statement_json(
        self, account_id: str, period: int = 1, *, timeout: Optional[float] = None
    ) -> ApiResponse[StatementResponse]:
        """Fetch the last ``period`` months of statement lines as JSON."""
        return await self._fetch(
            lambda: self._statement_path(account_id, OutputType.JSON, period),
            StatementResponse,
            timeout,
        )

    async def get_statement_pdf(
        self, account_id: str, period: int = 1, *, timeout: Optional[float] = None
    ) -> ApiResponse[StatementPdfResponse]:
        """
        Request a PDF statement for the last ``period`` months.

        The returned job starts in BUILDING; follow it with
        ``poll_statement_job`` until it reaches a terminal status.
        """
        return await self._fetch(
            lambda: self._statement_path(account_id, OutputType.PDF, period),
            StatementPdfResponse,
            timeout,
        )

    async def poll_statement_job(
        self, account_id: str, job_id: str, *, timeout: Optional[float] = None
    ) -> ApiResponse[StatementPdfResponse]:
        """Fetch the current snapshot of a PDF statement job, once."""
        return await self._fetch(
            lambda: (
                f"accounts/{_require_id('account_id', account_id)}"
                f"/statement/jobs/{_require_id('job_id', job_id)}"
            ),
            StatementPdfResponse,
            timeout,
        )

    async def get_transactions(
        self,
        account_id: str,
        query: Optional[TransactionQuery] = None,
        *,
        timeout: Optional[float] = None,
    ) -> ApiResponse[TransactionsResponse]:
        """
        List account transactions.

        Args:
            account_id: The connected account's identifier
            query: Filters; defaults to ``TransactionQuery()`` (credits only)
            timeout: Per-request timeout in seconds

        Returns:
            ApiResponse with the transactions, or an INVALID_ARGUMENT
            error naming the malformed filter
        """
        query = query if query is not None else TransactionQuery()
        return await self._fetch(
            lambda: query.path_with_query(
                f"accounts/{_require_id('account_id', account_id)}/transactions"
            ),
            TransactionsResponse,
            timeout,
        )

    async def get_income(
        self, account_id: str, *, timeout: Optional[float] = None
    ) -> ApiResponse[IncomeResponse]:
        """Fetch the income estimate for an account."""
        return await self._fetch(
            lambda: f"accounts/{_require_id('account_id', account_id)}/income",
            IncomeResponse,
            timeout,
        )

    async def get_user_identity(
        self, account_id: str, *, timeout: Optional[float] = None
    ) -> ApiResponse[IdentityResponse]:
        """Fetch the account holder's identity."""
        return await self._fetch(
            lambda: f"accounts/{_require_id('account_id', account_id)}/identity",
            IdentityResponse,
            timeout,
        )

    @staticmethod
    def _statement_path(account_id: str, output: OutputType, period: int) -> str:
        account_id = _require_id("account_id", account_id)
        request = StatementRequest(output=output, period=period)
        return f"accounts/{account_id}/{request.path_with_query('statement')}"

    async def _fetch(
        self,
        build_path: Callable[[], str],
        response_model: Type[ModelT],
        timeout: Optional[float],
    ) -> ApiResponse[ModelT]:
        """
        Validate and build the path, then make the single transport call.

        Validation errors and transport errors come back inside the
        ApiResponse; anything else propagates.
        """
        try:
            path = build_path()
        except InvalidArgumentException as e:
            record_validation_failure(e.field)
            logger.warning("invalid_argument", field=e.field, message=e.message)
            return ApiResponse.failure(e)

        try:
            response = await self._api_client.get(
                path,
                response_model,
                headers=self._auth_header.headers(),
                timeout=timeout,
            )
        except TransportException as e:
            return ApiResponse.failure(e)

        return response.to_api_response()
