"""Ports for the Mono transport and the accounts resource client."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type, TypeVar

from pydantic import BaseModel

from mono_sdk.domain.entities import (
    ApiResponse,
    IdentityResponse,
    IncomeResponse,
    InformationResponse,
    StatementPdfResponse,
    StatementResponse,
    TransactionQuery,
    TransactionsResponse,
    TransportResponse,
)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ApiClient(ABC):
    """
    Abstract transport for the Mono API.

    Performs a single authenticated GET and decodes the JSON body.
    """

    @abstractmethod
    async def get(
        self,
        path: str,
        response_model: Type[ModelT],
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse[ModelT]:
        """
        Fetch ``path`` relative to the API base and decode it.

        Args:
            path: Path and query relative to the configured base URL
            response_model: Pydantic model the JSON body is validated into
            headers: Extra request headers, typically authentication
            timeout: Per-request timeout in seconds

        Returns:
            The decoded payload with its HTTP status

        Raises:
            TransportException: On HTTP, network or decoding failure
            TransportTimeoutException: If the request times out
        """
        ...


class ApiAuthHeader(ABC):
    """Computes the authorization headers sent with every request."""

    @abstractmethod
    def headers(self) -> Dict[str, str]:
        ...


class AccountsAPIClient(ABC):
    """
    Abstract client for Mono account resources.

    Every operation returns an ApiResponse; validation and transport
    failures are carried in ``ApiResponse.error``.
    """

    @abstractmethod
    async def get_information(
        self, account_id: str, *, timeout: Optional[float] = None
    ) -> ApiResponse[InformationResponse]:
        ...

    @abstractmethod
    async def get_statement_json(
        self, account_id: str, period: int = 1, *, timeout: Optional[float] = None
    ) -> ApiResponse[StatementResponse]:
        ...

    @abstractmethod
    async def get_statement_pdf(
        self, account_id: str, period: int = 1, *, timeout: Optional[float] = None
    ) -> ApiResponse[StatementPdfResponse]:
        ...

    @abstractmethod
    async def poll_statement_job(
        self, account_id: str, job_id: str, *, timeout: Optional[float] = None
    ) -> ApiResponse[StatementPdfResponse]:
        ...

    @abstractmethod
    async def get_transactions(
        self,
        account_id: str,
        query: Optional[TransactionQuery] = None,
        *,
        timeout: Optional[float] = None,
    ) -> ApiResponse[TransactionsResponse]:
        ...

    @abstractmethod
    async def get_income(
        self, account_id: str, *, timeout: Optional[float] = None
    ) -> ApiResponse[IncomeResponse]:
        ...

    @abstractmethod
    async def get_user_identity(
        self, account_id: str, *, timeout: Optional[float] = None
    ) -> ApiResponse[IdentityResponse]:
        ...
