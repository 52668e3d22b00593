"""Domain Entities - request options, response payloads and the response envelope."""

from .account import (
    Account,
    IdentityResponse,
    IncomeResponse,
    InformationMeta,
    InformationResponse,
    Institution,
)
from .response import ApiResponse, TransportResponse
from .statement import (
    JobStatus,
    OutputType,
    StatementMeta,
    StatementPdfResponse,
    StatementRequest,
    StatementResponse,
)
from .transaction import (
    DATE_FORMAT,
    Paging,
    Transaction,
    TransactionQuery,
    TransactionType,
    TransactionsResponse,
)

__all__ = [
    "Account",
    "ApiResponse",
    "DATE_FORMAT",
    "IdentityResponse",
    "IncomeResponse",
    "InformationMeta",
    "InformationResponse",
    "Institution",
    "JobStatus",
    "OutputType",
    "Paging",
    "StatementMeta",
    "StatementPdfResponse",
    "StatementRequest",
    "StatementResponse",
    "Transaction",
    "TransactionQuery",
    "TransactionType",
    "TransactionsResponse",
    "TransportResponse",
]
