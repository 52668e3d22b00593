"""
Mono SDK - Async client for the Mono financial data API

Wraps account information, statements, transactions, income and
identity endpoints behind a typed, validated request layer.
"""

__version__ = "0.1.0"

from mono_sdk.client import MonoClient  # noqa: E402
from mono_sdk.domain.entities import (  # noqa: E402
    ApiResponse,
    JobStatus,
    OutputType,
    TransactionQuery,
    TransactionType,
)

__all__ = [
    "MonoClient",
    "ApiResponse",
    "JobStatus",
    "OutputType",
    "TransactionQuery",
    "TransactionType",
    "__version__",
]
