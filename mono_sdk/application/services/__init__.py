"""Application Services - Use case orchestration."""

from .statement_service import StatementService

__all__ = [
    "StatementService",
]
