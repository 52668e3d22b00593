"""Mono API client implementations."""

from .accounts_client import AccountsClient
from .auth import SecretKeyAuthHeader
from .http_client import HttpApiClient

__all__ = [
    "AccountsClient",
    "HttpApiClient",
    "SecretKeyAuthHeader",
]
