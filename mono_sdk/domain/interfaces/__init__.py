"""
Domain Interfaces (Ports)
"""

from .clients import AccountsAPIClient, ApiAuthHeader, ApiClient

__all__ = [
    "AccountsAPIClient",
    "ApiAuthHeader",
    "ApiClient",
]
