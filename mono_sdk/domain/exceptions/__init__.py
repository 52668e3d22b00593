"""Domain Exceptions - validation, construction and transport errors."""

from .base import DomainException
from .client import ConstructionException, InvalidArgumentException
from .statement import StatementPollingTimeoutException
from .transport import TransportException, TransportTimeoutException

__all__ = [
    "DomainException",
    "ConstructionException",
    "InvalidArgumentException",
    "StatementPollingTimeoutException",
    "TransportException",
    "TransportTimeoutException",
]
