"""Transport-level exceptions raised by the Mono API client."""

from .base import DomainException


class TransportException(DomainException):
    """Raised when the Mono API call fails or returns an error."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str = "TRANSPORT_ERROR",
    ):
        super().__init__(
            message=message,
            code=code,
        )
        self.status_code = status_code


class TransportTimeoutException(TransportException):
    """Raised when the Mono API times out."""

    def __init__(self):
        super().__init__(
            message="Mono API request timed out",
            status_code=None,
            code="TRANSPORT_TIMEOUT",
        )
