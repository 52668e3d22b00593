"""Uniform response envelope returned by every SDK operation."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from mono_sdk.domain.exceptions import DomainException

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """
    Result of an SDK operation: either a payload or an error, never both.

    Attributes:
        data: Parsed response payload when the call succeeded
        status_code: HTTP status of the underlying call, when one was made
        error: The validation or transport error when the call failed
    """

    data: Optional[T] = None
    status_code: Optional[int] = None
    error: Optional[DomainException] = None

    @classmethod
    def success(cls, data: T, status_code: int = 200) -> "ApiResponse[T]":
        return cls(data=data, status_code=status_code)

    @classmethod
    def failure(cls, error: DomainException) -> "ApiResponse[T]":
        return cls(
            status_code=getattr(error, "status_code", None),
            error=error,
        )

    @property
    def ok(self) -> bool:
        """Check if the call succeeded."""
        return self.error is None

    @property
    def code(self) -> Optional[str]:
        """Error code of a failed call."""
        return self.error.code if self.error else None

    @property
    def message(self) -> Optional[str]:
        """Error message of a failed call."""
        return self.error.message if self.error else None

    def unwrap(self) -> T:
        """
        Return the payload, re-raising the stored error on failure.

        Raises:
            DomainException: The error this response carries
        """
        if self.error is not None:
            raise self.error
        return self.data


@dataclass(frozen=True)
class TransportResponse(Generic[T]):
    """Raw successful result handed back by an ApiClient."""

    status_code: int
    data: T

    def to_api_response(self) -> ApiResponse[T]:
        """Wrap this result into the public envelope."""
        return ApiResponse.success(self.data, status_code=self.status_code)
