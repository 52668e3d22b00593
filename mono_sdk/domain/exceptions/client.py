"""Client construction and argument validation exceptions."""

from .base import DomainException


class ConstructionException(DomainException):
    """Raised when a client is built without a required collaborator."""

    def __init__(self, name: str, reason: str = "is required"):
        super().__init__(
            message=f"{name} {reason}",
            code="CONSTRUCTION_ERROR",
        )
        self.name = name


class InvalidArgumentException(DomainException):
    """Raised when a caller-supplied value fails local validation."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=message,
            code="INVALID_ARGUMENT",
        )
        self.field = field
