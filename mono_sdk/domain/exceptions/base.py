"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all SDK errors.

    Every error carries a human-readable message and a stable
    machine-readable code callers can branch on.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
