"""Statement polling exceptions."""

from .base import DomainException


class StatementPollingTimeoutException(DomainException):
    """Raised when a statement job is still building after every poll."""

    def __init__(self, job_id: str, attempts: int):
        super().__init__(
            message=f"Statement job {job_id} not finished after {attempts} polls",
            code="STATEMENT_POLLING_TIMEOUT",
        )
        self.job_id = job_id
        self.attempts = attempts
