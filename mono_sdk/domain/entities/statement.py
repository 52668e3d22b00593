"""Account statement request and response models."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import httpx
from pydantic import Field

from mono_sdk.domain.exceptions import InvalidArgumentException

from .account import MonoModel
from .transaction import Transaction


class OutputType(str, Enum):
    """Statement output format."""

    JSON = "json"
    PDF = "pdf"


class JobStatus(str, Enum):
    """Lifecycle of an asynchronously built PDF statement."""

    BUILDING = "BUILDING"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self is not JobStatus.BUILDING


@dataclass(frozen=True)
class StatementRequest:
    """
    Statement options for a trailing window of whole months.

    The period renders as ``last{N}months`` for every N, including 1.
    """

    output: OutputType = OutputType.JSON
    period: int = 1

    @property
    def period_text(self) -> str:
        return f"last{self.period}months"

    def validate(self) -> None:
        """
        Raises:
            InvalidArgumentException: If period is not a positive integer
        """
        if isinstance(self.period, bool) or not isinstance(self.period, int) or self.period < 1:
            raise InvalidArgumentException(
                "period",
                f"Invalid period '{self.period}'; expected a number of months >= 1",
            )

    def path_with_query(self, path: str) -> str:
        """Append ``output`` and ``period`` to ``path``."""
        self.validate()
        query = httpx.QueryParams(
            [("output", OutputType(self.output).value), ("period", self.period_text)]
        )
        return f"{path}?{query}"


class StatementMeta(MonoModel):
    count: Optional[int] = None


class StatementResponse(MonoModel):
    """Payload of a JSON statement request."""

    meta: Optional[StatementMeta] = None
    data: List[Transaction] = Field(default_factory=list)


class StatementPdfResponse(MonoModel):
    """
    Snapshot of a PDF statement job.

    ``path`` is the download URL; it is only usable once the job
    reaches a terminal status.
    """

    id: str
    status: JobStatus
    path: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal
