"""Transaction models and the transaction query options."""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import List, Optional, Tuple, Union

import httpx
from pydantic import Field

from mono_sdk.domain.exceptions import InvalidArgumentException

from .account import MonoModel

DATE_FORMAT = "%d-%m-%Y"
_DATE_PATTERN = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


class TransactionType(str, Enum):
    """Direction filter for transaction queries."""

    CREDIT = "credit"  # Money in
    DEBIT = "debit"  # Money out


class Transaction(MonoModel):
    """A single account transaction as returned by Mono."""

    id: str = Field(..., alias="_id")
    type: Optional[str] = None
    amount: Optional[int] = None  # kobo
    narration: Optional[str] = None
    date: Optional[datetime] = None
    balance: Optional[int] = None
    currency: Optional[str] = None


class Paging(MonoModel):
    total: Optional[int] = None
    page: Optional[int] = None
    previous: Optional[str] = None
    next: Optional[str] = None


class TransactionsResponse(MonoModel):
    """Payload of GET accounts/{id}/transactions."""

    paging: Optional[Paging] = None
    data: List[Transaction] = Field(default_factory=list)


def format_date_filter(field: str, value: Union[str, date, None]) -> Optional[str]:
    """
    Normalize a start/end filter to ``dd-mm-yyyy``.

    Strings must already be in that exact shape and name a real
    calendar day. Blank strings count as absent.

    Raises:
        InvalidArgumentException: If the value is not a valid date
    """
    if value is None:
        return None
    if isinstance(value, date):
        return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"
    if not isinstance(value, str):
        raise InvalidArgumentException(
            field,
            f"Invalid {field} date; expected a dd-mm-yyyy string or a date, "
            f"got {type(value).__name__}",
        )
    if not value.strip():
        return None
    try:
        if not _DATE_PATTERN.fullmatch(value):
            raise ValueError(value)
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise InvalidArgumentException(
            field,
            f"Invalid {field} date format '{value}'; please use dd-mm-yyyy ie 05-01-2020",
        ) from None
    return value


def parse_transaction_type(
    value: Union[TransactionType, str, None],
) -> Optional[TransactionType]:
    """
    Resolve the type filter; only ``credit`` and ``debit`` are accepted.

    Raises:
        InvalidArgumentException: For any other value
    """
    if value is None or isinstance(value, TransactionType):
        return value
    if isinstance(value, str) and not value.strip():
        return None
    if value in (TransactionType.CREDIT.value, TransactionType.DEBIT.value):
        return TransactionType(value)
    raise InvalidArgumentException(
        "type",
        f"Invalid transaction filtering type '{value}'; "
        "please use credit or debit to filter transactions",
    )


@dataclass(frozen=True)
class TransactionQuery:
    """
    Filters for a transaction listing.

    Attributes:
        start: Earliest transaction date, ``dd-mm-yyyy`` or a date
        end: Latest transaction date, ``dd-mm-yyyy`` or a date
        narration: Free-text match on the transaction description
        limit: Maximum number of results; 0 leaves it to the API
        type: Credit or debit filter; None sends no filter
        paginate: Ask the API for paged results
    """

    start: Union[str, date, None] = None
    end: Union[str, date, None] = None
    narration: Optional[str] = None
    limit: int = 0
    type: Union[TransactionType, str, None] = TransactionType.CREDIT
    paginate: bool = False

    def to_params(self) -> List[Tuple[str, str]]:
        """
        Validate the filters and return the non-default ones as query pairs.

        Raises:
            InvalidArgumentException: If any filter is malformed
        """
        start = format_date_filter("start", self.start)
        end = format_date_filter("end", self.end)
        txn_type = parse_transaction_type(self.type)

        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 0:
            raise InvalidArgumentException(
                "limit",
                f"Invalid limit '{self.limit}'; expected an integer >= 0",
            )

        if self.narration is not None and not isinstance(self.narration, str):
            raise InvalidArgumentException(
                "narration",
                f"Invalid narration; expected a string, got {type(self.narration).__name__}",
            )

        params: List[Tuple[str, str]] = []
        if start:
            params.append(("start", start))
        if end:
            params.append(("end", end))
        if self.narration and self.narration.strip():
            params.append(("narration", self.narration))
        if txn_type is not None:
            params.append(("type", txn_type.value))
        if self.limit > 0:
            params.append(("limit", str(self.limit)))
        if self.paginate:
            params.append(("paginate", "true"))
        return params

    def path_with_query(self, path: str) -> str:
        """Append the encoded filters to ``path``."""
        query = str(httpx.QueryParams(self.to_params()))
        return f"{path}?{query}" if query else path
