"""
Fixtures for unit tests.

Provides:
- Recording ApiClient that serves canned Mono payloads
- Settings with a test secret key
- AccountsClient wired to the recording transport
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

import pytest

from mono_sdk.core.config import Settings
from mono_sdk.domain.entities import (
    IdentityResponse,
    IncomeResponse,
    InformationResponse,
    StatementPdfResponse,
    StatementResponse,
    TransactionsResponse,
    TransportResponse,
)
from mono_sdk.domain.interfaces import ApiClient
from mono_sdk.infrastructure.clients import AccountsClient

TEST_SECRET_KEY = "test_sk_0123456789"
ACCOUNT_ID = "5feec8ce95e8dc6a52e53257"
JOB_ID = "job_8bd6b4e0"


# =============================================================================
# Canned Payloads
# =============================================================================

TRANSACTION = {
    "_id": "5f171a6b0f0c9a4e64d1f9e1",
    "type": "debit",
    "amount": 10000,
    "narration": "TRANSFER to UBER",
    "date": "2020-07-21T00:00:00.000Z",
    "balance": 2000,
    "currency": "NGN",
}

DEFAULT_PAYLOADS: Dict[type, Dict[str, Any]] = {
    InformationResponse: {
        "meta": {"data_status": "AVAILABLE", "auth_method": "mobile_banking"},
        "account": {
            "_id": ACCOUNT_ID,
            "institution": {"name": "GTBank", "bankCode": "058", "type": "PERSONAL_BANKING"},
            "name": "SAMUEL OLAMIDE",
            "accountNumber": "0131883461",
            "type": "SAVINGS_ACCOUNT",
            "balance": 1506,
            "currency": "NGN",
            "bvn": "9422",
        },
    },
    StatementResponse: {"meta": {"count": 1}, "data": [TRANSACTION]},
    StatementPdfResponse: {
        "id": JOB_ID,
        "status": "BUILDING",
        "path": f"https://api.withmono.com/statements/{JOB_ID}.pdf",
    },
    TransactionsResponse: {
        "paging": {"total": 1, "page": 1, "previous": None, "next": None},
        "data": [TRANSACTION],
    },
    IncomeResponse: {
        "type": "INCOME",
        "amount": 35000000,
        "employer": "Mono Technologies",
        "confidence": 0.95,
    },
    IdentityResponse: {
        "fullName": "Samuel Olamide",
        "email": "samuel@withmono.com",
        "phone": "08012345678",
        "gender": "Male",
        "dob": "1996-05-14",
        "bvn": "22110011001",
        "maritalStatus": "Single",
        "addressLine1": "12 Adeola Odeku",
        "addressLine2": "Victoria Island, Lagos",
        "created_at": "2020-07-21T10:20:30.000Z",
        "updated_at": "2020-07-21T10:20:30.000Z",
    },
}


# =============================================================================
# Mock Transport
# =============================================================================

@dataclass
class RecordedCall:
    path: str
    response_model: type
    headers: Optional[Dict[str, str]]
    timeout: Optional[float]


class RecordingApiClient(ApiClient):
    """ApiClient double that records every call and serves canned payloads."""

    def __init__(
        self,
        payloads: Optional[Dict[type, List[Dict[str, Any]]]] = None,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self.payloads = payloads or {}
        self.error = error
        self.delay = delay
        self.calls: List[RecordedCall] = []

    async def get(
        self,
        path: str,
        response_model: Type,
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse:
        """Return the next scripted payload for the model, or the default."""
        self.calls.append(RecordedCall(path, response_model, headers, timeout))

        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error

        scripted = self.payloads.get(response_model)
        if scripted:
            payload = scripted.pop(0) if len(scripted) > 1 else scripted[0]
        else:
            payload = DEFAULT_PAYLOADS[response_model]

        return TransportResponse(
            status_code=200,
            data=response_model.model_validate(payload),
        )

    @property
    def paths(self) -> List[str]:
        return [call.path for call in self.calls]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment."""
    return Settings(
        _env_file=None,
        secret_key=TEST_SECRET_KEY,
        poll_interval=0.0,
        poll_max_attempts=5,
    )


@pytest.fixture
def api_client() -> RecordingApiClient:
    """Create a recording transport."""
    return RecordingApiClient()


@pytest.fixture
def accounts_client(api_client: RecordingApiClient, settings: Settings) -> AccountsClient:
    """Create an AccountsClient on the recording transport."""
    return AccountsClient(api_client, settings)
