"""
Fixtures for integration tests.

Provides:
- A FastAPI mock of the Mono accounts API (auth, statements, PDF jobs)
- A MonoClient wired to the mock through httpx.ASGITransport
"""

from typing import Optional

import httpx
import pytest
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from mono_sdk import MonoClient
from mono_sdk.core.config import Settings
from mono_sdk.infrastructure.clients import HttpApiClient

SECRET_KEY = "live_sk_integration"
ACCOUNT_ID = "5feec8ce95e8dc6a52e53257"
BROKEN_ACCOUNT_ID = "acc_broken"
BASE_URL = "http://mono.test/v1/"

# Number of polls a PDF job stays in BUILDING before it completes
BUILD_POLLS = 2


# =============================================================================
# Mock Mono API
# =============================================================================

def _transaction(txn_id: str, txn_type: str, amount: int, narration: str) -> dict:
    return {
        "_id": txn_id,
        "type": txn_type,
        "amount": amount,
        "narration": narration,
        "date": "2020-10-05T00:00:00.000Z",
        "balance": 250000,
        "currency": "NGN",
    }


TRANSACTIONS = [
    _transaction("txn_1", "credit", 500000, "SALARY OCTOBER"),
    _transaction("txn_2", "debit", 12000, "UBER TRIP"),
    _transaction("txn_3", "debit", 4500, "POS PURCHASE"),
]


def create_mock_mono_app() -> FastAPI:
    """Build a fresh mock Mono API with its own job state."""
    app = FastAPI(title="Mock Mono API")
    app.state.requests = []
    app.state.jobs = {}

    @app.middleware("http")
    async def record_and_authenticate(request: Request, call_next):
        app.state.requests.append(request.url)
        if request.headers.get("mono-sec-key") != SECRET_KEY:
            return JSONResponse(status_code=401, content={"message": "Invalid secret key"})
        return await call_next(request)

    def require_account(account_id: str) -> None:
        if account_id not in (ACCOUNT_ID, BROKEN_ACCOUNT_ID):
            raise HTTPException(status_code=404, detail="Account not found")

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.get("/v1/accounts/{account_id}")
    async def information(account_id: str):
        require_account(account_id)
        return {
            "meta": {"data_status": "AVAILABLE", "auth_method": "internet_banking"},
            "account": {
                "_id": account_id,
                "institution": {"name": "GTBank", "bankCode": "058", "type": "PERSONAL_BANKING"},
                "name": "SAMUEL OLAMIDE",
                "accountNumber": "0131883461",
                "type": "SAVINGS_ACCOUNT",
                "balance": 250000,
                "currency": "NGN",
                "bvn": "9422",
            },
        }

    @app.get("/v1/accounts/{account_id}/statement")
    async def statement(account_id: str, output: str, period: str):
        require_account(account_id)
        if not period.startswith("last") or not period.endswith("months"):
            raise HTTPException(status_code=400, detail="Invalid period")

        if output == "pdf":
            job_id = f"job_{len(app.state.jobs) + 1}"
            app.state.jobs[job_id] = 0
            return {
                "id": job_id,
                "status": "BUILDING",
                "path": f"https://api.withmono.com/statements/{job_id}.pdf",
            }
        if output == "json":
            return {"meta": {"count": len(TRANSACTIONS)}, "data": TRANSACTIONS}
        raise HTTPException(status_code=400, detail="Invalid output")

    @app.get("/v1/accounts/{account_id}/statement/jobs/{job_id}")
    async def statement_job(account_id: str, job_id: str):
        require_account(account_id)
        if job_id not in app.state.jobs:
            raise HTTPException(status_code=404, detail="Statement job not found")

        app.state.jobs[job_id] += 1
        status = "COMPLETE" if app.state.jobs[job_id] > BUILD_POLLS else "BUILDING"
        return {
            "id": job_id,
            "status": status,
            "path": f"https://api.withmono.com/statements/{job_id}.pdf",
        }

    @app.get("/v1/accounts/{account_id}/transactions")
    async def transactions(
        account_id: str,
        type: Optional[str] = None,
        narration: Optional[str] = None,
        limit: int = 0,
    ):
        require_account(account_id)
        data = [t for t in TRANSACTIONS if type is None or t["type"] == type]
        if narration:
            data = [t for t in data if narration.lower() in t["narration"].lower()]
        if limit:
            data = data[:limit]
        return {
            "paging": {"total": len(data), "page": 1, "previous": None, "next": None},
            "data": data,
        }

    @app.get("/v1/accounts/{account_id}/income")
    async def income(account_id: str):
        require_account(account_id)
        if account_id == BROKEN_ACCOUNT_ID:
            return {"amount": "not-a-number"}
        return {
            "type": "INCOME",
            "amount": 500000,
            "employer": "Mono Technologies",
            "confidence": 0.93,
        }

    @app.get("/v1/accounts/{account_id}/identity")
    async def identity(account_id: str):
        require_account(account_id)
        return {
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
        }

    return app


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mono_app() -> FastAPI:
    """Create a fresh mock Mono API."""
    return create_mock_mono_app()


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the mock API."""
    return Settings(
        _env_file=None,
        secret_key=SECRET_KEY,
        base_url=BASE_URL,
        poll_interval=0.0,
        poll_max_attempts=5,
    )


def make_mono_client(app: FastAPI, settings: Settings, secret_key: Optional[str] = None) -> MonoClient:
    api_client = HttpApiClient(
        base_url=settings.base_url,
        timeout=settings.timeout,
        transport=httpx.ASGITransport(app=app),
    )
    return MonoClient(secret_key, settings=settings, api_client=api_client)


@pytest.fixture
def mono_client(mono_app: FastAPI, settings: Settings) -> MonoClient:
    """Create a MonoClient talking to the mock API in-process."""
    return make_mono_client(mono_app, settings)
