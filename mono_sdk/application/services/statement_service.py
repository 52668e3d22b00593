"""Statement service - caller-side polling for PDF statement jobs."""

import asyncio
from typing import Optional

import structlog

from mono_sdk.core.config import Settings, get_settings
from mono_sdk.domain.entities import ApiResponse, StatementPdfResponse
from mono_sdk.domain.exceptions import (
    InvalidArgumentException,
    StatementPollingTimeoutException,
)
from mono_sdk.domain.interfaces import AccountsAPIClient

logger = structlog.get_logger(__name__)


class StatementService:
    """
    Application service for PDF statement generation.

    AccountsClient only polls once per call; this service owns the
    loop: fixed interval between polls and a bounded number of attempts.
    """

    def __init__(
        self,
        accounts_client: AccountsAPIClient,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        self._accounts = accounts_client
        self._interval = settings.poll_interval
        self._max_attempts = settings.poll_max_attempts

    async def request_pdf_statement(
        self,
        account_id: str,
        period: int = 1,
        *,
        interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> ApiResponse[StatementPdfResponse]:
        """
        Request a PDF statement and wait until it is built.

        Returns:
            The terminal job snapshot, or the first failed response
        """
        response = await self._accounts.get_statement_pdf(
            account_id, period, timeout=timeout
        )
        if not response.ok or response.data.is_terminal:
            return response

        logger.info(
            "statement_job_submitted",
            account_id=account_id,
            job_id=response.data.id,
            period=period,
        )
        return await self.wait_for_statement(
            account_id,
            response.data.id,
            interval=interval,
            max_attempts=max_attempts,
            timeout=timeout,
        )

    async def wait_for_statement(
        self,
        account_id: str,
        job_id: str,
        *,
        interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        timeout: Optional[float] = None,
    ) -> ApiResponse[StatementPdfResponse]:
        """
        Poll a statement job until it leaves BUILDING.

        Args:
            account_id: The connected account's identifier
            job_id: Job id returned by ``get_statement_pdf``
            interval: Seconds to sleep between polls
            max_attempts: Maximum number of polls
            timeout: Per-request timeout in seconds

        Returns:
            The terminal snapshot; the first failed poll; or a
            STATEMENT_POLLING_TIMEOUT failure once attempts run out
        """
        interval = self._interval if interval is None else interval
        max_attempts = self._max_attempts if max_attempts is None else max_attempts

        if max_attempts < 1:
            return ApiResponse.failure(
                InvalidArgumentException(
                    "max_attempts",
                    f"Invalid max_attempts '{max_attempts}'; expected an integer >= 1",
                )
            )

        for attempt in range(max_attempts):
            response = await self._accounts.poll_statement_job(
                account_id, job_id, timeout=timeout
            )

            if not response.ok:
                logger.warning(
                    "statement_job_poll_failed",
                    job_id=job_id,
                    attempt=attempt + 1,
                    code=response.code,
                )
                return response

            logger.info(
                "statement_job_polled",
                job_id=job_id,
                status=response.data.status.value,
                attempt=attempt + 1,
            )

            if response.data.is_terminal:
                return response

            if attempt < max_attempts - 1:
                await asyncio.sleep(interval)

        logger.warning(
            "statement_polling_exhausted",
            job_id=job_id,
            max_attempts=max_attempts,
        )
        return ApiResponse.failure(
            StatementPollingTimeoutException(job_id, max_attempts)
        )
