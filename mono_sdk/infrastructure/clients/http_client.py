"""HTTP implementation of ApiClient."""

from typing import Dict, Optional, Type

import httpx
import structlog
from pydantic import ValidationError

from mono_sdk.core.config import get_settings
from mono_sdk.core.metrics import (
    track_request_latency,
    record_request_success,
    record_request_failure,
)
from mono_sdk.domain.entities import TransportResponse
from mono_sdk.domain.exceptions import (
    TransportException,
    TransportTimeoutException,
)
from mono_sdk.domain.interfaces import ApiClient
from mono_sdk.domain.interfaces.clients import ModelT

logger = structlog.get_logger(__name__)


class HttpApiClient(ApiClient):
    """
    HTTP transport for the Mono API.

    Opens a short-lived httpx client per request and never retries;
    retry policy belongs to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self._base_url = base_url or settings.base_url
        self._timeout = timeout or settings.timeout
        self._transport = transport

    async def get(
        self,
        path: str,
        response_model: Type[ModelT],
        *,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> TransportResponse[ModelT]:
        """
        GET ``path`` and validate the JSON body into ``response_model``.

        An explicit ``timeout`` overrides the client default for this
        request only.
        """
        request_headers = {"Accept": "application/json", **(headers or {})}
        request_kwargs = {"headers": request_headers}
        if timeout is not None:
            request_kwargs["timeout"] = timeout

        try:
            with track_request_latency():
                async with httpx.AsyncClient(
                    base_url=self._base_url,
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.get(path, **request_kwargs)

        except httpx.TimeoutException as e:
            record_request_failure("timeout")
            logger.warning("mono_request_timeout", path=path)
            raise TransportTimeoutException() from e
        except httpx.HTTPError as e:
            record_request_failure("network")
            logger.error(
                "mono_request_error",
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportException(message=f"Mono API unreachable: {e}") from e

        if response.status_code >= 400:
            record_request_failure("http_error")
            message = self._error_message(response)
            logger.warning(
                "mono_request_failed",
                path=path,
                status_code=response.status_code,
                message=message,
            )
            raise TransportException(
                message=f"Mono API error: {message}",
                status_code=response.status_code,
            )

        try:
            data = response_model.model_validate(response.json())
        except (ValidationError, ValueError) as e:
            record_request_failure("invalid_response")
            logger.error(
                "mono_invalid_response",
                path=path,
                status_code=response.status_code,
                error=str(e),
            )
            raise TransportException(
                message=f"Invalid {response_model.__name__} body from Mono API: {e}",
                status_code=response.status_code,
                code="INVALID_RESPONSE",
            ) from e

        record_request_success()
        logger.info(
            "mono_request_completed",
            path=path,
            status_code=response.status_code,
        )
        return TransportResponse(status_code=response.status_code, data=data)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Prefer the API's ``message`` field over the raw body."""
        try:
            body = response.json()
        except ValueError:
            return response.text[:200] or response.reason_phrase
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.text[:200]
