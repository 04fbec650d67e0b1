"""Shared JSON-over-HTTP plumbing for provider clients."""

import time
from typing import Any

import httpx

from ai_proxy.clients.errors import ProviderClientError, UpstreamHTTPError
from ai_proxy.observability import get_logger
from ai_proxy.observability.constants import LogEvents

logger = get_logger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class JSONProviderClient:
    """Base class for bearer-authenticated JSON providers."""

    provider_name = "provider"

    def __init__(self, base_url: str, api_key: str | None, timeout: float = 60.0):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = httpx.Timeout(timeout)

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "User-Agent": DEFAULT_USER_AGENT,
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        """POST a JSON payload and return the decoded JSON body.

        Raises:
            UpstreamHTTPError: If the provider answers with a non-2xx status
            ProviderClientError: On timeouts, network failures or a non-JSON body
        """
        url = f"{self.base_url}{path}"
        start_time = time.perf_counter()
        logger.debug(LogEvents.PROVIDER_REQUEST_STARTED, provider=self.provider_name, url=url)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(url, json=payload, headers=self._headers())
            except httpx.TimeoutException as e:
                raise ProviderClientError(f"{self.provider_name} request timed out") from e
            except httpx.RequestError as e:
                raise ProviderClientError(f"Network error: {e}") from e

        latency_ms = int((time.perf_counter() - start_time) * 1000)

        if not response.is_success:
            raise UpstreamHTTPError.from_response(self.provider_name, response)

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderClientError(
                f"{self.provider_name} returned a non-JSON body",
                status_code=response.status_code,
                details=response.text,
            ) from e

        logger.info(
            LogEvents.PROVIDER_REQUEST_COMPLETED,
            provider=self.provider_name,
            url=url,
            latency_ms=latency_ms,
        )
        return data
