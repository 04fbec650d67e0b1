"""Errors raised by the provider clients."""

from typing import Any

import httpx


class ProviderClientError(Exception):
    """Error calling an upstream provider."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: Any | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class UpstreamHTTPError(ProviderClientError):
    """The provider answered with a non-2xx status."""

    @classmethod
    def from_response(cls, provider: str, response: httpx.Response) -> "UpstreamHTTPError":
        """Build the error from a failed response, keeping the decoded body as details."""
        try:
            details: Any = response.json()
        except ValueError:
            details = response.text or None

        return cls(
            f"{provider} request failed: HTTP {response.status_code}",
            status_code=response.status_code,
            details=details,
        )
