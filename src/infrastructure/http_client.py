"""Async HTTP client built on curl_cffi."""

from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession, Response
from loguru import logger

from domain.exceptions import NetworkFailure


class AsyncHTTPClient:
    """Thin wrapper that opens a short-lived session per request."""

    def __init__(self, timeout: float | None = None, impersonate: str = "chrome"):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds (None keeps curl_cffi's default)
            impersonate: Browser fingerprint passed to curl_cffi
        """
        self.timeout = timeout
        self.impersonate = impersonate

    def _session_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"impersonate": self.impersonate}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return kwargs

    async def get(self, url: str) -> Response:
        """
        GET a URL without checking the status code.

        Raises:
            NetworkFailure: On transport errors (DNS, TLS, timeouts, ...)
        """
        logger.debug(f"GET {url}")
        try:
            async with AsyncSession(**self._session_kwargs()) as session:
                response = await session.get(url)
        except CurlError as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise NetworkFailure(f"Request failed: {e}") from e

        logger.debug(f"GET {url} -> {response.status_code}")
        return response

    async def get_text(self, url: str) -> str:
        """GET a URL and return its body as text."""
        response = await self.get(url)
        return response.text
