# =============================================================================
# core/services/csv_loader.py - Remote CSV Fetching
# =============================================================================
# Fetches the raw startup CSV over HTTP(S).
#
# The fetch has a bounded timeout and is retried with exponential backoff
# (backoff, 2*backoff, 4*backoff, ...). When every attempt fails the loader
# raises CsvFetchError; the cache decides what to do with it.
#
# Usage:
#   loader = HttpCsvLoader.from_settings(settings)
#   text = await loader()
# =============================================================================

import asyncio
import logging
from typing import Awaitable, Callable

import httpx

from lib.utils import CsvFetchError

logger = logging.getLogger(__name__)

# Anything that returns the raw CSV text can back the cache
CsvLoader = Callable[[], Awaitable[str]]


class HttpCsvLoader:
    """
    Loads CSV text from a fixed URL.

    Args:
        url: Source URL
        timeout: Per-attempt timeout in seconds
        max_retries: Extra attempts after the first failure
        backoff: Delay before the first retry; doubles on each retry
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        max_retries: int = 3,
        backoff: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff = backoff
        self._transport = transport

    @classmethod
    def from_settings(cls, settings) -> "HttpCsvLoader":
        return cls(
            url=settings.STARTUP_CSV_URL,
            timeout=settings.CSV_FETCH_TIMEOUT_SECONDS,
            max_retries=settings.CSV_FETCH_MAX_RETRIES,
            backoff=settings.CSV_FETCH_BACKOFF_SECONDS,
        )

    async def __call__(self) -> str:
        """
        Fetch the CSV text.

        Returns:
            Response body decoded as text

        Raises:
            CsvFetchError: If every attempt failed (transport error,
                timeout or non-2xx status)
        """
        attempts = self.max_retries + 1
        last_error = ""

        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            for attempt in range(attempts):
                try:
                    response = await client.get(self.url)
                    response.raise_for_status()
                    logger.info(f"Fetched startup CSV from {self.url} ({len(response.content)} bytes)")
                    return response.text

                except httpx.HTTPError as e:
                    last_error = str(e) or type(e).__name__
                    logger.warning(f"CSV fetch attempt {attempt + 1}/{attempts} failed: {last_error}")

                    if attempt < attempts - 1:
                        await asyncio.sleep(self.backoff * (2 ** attempt))

        raise CsvFetchError(self.url, last_error, attempts=attempts)
