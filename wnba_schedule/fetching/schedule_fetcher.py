from typing import Any, Dict, Optional

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from wnba_schedule.config.settings import settings


class FetchError(Exception):
    """Network failure or non-200 response from the schedule feed."""

    pass


class DecodeError(FetchError):
    """Schedule feed answered 200 but the body is not valid JSON."""

    pass


class ScheduleFetcher:
    """Fetches the raw schedule document without blocking the event loop."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        attempts: Optional[int] = None,
    ):
        self.url = url or settings.schedule_url
        self.attempts = attempts or settings.fetch_attempts
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout or settings.request_timeout),
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    async def fetch(self) -> Optional[Dict[str, Any]]:
        """Returns the decoded feed, or None if the fetch failed for any reason."""
        try:
            return await self._request()
        except DecodeError as e:
            logger.error(f"Error decoding schedule: {e}")
        except FetchError as e:
            logger.error(f"Error fetching schedule: {e}")
        return None

    async def _request(self) -> Dict[str, Any]:
        logger.debug(f"Requesting schedule from {self.url}")
        try:
            # Retries only cover transport errors; status errors are final
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.attempts),
                wait=wait_exponential(multiplier=1, min=1, max=10),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    response = await self.client.get(self.url)
        except httpx.HTTPError as e:
            raise FetchError(f"request failed: {e!r}") from e

        if response.status_code != 200:
            raise FetchError(f"status {response.status_code}")

        try:
            document = response.json()
        except ValueError as e:
            raise DecodeError(str(e)) from e

        logger.debug(f"Schedule fetched: {len(response.content)} bytes")
        return document

    async def close(self):
        """Closes the underlying HTTP client if this fetcher created it."""
        if self._owns_client:
            await self.client.aclose()
            logger.info("Closed HTTP client for schedule fetcher")
