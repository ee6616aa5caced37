"""
Page fetcher - retrieves the raw year page from tanggalan.com, no parsing
"""
from typing import Optional

import requests
from loguru import logger

from libur_api.config import settings
from libur_api.core.errors import FetchError


class PageFetcher:
    """Single-attempt HTTP fetcher for the per-year holiday page"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.SOURCE_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.FETCH_TIMEOUT
        self._session = session or requests.Session()

    def build_url(self, year: int) -> str:
        return f"{self.base_url}/{year}"

    def fetch(self, year: int) -> str:
        """
        Download the holiday page of a year

        Args:
            year: calendar year

        Returns:
            Response body as text

        Raises:
            FetchError: transport failure or non-2xx status
        """
        url = self.build_url(year)
        headers = {
            "accept": "text/html,application/xhtml+xml",
            "user-agent": settings.USER_AGENT,
        }

        # 1. Single attempt, no retry
        logger.debug(f"[Fetcher] GET {url}")
        try:
            response = self._session.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"[Fetcher] request to {url} failed: {e}")
            raise FetchError(year, reason=str(e)) from e

        # 2. Only 2xx counts as success
        if not 200 <= response.status_code < 300:
            logger.error(f"[Fetcher] {url} returned status {response.status_code}")
            raise FetchError(year, status=response.status_code)

        # 3. Without a declared charset requests assumes ISO-8859-1; detect it instead
        if not response.encoding or response.encoding.lower() == "iso-8859-1":
            response.encoding = response.apparent_encoding

        logger.info(f"[Fetcher] {url} - {response.status_code} ({len(response.text)} chars)")
        return response.text
