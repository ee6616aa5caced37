"""
Indonesian holiday provider

Data source: tanggalan.com (scraped per year, cached 24h)
"""
import asyncio
from typing import Callable, Dict, List, Optional

from loguru import logger

from libur_api.config import settings
from libur_api.schemas import Holiday
from libur_api.services.cache import YearCache, MemoryYearCache, SqlYearCache
from libur_api.services.fetcher import PageFetcher
from libur_api.services.parser import parse_holidays


class HolidayProvider:
    """Serves holidays of a year from the cache, scraping on a miss"""

    def __init__(
        self,
        fetcher: PageFetcher,
        cache: YearCache,
        parser: Callable[[str], List[Holiday]] = parse_holidays,
    ):
        self._fetcher = fetcher
        self._cache = cache
        self._parse = parser
        # In-flight loads: {year: task}
        self._pending: Dict[int, asyncio.Task] = {}

    async def get_holidays(self, year: int) -> List[Holiday]:
        """
        Return the holidays of a year

        Concurrent misses for the same year share a single fetch+parse.
        Nothing is cached unless both fetch and parse succeed.

        Args:
            year: calendar year, already validated

        Returns:
            Holidays in page order

        Raises:
            FetchError: the page could not be downloaded
            ParseError: the page could not be parsed
        """
        # 1. Join an in-flight load for this year if there is one
        task = self._pending.get(year)
        if task is None:
            # 2. Otherwise start one; cache lookup, fetch and parse all run inside it
            task = asyncio.ensure_future(self._load(year))
            self._pending[year] = task
            task.add_done_callback(lambda t: self._forget(year, t))
        else:
            logger.debug(f"[Holiday] joining in-flight load for {year}")

        # 3. A cancelled caller leaves the load running for the others
        holidays = await asyncio.shield(task)
        return list(holidays)

    async def _load(self, year: int) -> List[Holiday]:
        """
        Resolve one year: cache first, then fetch + parse + cache write

        Cache failures are logged and never fail the request; a broken cache
        degrades to a live fetch.
        """
        # 1. Cache lookup, off the event loop
        try:
            cached = await asyncio.to_thread(self._cache.get, year)
        except Exception as e:
            logger.warning(f"[Holiday] cache read for {year} failed, treating as miss: {e}")
            cached = None

        if cached is not None:
            logger.debug(f"[Holiday] cache hit for {year}")
            return cached

        # 2. Fetch and parse; errors propagate and nothing is written
        logger.info(f"[Holiday] cache miss for {year}, scraping")
        html = await asyncio.to_thread(self._fetcher.fetch, year)
        holidays = self._parse(html)

        # 3. Write after full success only
        try:
            await asyncio.to_thread(self._cache.set, year, holidays)
        except Exception as e:
            logger.warning(f"[Holiday] cache write for {year} failed, serving uncached: {e}")
        else:
            logger.info(f"[Holiday] cached {len(holidays)} holidays for {year}")
        return holidays

    def _forget(self, year: int, task: asyncio.Task) -> None:
        if self._pending.get(year) is task:
            del self._pending[year]
        # Mark the error as retrieved when every caller has gone away
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"[Holiday] load for {year} failed: {task.exception()}")


def build_cache() -> YearCache:
    """Build the cache backend selected by settings.CACHE_BACKEND"""
    if settings.CACHE_BACKEND == "memory":
        return MemoryYearCache(ttl_seconds=settings.CACHE_TTL_SECONDS)
    if settings.CACHE_BACKEND == "sqlite":
        from libur_api.database import SessionLocal

        return SqlYearCache(
            SessionLocal,
            namespace=settings.CACHE_NAMESPACE,
            ttl_seconds=settings.CACHE_TTL_SECONDS,
        )
    raise ValueError(f"Unknown CACHE_BACKEND: {settings.CACHE_BACKEND}")


# Global singleton
_holiday_provider: Optional[HolidayProvider] = None


def get_holiday_provider() -> HolidayProvider:
    """Return the process-wide holiday provider"""
    global _holiday_provider
    if _holiday_provider is None:
        _holiday_provider = HolidayProvider(PageFetcher(), build_cache())
    return _holiday_provider
