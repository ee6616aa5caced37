"""
Year cache - TTL-bounded store of parsed holiday records, keyed by year

Expiry is checked lazily on read. Every write replaces the whole entry.
"""
import json
import time
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Tuple

from loguru import logger
from pydantic import ValidationError
from sqlalchemy.orm import Session

from libur_api.models import HolidayCacheEntry
from libur_api.schemas import Holiday


class YearCache(ABC):
    """Cache interface used by the holiday provider"""

    @abstractmethod
    def get(self, year: int) -> Optional[List[Holiday]]:
        """Return the cached records of a year, or None when absent or expired"""

    @abstractmethod
    def set(self, year: int, holidays: List[Holiday]) -> None:
        """Store the records of a year, overwriting any previous entry"""


class MemoryYearCache(YearCache):
    """Process-local cache"""

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # {year: (expires_at, holidays)}
        self._entries: Dict[int, Tuple[float, Tuple[Holiday, ...]]] = {}

    def get(self, year: int) -> Optional[List[Holiday]]:
        entry = self._entries.get(year)
        if entry is None:
            return None
        expires_at, holidays = entry
        if self._clock() >= expires_at:
            return None
        return list(holidays)

    def set(self, year: int, holidays: List[Holiday]) -> None:
        self._entries[year] = (self._clock() + self.ttl_seconds, tuple(holidays))


class SqlYearCache(YearCache):
    """Key/value cache stored in the holiday_cache table"""

    def __init__(
        self,
        session_factory: Callable[[], Session],
        namespace: str,
        ttl_seconds: float,
        clock: Callable[[], float] = time.time,
    ):
        self._session_factory = session_factory
        self.namespace = namespace
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def get(self, year: int) -> Optional[List[Holiday]]:
        db = self._session_factory()
        try:
            # Expired rows are ignored, not deleted
            entry = db.get(HolidayCacheEntry, (self.namespace, year))
            if entry is None or self._clock() >= entry.expires_at:
                return None
            payload = entry.payload
        finally:
            db.close()

        # Decode outside the session; an unreadable payload reads as a miss
        try:
            return [Holiday.model_validate(item) for item in json.loads(payload)]
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning(f"[Cache] unreadable entry for {self.namespace}/{year}, ignoring: {e}")
            return None

    def set(self, year: int, holidays: List[Holiday]) -> None:
        payload = json.dumps(
            [h.model_dump(mode="json") for h in holidays], ensure_ascii=False
        )
        db = self._session_factory()
        try:
            # Upsert by (namespace, year)
            db.merge(
                HolidayCacheEntry(
                    namespace=self.namespace,
                    year=year,
                    payload=payload,
                    expires_at=self._clock() + self.ttl_seconds,
                )
            )
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
