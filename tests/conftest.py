"""
Shared fixtures: sample page, fake fetcher, controllable clock
"""
from typing import List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from libur_api.core.errors import FetchError
from libur_api.models import Base
from libur_api.services.cache import MemoryYearCache, SqlYearCache
from libur_api.services.holiday_service import HolidayProvider

SAMPLE_HTML = """
<!DOCTYPE html>
<html>
<head><title>Kalender 2025</title></head>
<body>
  <ul>
    <li class="holiday">
      <span class="date"> 1 Januari </span>
      <span class="title"> Libur Nasional Tahun Baru Masehi </span>
    </li>
    <li class="libur">
      <span class="date">10 Januari</span>
      <span class="title">Hari Kartini</span>
    </li>
    <li class="holiday">
      <span class="date">31 Maret</span>
      <span class="title">Cuti Bersama Idul Fitri</span>
    </li>
    <li class="holiday">
      <span class="title">Tanpa tanggal</span>
    </li>
    <li class="libur">
      <span class="date">17 Agustus</span>
      <span class="title">Libur Nasional Hari Kemerdekaan</span>
    </li>
  </ul>
</body>
</html>
"""


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """Stands in for PageFetcher; records every requested year"""

    def __init__(self, html: str = SAMPLE_HTML, error: Optional[Exception] = None):
        self.html = html
        self.error = error
        self.calls: List[int] = []

    def fetch(self, year: int) -> str:
        self.calls.append(year)
        if self.error is not None:
            raise self.error
        return self.html


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def session_factory():
    """In-memory SQLite shared by every thread of the test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def cache(request, clock, session_factory):
    ttl = 60 * 60 * 24
    if request.param == "memory":
        return MemoryYearCache(ttl_seconds=ttl, clock=clock)
    return SqlYearCache(session_factory, namespace="libur", ttl_seconds=ttl, clock=clock)


@pytest.fixture
def provider(fetcher, cache):
    return HolidayProvider(fetcher, cache)


@pytest.fixture
def failing_fetcher():
    return FakeFetcher(error=FetchError(2025, status=503))


class BrokenCache:
    """Cache whose store is unavailable, e.g. a locked SQLite file"""

    def __init__(self, fail_get: bool = True, fail_set: bool = True):
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.writes: List[int] = []

    def get(self, year):
        if self.fail_get:
            raise RuntimeError("database is locked")
        return None

    def set(self, year, holidays):
        self.writes.append(year)
        if self.fail_set:
            raise RuntimeError("database is locked")
