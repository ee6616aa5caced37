"""
Warm the holiday cache for one or more years
Usage: uv run prefetch 2025 2026
"""
import asyncio
import sys
from typing import List, Optional

from libur_api.config import settings
from libur_api.core.errors import LiburError
from libur_api.services.holiday_service import HolidayProvider, get_holiday_provider
from libur_api.services.query import validate_year


async def prefetch(provider: HolidayProvider, years: List[str]) -> int:
    """
    Load every year through the provider

    Returns:
        Number of years that failed
    """
    failures = 0
    for raw in years:
        try:
            year = validate_year(raw)
            holidays = await provider.get_holidays(year)
        except LiburError as e:
            failures += 1
            print(f"[{raw}] {e.error}: {e.message}")
            continue
        print(f"[{year}] {len(holidays)} hari libur")
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    years = sys.argv[1:] if argv is None else argv
    if not years:
        print("Usage: uv run prefetch <year> [<year> ...]")
        return 2

    if settings.CACHE_BACKEND == "sqlite":
        from libur_api.database import init_db
        init_db()

    failures = asyncio.run(prefetch(get_holiday_provider(), years))
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
