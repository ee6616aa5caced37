"""
API dependencies
"""
from libur_api.services.holiday_service import HolidayProvider, get_holiday_provider


async def get_provider() -> HolidayProvider:
    """Holiday provider used by the routes; overridden in tests"""
    return get_holiday_provider()
