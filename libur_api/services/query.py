"""
Holiday queries - year validation and in-memory filters over the provider result

Month and date filters are plain text matches against the page's date string
("17 Agustus"), not calendar arithmetic.
"""
import re
from typing import List, Union

from libur_api.config import settings
from libur_api.core.errors import InvalidInput
from libur_api.schemas import (
    Holiday,
    HolidayListResponse,
    HolidayMonthResponse,
    HolidayDateResponse,
)
from libur_api.services.holiday_service import HolidayProvider

_YEAR_PATTERN = re.compile(r"-?[0-9]+\Z")


def validate_year(raw: Union[int, str]) -> int:
    """
    Validate a requested year

    Args:
        raw: year as an int or a decimal string from the URL

    Returns:
        The year as int

    Raises:
        InvalidInput: not an integer, or earlier than settings.MIN_YEAR
    """
    if isinstance(raw, bool):
        raise InvalidInput(f"Tahun harus berupa angka: {raw!r}")
    if isinstance(raw, int):
        year = raw
    else:
        text = str(raw).strip()
        if not _YEAR_PATTERN.match(text):
            raise InvalidInput(f"Tahun harus berupa angka: {raw!r}")
        year = int(text)

    if year < settings.MIN_YEAR:
        raise InvalidInput(f"Tahun minimal {settings.MIN_YEAR}, diterima {year}")
    return year


def filter_by_month(holidays: List[Holiday], bulan: str) -> List[Holiday]:
    """Keep holidays whose date contains the month token, ignoring case"""
    token = bulan.lower()
    return [h for h in holidays if token in h.date.lower()]


def filter_by_date(holidays: List[Holiday], tanggal: str) -> List[Holiday]:
    """Keep holidays whose date starts with the token (case-sensitive)"""
    return [h for h in holidays if h.date.startswith(tanggal)]


async def holidays_by_year(provider: HolidayProvider, raw_year: Union[int, str]) -> HolidayListResponse:
    """
    All holidays of a year

    Args:
        provider: holiday provider
        raw_year: year from the URL, validated before any fetch

    Returns:
        HolidayListResponse with year, total and data

    Raises:
        InvalidInput: bad year
        FetchError, ParseError: the year could not be loaded
    """
    year = validate_year(raw_year)
    data = await provider.get_holidays(year)
    return HolidayListResponse(year=year, total=len(data), data=data)


async def holidays_by_month(
    provider: HolidayProvider, raw_year: Union[int, str], bulan: str
) -> HolidayMonthResponse:
    """
    Holidays of a year whose date contains the month token

    Args:
        provider: holiday provider
        raw_year: year from the URL
        bulan: month token, e.g. "agustus"; echoed lower-cased

    Returns:
        HolidayMonthResponse
    """
    year = validate_year(raw_year)
    bulan = bulan.lower()
    data = filter_by_month(await provider.get_holidays(year), bulan)
    return HolidayMonthResponse(year=year, bulan=bulan, total=len(data), data=data)


async def holidays_by_date(
    provider: HolidayProvider, raw_year: Union[int, str], tanggal: str
) -> HolidayDateResponse:
    """
    Holidays of a year whose date starts with the token

    Args:
        provider: holiday provider
        raw_year: year from the URL
        tanggal: date prefix, e.g. "17"; matched case-sensitively

    Returns:
        HolidayDateResponse
    """
    year = validate_year(raw_year)
    data = filter_by_date(await provider.get_holidays(year), tanggal)
    return HolidayDateResponse(year=year, tanggal=tanggal, total=len(data), data=data)
