"""
Holiday API
"""
from fastapi import APIRouter, Depends

from libur_api.api.deps import get_provider
from libur_api.schemas import (
    ErrorResponse,
    HolidayListResponse,
    HolidayMonthResponse,
    HolidayDateResponse,
)
from libur_api.services import query
from libur_api.services.holiday_service import HolidayProvider

router = APIRouter(
    prefix="/api/libur",
    tags=["libur"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("/{year}", response_model=HolidayListResponse)
async def get_libur(
    year: str,
    provider: HolidayProvider = Depends(get_provider)
):
    """All holidays of a year"""
    return await query.holidays_by_year(provider, year)


@router.get("/{year}/bulan/{bulan}", response_model=HolidayMonthResponse)
async def get_libur_bulan(
    year: str,
    bulan: str,
    provider: HolidayProvider = Depends(get_provider)
):
    """Holidays whose date contains the month token, e.g. agustus"""
    return await query.holidays_by_month(provider, year, bulan)


@router.get("/{year}/tanggal/{tanggal}", response_model=HolidayDateResponse)
async def get_libur_tanggal(
    year: str,
    tanggal: str,
    provider: HolidayProvider = Depends(get_provider)
):
    """Holidays whose date starts with the given token, e.g. 17"""
    return await query.holidays_by_date(provider, year, tanggal)
