"""
Pydantic models for holiday records and API responses
"""
from enum import Enum
from pydantic import BaseModel, Field
from typing import List


class HolidayType(str, Enum):
    """Holiday category; the value is the wire format"""

    NATIONAL_HOLIDAY = "libur_nasional"
    JOINT_LEAVE = "cuti_bersama"
    OBSERVANCE = "hari_besar"


class Holiday(BaseModel):
    """One holiday entry as rendered by the source page"""

    date: str = Field(..., description="Tanggal libur, as written on the page, e.g. '1 Januari'")
    title: str = Field(..., min_length=1, description="Nama hari libur")
    type: HolidayType = HolidayType.OBSERVANCE

    class Config:
        frozen = True


# ==================== Response models ====================

class HolidayListResponse(BaseModel):
    """Holidays of one year"""
    year: int
    total: int
    data: List[Holiday]


class HolidayMonthResponse(BaseModel):
    """Holidays of one year filtered by month token"""
    year: int
    bulan: str
    total: int
    data: List[Holiday]


class HolidayDateResponse(BaseModel):
    """Holidays of one year filtered by date prefix"""
    year: int
    tanggal: str
    total: int
    data: List[Holiday]


class ErrorResponse(BaseModel):
    """Error body"""
    error: str
    message: str


class ServiceInfo(BaseModel):
    """Service metadata returned by the index route"""
    name: str
    runtime: str
    source: str
    endpoints: List[str]
