"""
Error taxonomy for the holiday pipeline

Every error is terminal for the request that triggered it. The HTTP layer maps
``status_code`` and ``error`` onto the ``{error, message}`` response body.
"""
from typing import Optional


class LiburError(Exception):
    """Base class for all holiday API errors"""

    status_code: int = 500
    error: str = "Gagal mengambil data libur"

    @property
    def message(self) -> str:
        return str(self)


class InvalidInput(LiburError):
    """The requested year is not acceptable; raised before any I/O"""

    status_code = 400
    error = "Tahun tidak valid"


class FetchError(LiburError):
    """The upstream page could not be retrieved"""

    def __init__(self, year: int, status: Optional[int] = None, reason: str = ""):
        self.year = year
        self.status = status
        detail = f"Gagal mengambil data dari tanggalan.com (tahun {year}"
        if status is not None:
            detail += f", status {status}"
        detail += ")"
        if reason:
            detail += f": {reason}"
        super().__init__(detail)


class ParseError(LiburError):
    """The upstream HTML could not be parsed into a document"""

    def __init__(self, reason: str = "Gagal parsing HTML"):
        super().__init__(reason)
