"""
Holiday page parser - extracts holiday entries from the tanggalan.com year page

Only this module knows the page markup, and only HolidaySelector encodes it.
"""
from dataclasses import dataclass
from typing import List

from bs4 import BeautifulSoup
from loguru import logger

from libur_api.core.errors import ParseError
from libur_api.schemas import Holiday
from libur_api.services.classifier import classify


@dataclass(frozen=True)
class HolidaySelector:
    """CSS selectors describing where holiday entries live in the page"""

    entry: str
    date: str
    title: str


# Markup used by tanggalan.com
DEFAULT_SELECTOR = HolidaySelector(
    entry=".holiday, .libur",
    date=".date",
    title=".title",
)


def parse_holidays(html: str, selector: HolidaySelector = DEFAULT_SELECTOR) -> List[Holiday]:
    """
    Parse a year page into holiday records

    Entries without a date or title element, or with an empty title, are
    skipped. Output keeps document order.

    Args:
        html: raw HTML of one year page
        selector: markup rule for entries, dates and titles

    Returns:
        List of Holiday, empty when the page has no matching entries

    Raises:
        ParseError: the input is not an HTML document
    """
    # 1. Reject empty input and input without any markup
    if not isinstance(html, str) or not html.strip():
        raise ParseError("Gagal parsing HTML: dokumen kosong")

    soup = BeautifulSoup(html, "html.parser")
    if soup.find() is None:
        raise ParseError("Gagal parsing HTML: bukan dokumen HTML")

    # 2. Walk entries in document order
    holidays: List[Holiday] = []
    skipped = 0

    for element in soup.select(selector.entry):
        date_el = element.select_one(selector.date)
        title_el = element.select_one(selector.title)

        # Incomplete entry: skip, no placeholder
        if date_el is None or title_el is None:
            skipped += 1
            continue

        date = date_el.get_text().strip()
        title = title_el.get_text().strip()
        if not title:
            skipped += 1
            continue

        # 3. Classify and build the record
        holidays.append(Holiday(date=date, title=title, type=classify(title)))

    if skipped:
        logger.debug(f"[Parser] skipped {skipped} incomplete entries")
    logger.info(f"[Parser] parsed {len(holidays)} holidays")

    return holidays
