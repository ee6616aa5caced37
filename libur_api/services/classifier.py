"""
Holiday title classifier
"""
import re
from typing import List, Pattern, Tuple

from libur_api.schemas import HolidayType

# Evaluated in order; the last matching rule wins
CLASSIFICATION_RULES: List[Tuple[Pattern, HolidayType]] = [
    (re.compile(r"libur nasional", re.IGNORECASE), HolidayType.NATIONAL_HOLIDAY),
    (re.compile(r"cuti bersama", re.IGNORECASE), HolidayType.JOINT_LEAVE),
]


def classify(title: str) -> HolidayType:
    """
    Map a holiday title to its category

    Args:
        title: holiday title as shown on the page

    Returns:
        HolidayType, OBSERVANCE when no marker phrase matches
    """
    holiday_type = HolidayType.OBSERVANCE
    for pattern, candidate in CLASSIFICATION_RULES:
        if pattern.search(title):
            holiday_type = candidate
    return holiday_type
