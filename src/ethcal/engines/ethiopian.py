"""
ethcal.engines.ethiopian
------------------------
Arithmetic Ethiopian (Amete Mihret) calendar. Twelve months of 30 days
followed by Pagume, which has 6 days when year % 4 == 3 and 5 otherwise.
All conversions go through the Julian Day Number of the civil day.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from ..core.errors import InvalidDateError
from ..core.time import from_jdn, to_jdn
from ..core.types import EthiopianDate

# JDN of Meskerem 1, year 1
EPOCH_JDN = 1724221


def is_leap_year(year: int) -> bool:
    return year % 4 == 3

def days_in_month(year: int, month: int) -> int:
    if not (1 <= month <= 13):
        raise InvalidDateError(f"month must be in 1..13, got {month}")
    if month < 13:
        return 30
    return 6 if is_leap_year(year) else 5

def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365

def ethiopian_to_jdn(year: int, month: int, day: int) -> int:
    return EPOCH_JDN + 365 * (year - 1) + year // 4 + 30 * (month - 1) + day - 1

def jdn_to_ethiopian(jdn: int) -> EthiopianDate:
    year = (4 * (jdn - EPOCH_JDN) + 1463) // 1461
    offset = jdn - ethiopian_to_jdn(year, 1, 1)
    month = offset // 30 + 1
    day = offset - 30 * (month - 1) + 1
    return EthiopianDate(year, month, day)

def to_jdn_eth(d: EthiopianDate) -> int:
    return ethiopian_to_jdn(d.year, d.month, d.day)

def to_gregorian(d: EthiopianDate) -> date:
    return from_jdn(to_jdn_eth(d))

def to_ethiopian(d: date) -> EthiopianDate:
    return jdn_to_ethiopian(to_jdn(d))

def add_days(d: EthiopianDate, n: int) -> EthiopianDate:
    return jdn_to_ethiopian(to_jdn_eth(d) + n)

def diff_in_days(a: EthiopianDate, b: EthiopianDate) -> int:
    """Signed number of days from b to a."""
    return to_jdn_eth(a) - to_jdn_eth(b)

def now(today: Optional[date] = None) -> EthiopianDate:
    """Current Ethiopian date (local civil day)."""
    return to_ethiopian(today if today is not None else date.today())

def month_calendar(year: int, month: int) -> List[Tuple[EthiopianDate, date]]:
    """All (Ethiopian, Gregorian) day pairs of one month, in order."""
    first = ethiopian_to_jdn(year, month, 1)
    n = days_in_month(year, month)
    return [(EthiopianDate(year, month, k + 1), from_jdn(first + k)) for k in range(n)]

def month_bounds(year: int, month: int) -> Tuple[int, int]:
    """Inclusive (first_jdn, last_jdn) of an Ethiopian month."""
    first = ethiopian_to_jdn(year, month, 1)
    return first, first + days_in_month(year, month) - 1

def year_bounds(year: int) -> Tuple[int, int]:
    first = ethiopian_to_jdn(year, 1, 1)
    return first, first + days_in_year(year) - 1
