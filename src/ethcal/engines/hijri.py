"""
ethcal.engines.hijri
--------------------
Tabular (arithmetic) Islamic calendar with the civil epoch, 16 July 622 (Julian).
Leap years are those with (11*y + 14) % 30 < 11. Observed dates may differ by a
day or two from local moon sighting.
"""

from __future__ import annotations

from typing import Tuple

from ..core.errors import InvalidDateError

EPOCH_JDN = 1948440


def is_leap_year(year: int) -> bool:
    return (11 * year + 14) % 30 < 11

def days_in_month(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise InvalidDateError(f"Hijri month must be in 1..12, got {month}")
    if month == 12 and is_leap_year(year):
        return 30
    return 30 if month % 2 == 1 else 29

def hijri_to_jdn(year: int, month: int, day: int) -> int:
    return (
        day
        + (59 * (month - 1) + 1) // 2
        + (year - 1) * 354
        + (3 + 11 * year) // 30
        + EPOCH_JDN
        - 1
    )

def jdn_to_hijri(jdn: int) -> Tuple[int, int, int]:
    year = (30 * (jdn - EPOCH_JDN) + 10646) // 10631
    start = hijri_to_jdn(year, 1, 1)
    # ceil((jdn - start - 29) / 29.5) + 1, clamped to 12
    month = min(12, -((-2 * (jdn - start - 29)) // 59) + 1)
    month = max(1, month)
    day = jdn - hijri_to_jdn(year, month, 1) + 1
    return year, month, day
