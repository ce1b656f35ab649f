"""
ethcal.engines.computus
-----------------------
Bahire Hasab anchor: Ethiopian Fasika coincides with Orthodox Easter, which is
computed on the Julian calendar (Meeus) and mapped through the JDN.
"""

from __future__ import annotations

from ..core.time import julian_to_jdn
from ..core.types import EthiopianDate
from .ethiopian import jdn_to_ethiopian

# Ethiopian year Y starts in September of Gregorian year Y + 7; its spring is in Y + 8.
GREGORIAN_OFFSET = 8


def julian_easter(g_year: int) -> tuple[int, int]:
    """(month, day) of Easter Sunday on the Julian calendar."""
    a = g_year % 4
    b = g_year % 7
    c = g_year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    n = d + e + 114
    return n // 31, n % 31 + 1

def fasika_jdn(year: int) -> int:
    g_year = year + GREGORIAN_OFFSET
    month, day = julian_easter(g_year)
    return julian_to_jdn(g_year, month, day)

def fasika(year: int) -> EthiopianDate:
    """Ethiopian date of Fasika (Easter Sunday) in Ethiopian year `year`."""
    return jdn_to_ethiopian(fasika_jdn(year))
