"""
ethcal.fasting
--------------
Fasting periods per Ethiopian year. Each key maps to a calculator returning
the inclusive period, or None for weekly recurring fasts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .core.types import EthiopianDate, FastingInfo, FastingPeriod
from .engines import computus, hijri
from .engines.ethiopian import ethiopian_to_jdn, jdn_to_ethiopian, year_bounds
from .holidays import HolidayTags, genna
from .i18n import localized, validate_language


class FastingKeys:
    ABIY_TSOME = "ABIY_TSOME"
    TSOME_HAWARYAT = "TSOME_HAWARYAT"
    TSOME_NEBIYAT = "TSOME_NEBIYAT"
    NINEVEH = "NINEVEH"
    RAMADAN = "RAMADAN"
    FILSETA = "FILSETA"
    TSOME_DIHENET = "TSOME_DIHENET"

    ALL: Tuple[str, ...] = (
        ABIY_TSOME, TSOME_HAWARYAT, TSOME_NEBIYAT, NINEVEH, RAMADAN, FILSETA, TSOME_DIHENET,
    )

PeriodFunc = Callable[[int], Optional[Tuple[int, int]]]
SpansFunc = Callable[[int], List[Tuple[int, int]]]

@dataclass(frozen=True)
class FastRule:
    key: str
    name: Dict[str, str]
    description: Dict[str, str]
    tags: Tuple[str, ...]
    period: PeriodFunc  # Ethiopian year -> inclusive (start_jdn, end_jdn) or None
    spans: Optional[SpansFunc] = None  # every span overlapping the year, for fasts that cross New Year

_REGISTRY: Dict[str, FastRule] = {}


def register_fast(rule: FastRule, *, overwrite: bool = False) -> None:
    if (not overwrite) and (rule.key in _REGISTRY):
        raise KeyError(f"Fast '{rule.key}' already exists. Use overwrite=True to replace.")
    _REGISTRY[rule.key] = rule

def list_fasts() -> List[str]:
    return list(_REGISTRY)

# ---------------------------------------------------------
# Period calculators
# ---------------------------------------------------------

def _around_fasika(start: int, end: int) -> PeriodFunc:
    def period(year: int) -> Tuple[int, int]:
        f = computus.fasika_jdn(year)
        return f + start, f + end
    return period

def _hawaryat(year: int) -> Optional[Tuple[int, int]]:
    # Monday after Peraklitos through Hamle 4, the eve of the Apostles' feast.
    start = computus.fasika_jdn(year) + 50
    end = ethiopian_to_jdn(year, 11, 4)
    return (start, end) if start <= end else None

def _nebiyat(year: int) -> Tuple[int, int]:
    return ethiopian_to_jdn(year, 3, 15), genna(year)[0] - 1

def _filseta(year: int) -> Tuple[int, int]:
    return ethiopian_to_jdn(year, 12, 1), ethiopian_to_jdn(year, 12, 14)

def _ramadans(year: int) -> List[Tuple[int, int]]:
    # A 354/355-day Hijri year means up to two Ramadans start in one Ethiopian
    # year, and one begun in Nehase or Pagume runs on into the next year.
    first, last = year_bounds(year)
    out = []
    for hy in range(hijri.jdn_to_hijri(first)[0], hijri.jdn_to_hijri(last)[0] + 1):
        start = hijri.hijri_to_jdn(hy, 9, 1)
        end = hijri.hijri_to_jdn(hy, 10, 1) - 1
        if start <= last and end >= first:
            out.append((start, end))
    return out

def _ramadan(year: int) -> Optional[Tuple[int, int]]:
    # First Ramadan that starts within the Ethiopian year.
    first = year_bounds(year)[0]
    return next(((s, e) for s, e in _ramadans(year) if s >= first), None)

def _weekly(year: int) -> None:
    return None

_C = (HolidayTags.RELIGIOUS, HolidayTags.CHRISTIAN)

for _rule in (
    FastRule(
        FastingKeys.ABIY_TSOME,
        {"amharic": "ዐቢይ ጾም", "english": "Great Lent"},
        {"amharic": "ከፋሲካ በፊት ያለው የ፶፭ ቀን ጾም", "english": "The 55-day fast before Fasika"},
        _C, _around_fasika(-55, -1),
    ),
    FastRule(
        FastingKeys.TSOME_HAWARYAT,
        {"amharic": "ጾመ ሐዋርያት", "english": "Fast of the Apostles"},
        {"amharic": "ከጰራቅሊጦስ በኋላ እስከ ሐምሌ ፬", "english": "From the Monday after Pentecost to Hamle 4"},
        _C, _hawaryat,
    ),
    FastRule(
        FastingKeys.TSOME_NEBIYAT,
        {"amharic": "ጾመ ነቢያት", "english": "Fast of the Prophets"},
        {"amharic": "ከኅዳር ፲፭ እስከ ገና ዋዜማ", "english": "Advent fast from Hidar 15 to the eve of Genna"},
        _C, _nebiyat,
    ),
    FastRule(
        FastingKeys.NINEVEH,
        {"amharic": "ጾመ ነነዌ", "english": "Fast of Nineveh"},
        {"amharic": "የሦስት ቀን ጾም", "english": "Three-day fast two weeks before Great Lent"},
        _C, _around_fasika(-69, -67),
    ),
    FastRule(
        FastingKeys.RAMADAN,
        {"amharic": "ረመዳን", "english": "Ramadan"},
        {"amharic": "የረመዳን ወር ጾም", "english": "Month of fasting in the Islamic calendar"},
        (HolidayTags.RELIGIOUS, HolidayTags.MUSLIM), _ramadan, _ramadans,
    ),
    FastRule(
        FastingKeys.FILSETA,
        {"amharic": "ጾመ ፍልሰታ", "english": "Fast of the Assumption"},
        {"amharic": "ከነሐሴ ፩ እስከ ፲፬", "english": "From Nehase 1 to Nehase 14"},
        _C, _filseta,
    ),
    FastRule(
        FastingKeys.TSOME_DIHENET,
        {"amharic": "ጾመ ድኅነት", "english": "Fast of Salvation"},
        {"amharic": "የረቡዕና የዓርብ ጾም", "english": "Weekly fast on Wednesdays and Fridays"},
        _C, _weekly,
    ),
):
    register_fast(_rule)

# ---------------------------------------------------------
# Lookups
# ---------------------------------------------------------

def _rule(key: str) -> FastRule:
    if key not in _REGISTRY:
        raise KeyError(f"Unknown fast '{key}'. Available: {sorted(_REGISTRY)}")
    return _REGISTRY[key]

def _to_period(span: Tuple[int, int]) -> FastingPeriod:
    start, end = span
    return FastingPeriod(start=jdn_to_ethiopian(start), end=jdn_to_ethiopian(end))

def get_fasting_period(key: str, year: int) -> Optional[FastingPeriod]:
    span = _rule(key).period(year)
    return None if span is None else _to_period(span)

def get_fasting_periods(key: str, year: int) -> List[FastingPeriod]:
    """All periods overlapping the Ethiopian year, including one carried over from the year before."""
    rule = _rule(key)
    if rule.spans is not None:
        spans = rule.spans(year)
    else:
        span = rule.period(year)
        spans = [] if span is None else [span]
    return [_to_period(s) for s in spans]

def find_fasting_period(key: str, d: EthiopianDate) -> Optional[FastingPeriod]:
    for p in get_fasting_periods(key, d.year):
        if contains(p, d):
            return p
    return None

def get_fasting_info(key: str, year: int, *, lang: str = "amharic") -> FastingInfo:
    validate_language(lang)
    period = get_fasting_period(key, year)
    rule = _rule(key)
    return FastingInfo(
        key=key,
        name=localized(rule.name, lang),
        description=localized(rule.description, lang),
        period=period,
        tags=rule.tags,
    )

def is_weekly_fast_day(weekday: int) -> bool:
    """Wednesday and Friday under 0=Sunday indexing."""
    return weekday in (3, 5)

def contains(period: FastingPeriod, d: EthiopianDate) -> bool:
    return period.start.code <= d.code <= period.end.code
