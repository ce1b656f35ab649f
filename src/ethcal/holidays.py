"""
ethcal.holidays
---------------
Holiday table. Every holiday is a rule that yields the JDNs it falls on within
one Ethiopian year; month lookups intersect those with the month bounds.

- fixed: a (month, day) label of the Ethiopian calendar
- movable: an offset in days from Fasika (Bahire Hasab)
- hijri: a (month, day) label of the tabular Islamic calendar, which may occur
  zero, one or two times within an Ethiopian year
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .core.errors import HolidayLookupError
from .core.time import from_jdn
from .core.types import Holiday
from .engines import computus, hijri
from .engines.ethiopian import ethiopian_to_jdn, jdn_to_ethiopian, month_bounds, year_bounds
from .i18n import localized, validate_language


class HolidayTags:
    PUBLIC = "public"
    RELIGIOUS = "religious"
    CHRISTIAN = "christian"
    MUSLIM = "muslim"
    STATE = "state"
    CULTURAL = "cultural"
    OTHER = "other"

    ALL: Tuple[str, ...] = (PUBLIC, RELIGIOUS, CHRISTIAN, MUSLIM, STATE, CULTURAL, OTHER)


@dataclass(frozen=True)
class HolidayRule:
    key: str
    name: Dict[str, str]
    description: Dict[str, str]
    tags: Tuple[str, ...]
    movable: bool
    occurrences: Callable[[int], List[int]]  # Ethiopian year -> JDNs inside that year

_REGISTRY: Dict[str, HolidayRule] = {}


def register_holiday(rule: HolidayRule, *, overwrite: bool = False) -> None:
    if (not overwrite) and (rule.key in _REGISTRY):
        raise KeyError(f"Holiday '{rule.key}' already exists. Use overwrite=True to replace.")
    _REGISTRY[rule.key] = rule

def list_holidays() -> List[str]:
    return list(_REGISTRY)

# ---------------------------------------------------------
# Occurrence builders
# ---------------------------------------------------------

def fixed(month: int, day: int) -> Callable[[int], List[int]]:
    return lambda year: [ethiopian_to_jdn(year, month, day)]

def genna(year: int) -> List[int]:
    # Tahsas 28 when the previous year had a 6-day Pagume, keeping Genna on 7 January.
    day = 28 if year % 4 == 0 else 29
    return [ethiopian_to_jdn(year, 4, day)]

def from_fasika(offset: int) -> Callable[[int], List[int]]:
    return lambda year: [computus.fasika_jdn(year) + offset]

def hijri_label(month: int, day: int) -> Callable[[int], List[int]]:
    def occurrences(year: int) -> List[int]:
        first, last = year_bounds(year)
        h_first = hijri.jdn_to_hijri(first)[0]
        h_last = hijri.jdn_to_hijri(last)[0]
        out = []
        for h in range(h_first, h_last + 1):
            j = hijri.hijri_to_jdn(h, month, day)
            if first <= j <= last:
                out.append(j)
        return out
    return occurrences

# ---------------------------------------------------------
# Standard table
# ---------------------------------------------------------

_T = HolidayTags

_STANDARD: Sequence[Tuple[str, Tuple[str, str], Tuple[str, str], Tuple[str, ...], bool, Callable[[int], List[int]]]] = (
    ("enkutatash", ("እንቁጣጣሽ", "Enkutatash"),
     ("የኢትዮጵያ አዲስ ዓመት", "Ethiopian New Year"),
     (_T.PUBLIC, _T.CULTURAL), False, fixed(1, 1)),
    ("meskel", ("መስቀል", "Meskel"),
     ("የመስቀል በዓል", "Finding of the True Cross"),
     (_T.PUBLIC, _T.RELIGIOUS, _T.CHRISTIAN), False, fixed(1, 17)),
    ("genna", ("ገና", "Genna"),
     ("የልደት በዓል", "Ethiopian Christmas"),
     (_T.PUBLIC, _T.RELIGIOUS, _T.CHRISTIAN), False, genna),
    ("timket", ("ጥምቀት", "Timket"),
     ("የጥምቀት በዓል", "Epiphany"),
     (_T.PUBLIC, _T.RELIGIOUS, _T.CHRISTIAN), False, fixed(5, 11)),
    ("martyrs_day", ("የሰማዕታት ቀን", "Martyrs' Day"),
     ("የየካቲት ፲፪ ሰማዕታት መታሰቢያ", "Remembrance of the victims of Yekatit 12"),
     (_T.STATE,), False, fixed(6, 12)),
    ("adwa", ("የአድዋ ድል በዓል", "Adwa Victory Day"),
     ("የአድዋ ድል መታሰቢያ", "Victory at the Battle of Adwa"),
     (_T.PUBLIC, _T.STATE), False, fixed(6, 23)),
    ("labour_day", ("የሠራተኞች ቀን", "Labour Day"),
     ("ዓለም አቀፍ የሠራተኞች ቀን", "International Workers' Day"),
     (_T.PUBLIC, _T.STATE), False, fixed(8, 23)),
    ("patriots_victory", ("የአርበኞች ቀን", "Patriots' Victory Day"),
     ("የአርበኞች የድል ቀን", "Liberation from the Italian occupation"),
     (_T.PUBLIC, _T.STATE), False, fixed(8, 27)),
    ("derg_downfall", ("ግንቦት ፳", "Derg Downfall Day"),
     ("ደርግ የወደቀበት ቀን", "Downfall of the Derg regime"),
     (_T.PUBLIC, _T.STATE), False, fixed(9, 20)),
    ("filseta_feast", ("ፍልሰታ ለማርያም", "Filseta"),
     ("የእመቤታችን ዕርገት", "Assumption of Mary"),
     (_T.RELIGIOUS, _T.CHRISTIAN), False, fixed(12, 16)),
    ("debre_zeit", ("ደብረ ዘይት", "Debre Zeit"),
     ("የዐቢይ ጾም እኩሌታ", "Mid-Lent, Sermon on the Mount of Olives"),
     (_T.RELIGIOUS, _T.CHRISTIAN), True, from_fasika(-28)),
    ("hosanna", ("ሆሳዕና", "Hosanna"),
     ("የሆሳዕና በዓል", "Palm Sunday"),
     (_T.RELIGIOUS, _T.CHRISTIAN), True, from_fasika(-7)),
    ("siklet", ("ስቅለት", "Siklet"),
     ("የስቅለት ዓርብ", "Good Friday"),
     (_T.PUBLIC, _T.RELIGIOUS, _T.CHRISTIAN), True, from_fasika(-2)),
    ("fasika", ("ፋሲካ", "Fasika"),
     ("የትንሣኤ በዓል", "Ethiopian Easter"),
     (_T.PUBLIC, _T.RELIGIOUS, _T.CHRISTIAN), True, from_fasika(0)),
    ("rikbe_kahnat", ("ርክበ ካህናት", "Rikbe Kahnat"),
     ("የካህናት ጉባኤ", "Meeting of the Priests"),
     (_T.RELIGIOUS, _T.CHRISTIAN), True, from_fasika(24)),
    ("erget", ("ዕርገት", "Erget"),
     ("የዕርገት በዓል", "Ascension"),
     (_T.RELIGIOUS, _T.CHRISTIAN), True, from_fasika(39)),
    ("peraklitos", ("ጰራቅሊጦስ", "Peraklitos"),
     ("የመንፈስ ቅዱስ መውረድ", "Pentecost"),
     (_T.RELIGIOUS, _T.CHRISTIAN), True, from_fasika(49)),
    ("mawlid", ("መውሊድ", "Mawlid"),
     ("የነቢዩ መሐመድ ልደት", "Birth of the Prophet Muhammad"),
     (_T.PUBLIC, _T.RELIGIOUS, _T.MUSLIM), True, hijri_label(3, 12)),
    ("eid_fitr", ("ዒድ አል ፈጥር", "Eid al-Fitr"),
     ("የረመዳን ጾም ፍቺ", "End of the Ramadan fast"),
     (_T.PUBLIC, _T.RELIGIOUS, _T.MUSLIM), True, hijri_label(10, 1)),
    ("eid_adha", ("ዒድ አል አድሐ", "Eid al-Adha"),
     ("የአረፋ በዓል", "Feast of the Sacrifice"),
     (_T.PUBLIC, _T.RELIGIOUS, _T.MUSLIM), True, hijri_label(12, 10)),
)

for _key, (_am, _en), (_am_d, _en_d), _tags, _movable, _occ in _STANDARD:
    register_holiday(HolidayRule(
        key=_key,
        name={"amharic": _am, "english": _en},
        description={"amharic": _am_d, "english": _en_d},
        tags=_tags,
        movable=_movable,
        occurrences=_occ,
    ))

# ---------------------------------------------------------
# Lookups
# ---------------------------------------------------------

def _matches(tags: Iterable[str], filter: Optional[Iterable[str]]) -> bool:
    if filter is None:
        return True
    wanted = set(filter)
    return any(t in wanted for t in tags)

def _build(rule: HolidayRule, jdn: int, lang: str) -> Holiday:
    return Holiday(
        key=rule.key,
        name=localized(rule.name, lang),
        description=localized(rule.description, lang),
        tags=rule.tags,
        ethiopian=jdn_to_ethiopian(jdn),
        gregorian=from_jdn(jdn),
        movable=rule.movable,
    )

def _occurrences(rule: HolidayRule, year: int) -> List[int]:
    try:
        return rule.occurrences(year)
    except (ValueError, ArithmeticError) as exc:
        raise HolidayLookupError(f"Cannot evaluate holiday '{rule.key}' for year {year}") from exc

def get_holidays_in_month(
    year: int,
    month: int,
    *,
    lang: str = "amharic",
    filter: Optional[Iterable[str]] = None,
) -> List[Holiday]:
    """Holidays falling in one Ethiopian month, sorted by day then table order."""
    validate_language(lang)
    first, last = month_bounds(year, month)
    filter = tuple(filter) if filter is not None else None

    hits: List[Tuple[int, int, HolidayRule]] = []
    for order, rule in enumerate(_REGISTRY.values()):
        if not _matches(rule.tags, filter):
            continue
        for j in _occurrences(rule, year):
            if first <= j <= last:
                hits.append((j, order, rule))
    hits.sort(key=lambda h: (h[0], h[1]))
    return [_build(rule, j, lang) for j, _, rule in hits]

def get_holiday(key: str, year: int, *, lang: str = "amharic") -> List[Holiday]:
    """All occurrences of one holiday within an Ethiopian year."""
    validate_language(lang)
    if key not in _REGISTRY:
        raise KeyError(f"Unknown holiday '{key}'. Available: {sorted(_REGISTRY)}")
    rule = _REGISTRY[key]
    return [_build(rule, j, lang) for j in sorted(_occurrences(rule, year))]
