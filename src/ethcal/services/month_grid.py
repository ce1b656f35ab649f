"""
ethcal.services.month_grid
--------------------------
View model for one Ethiopian month: a 7-column day grid left-padded with None
so that day 1 sits under its weekday header.

The service owns a (year, month) cursor. Navigation mutates the cursor only;
callers regenerate explicitly with generate().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Tuple

from ..core.errors import ConfigurationError
from ..core.types import DayCell, EthiopianDateLabel, Holiday, MonthGridResult
from ..core.time import weekday
from ..engines import ethiopian as eth
from ..holidays import HolidayTags, get_holidays_in_month
from ..i18n import LANGUAGES, MONTH_NAMES, WEEKDAY_NAMES
from ..numerals import format_number

logger = logging.getLogger(__name__)

Mode = Literal["christian", "muslim", "public"]

MODE_FILTERS: Dict[str, Tuple[str, ...]] = {
    "christian": (HolidayTags.CHRISTIAN,),
    "muslim": (HolidayTags.MUSLIM,),
    "public": (HolidayTags.PUBLIC,),
}


@dataclass(frozen=True)
class MonthGridOptions:
    year: Optional[int] = None
    month: Optional[int] = None  # 1..13
    week_start: int = 1  # 0=Sunday, 1=Monday
    use_geez: bool = False
    weekday_lang: str = "amharic"
    holiday_filter: Optional[Tuple[str, ...]] = None
    mode: Optional[Mode] = None

    def __post_init__(self) -> None:
        if (self.year is None) != (self.month is None):
            raise ConfigurationError("If providing year or month, both must be provided.")
        for name in ("year", "month"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigurationError(f"Invalid {name}: {value!r}. Must be an integer.")
        if self.month is not None and not (1 <= self.month <= 13):
            raise ConfigurationError(f"Invalid month: {self.month}. Must be between 1 and 13.")
        if isinstance(self.week_start, bool) or not isinstance(self.week_start, int) \
                or not (0 <= self.week_start <= 6):
            raise ConfigurationError(
                f"Invalid week_start value: {self.week_start}. Must be between 0 and 6."
            )
        if self.weekday_lang not in LANGUAGES:
            raise ConfigurationError(
                f"Invalid weekday_lang: {self.weekday_lang!r}. Must be 'amharic' or 'english'."
            )
        if self.mode is not None and self.mode not in MODE_FILTERS:
            raise ConfigurationError(f"Invalid mode: {self.mode!r}. Available: {sorted(MODE_FILTERS)}")
        if self.holiday_filter is not None:
            unknown = [t for t in self.holiday_filter if t not in HolidayTags.ALL]
            if unknown:
                raise ConfigurationError(f"Unknown holiday tags: {unknown}. Available: {HolidayTags.ALL}")
            object.__setattr__(self, "holiday_filter", tuple(self.holiday_filter))


class MonthGridService:
    def __init__(self, options: Optional[MonthGridOptions] = None, **kwargs):
        if options is None:
            options = MonthGridOptions(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a MonthGridOptions or keyword options, not both")
        self.options = options

        if options.year is None:
            current = eth.now()
            self.year, self.month = current.year, current.month
        else:
            self.year, self.month = options.year, options.month
        self.week_start = options.week_start
        self.use_geez = options.use_geez
        self.weekday_lang = options.weekday_lang
        self.holiday_filter = options.holiday_filter
        self.mode = options.mode

    def generate(self) -> MonthGridResult:
        raw_days = eth.month_calendar(self.year, self.month)
        holidays = self._get_holidays()
        days = self._merge_days(raw_days, holidays)
        logger.debug(
            "Generated grid %s/%s: %d cells, %d holidays",
            self.year, self.month, len(days), len(holidays),
        )
        return MonthGridResult(
            headers=self.weekday_headers(),
            days=tuple(days),
            year=format_number(self.year, self.use_geez),
            month=self.month,
            month_name=MONTH_NAMES[self.weekday_lang][self.month - 1],
            up=lambda: self.up().generate(),
            down=lambda: self.down().generate(),
        )

    def _get_holidays(self) -> List[Holiday]:
        tag_filter = self.holiday_filter
        if self.mode is not None:
            tag_filter = MODE_FILTERS[self.mode]
        return get_holidays_in_month(
            self.year, self.month, lang=self.weekday_lang, filter=tag_filter
        )

    def _merge_days(self, raw_days, holidays: List[Holiday]) -> List[Optional[DayCell]]:
        today = eth.now()
        labels = WEEKDAY_NAMES[self.weekday_lang]

        by_date: Dict[int, List[Holiday]] = {}
        for h in holidays:
            by_date.setdefault(h.ethiopian.code, []).append(h)

        cells: List[Optional[DayCell]] = []
        for e, g in raw_days:
            wd = weekday(g)
            hits = by_date.get(e.code, [])
            tags: List[str] = []
            for h in hits:
                tags.extend(t for t in h.tags if t not in tags)
            cells.append(DayCell(
                ethiopian=e,
                label=EthiopianDateLabel(
                    year=format_number(e.year, self.use_geez),
                    month=MONTH_NAMES[self.weekday_lang][e.month - 1] if self.use_geez else e.month,
                    day=format_number(e.day, self.use_geez),
                ),
                gregorian=g,
                weekday=wd,
                weekday_name=labels[wd],
                is_today=(e == today),
                holiday_tags=tuple(tags),
                holidays=tuple(hits),
            ))

        offset = (cells[0].weekday - self.week_start + 7) % 7 if cells else 0
        return [None] * offset + cells

    def weekday_headers(self) -> Tuple[str, ...]:
        labels = WEEKDAY_NAMES[self.weekday_lang]
        return labels[self.week_start:] + labels[:self.week_start]

    # ---------------------------------------------------------
    # Cursor
    # ---------------------------------------------------------

    def up(self) -> "MonthGridService":
        if self.month == 13:
            self.month = 1
            self.year += 1
        else:
            self.month += 1
        return self

    def down(self) -> "MonthGridService":
        if self.month == 1:
            self.month = 13
            self.year -= 1
        else:
            self.month -= 1
        return self

    def reset_to_current_month(self) -> "MonthGridService":
        current = eth.now()
        self.year, self.month = current.year, current.month
        return self

    def set_date(self, month: int, year: int) -> "MonthGridService":
        if not (isinstance(month, int) and isinstance(year, int)):
            raise TypeError("month and year must be ints")
        self.month, self.year = month, year
        return self


def create_month_grid(options: Optional[MonthGridOptions] = None, **kwargs) -> MonthGridResult:
    return MonthGridService(options, **kwargs).generate()
