"""
ethcal.services.day_info
------------------------
Display-ready information for one Ethiopian date: weekday, Gregorian
equivalent, holidays and active fasting periods.

Holiday and fasting lookups degrade independently: a failing table is logged
and contributes no entries, the rest of the day still renders.
"""

from __future__ import annotations

import logging
from typing import List

from ..core.errors import EthcalError
from ..core.types import (
    DayEvent,
    DayEvents,
    DayInformation,
    EthiopianDate,
    FastingContext,
    Holiday,
)
from ..core.time import weekday
from ..engines import ethiopian as eth
from .. import fasting
from ..fasting import FastingKeys
from ..holidays import get_holidays_in_month
from ..i18n import DAY_WORD, WEEKDAY_NAMES, validate_language

logger = logging.getLogger(__name__)

LOOKUP_ERRORS = (EthcalError, LookupError, ValueError, ArithmeticError)


class DayInfoService:
    def __init__(self, language: str = "amharic"):
        self.language = validate_language(language)

    def update_language(self, language: str) -> None:
        """Applies to later calls only; returned objects are not relocalized."""
        self.language = validate_language(language)

    def get_day_information(self, date: EthiopianDate) -> DayInformation:
        gregorian = eth.to_gregorian(date)
        wd = weekday(gregorian)
        return DayInformation(
            ethiopian=date,
            gregorian=gregorian,
            holidays=tuple(self.get_day_holidays(date)),
            fasting_periods=tuple(self.get_day_fasting_context(date)),
            is_today=(date == eth.now()),
            weekday=wd,
            weekday_name=WEEKDAY_NAMES[self.language][wd],
        )

    def get_day_holidays(self, date: EthiopianDate) -> List[Holiday]:
        try:
            month_holidays = get_holidays_in_month(date.year, date.month, lang=self.language)
        except LOOKUP_ERRORS:
            logger.exception("Error getting holidays for %s", date)
            return []
        return [h for h in month_holidays if h.ethiopian == date]

    def get_day_fasting_context(self, date: EthiopianDate) -> List[FastingContext]:
        out: List[FastingContext] = []
        for key in FastingKeys.ALL:
            try:
                info = fasting.get_fasting_info(key, date.year, lang=self.language)
                # may be a period begun in the previous year
                period = fasting.find_fasting_period(key, date)
            except LOOKUP_ERRORS:
                logger.exception("Error getting fasting info for %s", key)
                continue

            if period is None:
                weekly = info.period is None and key == FastingKeys.TSOME_DIHENET
                if weekly and fasting.is_weekly_fast_day(weekday(eth.to_gregorian(date))):
                    out.append(FastingContext(
                        key=key,
                        name=info.name,
                        description=info.description,
                        current_day=1,
                        total_days=1,
                        period=None,
                        tags=info.tags,
                    ))
                continue

            out.append(FastingContext(
                key=key,
                name=info.name,
                description=info.description,
                current_day=self.calculate_day_in_period(date, period.start),
                total_days=self.calculate_total_days(period.start, period.end),
                period=period,
                tags=info.tags,
            ))
        return out

    @staticmethod
    def calculate_day_in_period(date: EthiopianDate, start: EthiopianDate) -> int:
        return max(1, eth.diff_in_days(date, start) + 1)

    @staticmethod
    def calculate_total_days(start: EthiopianDate, end: EthiopianDate) -> int:
        return max(1, eth.diff_in_days(end, start) + 1)

    def format_fasting_context(self, fast: FastingContext) -> str:
        if fast.period is None:
            return fast.name
        return f"{DAY_WORD[self.language]} {fast.current_day} / {fast.total_days} - {fast.name}"

    def get_day_events(self, date: EthiopianDate) -> DayEvents:
        info = self.get_day_information(date)
        events = [
            DayEvent(type="holiday", title=h.name, description=h.description, tags=h.tags)
            for h in info.holidays
        ]
        events.extend(
            DayEvent(
                type="fasting",
                title=self.format_fasting_context(f),
                description=f.description,
                tags=f.tags,
            )
            for f in info.fasting_periods
        )
        return DayEvents(day_info=info, events=tuple(events))


def create_day_info_service(language: str = "amharic") -> DayInfoService:
    return DayInfoService(language)
