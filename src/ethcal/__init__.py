"""ethcal public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .core.errors import ConfigurationError, EthcalError, HolidayLookupError, InvalidDateError
from .core.types import (
    DayCell,
    DayEvent,
    DayEvents,
    DayInformation,
    EthiopianDate,
    EthiopianDateLabel,
    FastingContext,
    FastingInfo,
    FastingPeriod,
    Holiday,
    MonthGridResult,
)
from .engines.ethiopian import (
    add_days,
    days_in_month,
    diff_in_days,
    is_leap_year,
    month_calendar,
    now,
    to_ethiopian,
    to_gregorian,
)
from .engines.computus import fasika
from .fasting import FastingKeys, find_fasting_period, get_fasting_info, get_fasting_periods
from .holidays import HolidayTags, get_holiday, get_holidays_in_month
from .i18n import MONTH_NAMES, WEEKDAY_NAMES, month_name, weekday_name
from .numerals import format_number, to_geez
from .services.date_formatter import DateFormatterOptions, DateFormatterService
from .services.day_info import DayInfoService, create_day_info_service
from .services.month_grid import MonthGridOptions, MonthGridService, create_month_grid
from .settings import Settings, SettingsRegistry

__all__ = [
    "ConfigurationError",
    "EthcalError",
    "HolidayLookupError",
    "InvalidDateError",
    "DayCell",
    "DayEvent",
    "DayEvents",
    "DayInformation",
    "EthiopianDate",
    "EthiopianDateLabel",
    "FastingContext",
    "FastingInfo",
    "FastingPeriod",
    "Holiday",
    "MonthGridResult",
    "add_days",
    "days_in_month",
    "diff_in_days",
    "is_leap_year",
    "month_calendar",
    "now",
    "to_ethiopian",
    "to_gregorian",
    "fasika",
    "FastingKeys",
    "get_fasting_info",
    "get_fasting_periods",
    "find_fasting_period",
    "HolidayTags",
    "get_holiday",
    "get_holidays_in_month",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "month_name",
    "weekday_name",
    "format_number",
    "to_geez",
    "DateFormatterOptions",
    "DateFormatterService",
    "DayInfoService",
    "create_day_info_service",
    "MonthGridOptions",
    "MonthGridService",
    "create_month_grid",
    "Settings",
    "SettingsRegistry",
]
