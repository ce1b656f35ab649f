"""
ethcal.services.date_formatter
------------------------------
Token-based formatting of the current Ethiopian date and time, as shown in a
status bar.

Tokens: dnum dday dd mnum mnam year tp hh h mm m. The clock is the Ethiopian
one: hours count from 06:00 and 18:00, 1..12, with a day/night period.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from ..core.errors import ConfigurationError
from ..core.time import weekday
from ..engines import ethiopian as eth
from ..i18n import MONTH_NAMES, WEEKDAY_NAMES, validate_language
from ..numerals import to_geez

TOKENS: Tuple[str, ...] = ("dnum", "dday", "dd", "mnum", "mnam", "year", "tp", "hh", "h", "mm", "m")
_TOKEN_RE = re.compile(r"\b(" + "|".join(TOKENS) + r")\b")
_WORD_RE = re.compile(r"[A-Za-z_]+")

PRESETS: Dict[str, str] = {
    "full": "dday dd mnam year hh:mm tp",
    "compact": "mnam dd hh:mm",
    "medium": "dday mnam dd hh:mm",
    "time-only": "hh:mm tp",
    "date-only": "dday dd mnam year",
}

_PERIOD_LABELS = {
    # (morning, afternoon, evening, night)
    "amharic": ("ጠዋት", "ከሰዓት", "ምሽት", "ሌሊት"),
    "english": ("Morning", "Afternoon", "Evening", "Night"),
}


def ethiopian_clock(hour: int, minute: int) -> Tuple[int, int, str]:
    """(hour 1..12, minute, 'day'|'night') for a 24h wall-clock time."""
    h = (hour - 6) % 12
    period = "day" if 6 <= hour < 18 else "night"
    return (h or 12), minute, period


@dataclass(frozen=True)
class DateFormatterOptions:
    language: str = "amharic"
    use_geez_numerals: bool = False

    def __post_init__(self) -> None:
        validate_language(self.language)

@dataclass(frozen=True)
class FormatCheck:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    preview: str = ""
    tokens: List[str] = field(default_factory=list)


class DateFormatterService:
    def __init__(self, options: Optional[DateFormatterOptions] = None):
        self.options = options or DateFormatterOptions()

    def update_options(self, **changes) -> None:
        self.options = replace(self.options, **changes)

    @staticmethod
    def available_tokens() -> List[str]:
        return list(TOKENS)

    def format(self, format_string: str, when: Optional[datetime] = None) -> str:
        if not format_string:
            return ""
        values = self.token_values(when or datetime.now())
        return _TOKEN_RE.sub(lambda mo: values[mo.group(1)], format_string)

    def format_preset(self, preset: str, when: Optional[datetime] = None) -> str:
        if preset not in PRESETS:
            raise ConfigurationError(f"Unknown format preset {preset!r}. Available: {sorted(PRESETS)}")
        return self.format(PRESETS[preset], when)

    def _num(self, n: int, width: int = 0) -> str:
        if self.options.use_geez_numerals:
            return to_geez(n)
        return str(n).zfill(width)

    def token_values(self, when: datetime) -> Dict[str, str]:
        lang = self.options.language
        e = eth.to_ethiopian(when.date())
        wd = weekday(when.date())
        hour, minute, period = ethiopian_clock(when.hour, when.minute)
        clock_h = self._num(hour, 2)
        clock_m = self._num(minute, 2)
        return {
            "dnum": self._num(wd),
            "dday": WEEKDAY_NAMES[lang][wd],
            "dd": self._num(e.day),
            "mnum": self._num(e.month),
            "mnam": MONTH_NAMES[lang][e.month - 1],
            "year": self._num(e.year),
            "tp": self.time_period(hour, period),
            "hh": clock_h,
            "h": clock_h,
            "mm": clock_m,
            "m": clock_m,
        }

    def time_period(self, hour: int, period: str) -> str:
        morning, afternoon, evening, night = _PERIOD_LABELS[self.options.language]
        if 1 <= hour < 6:
            return morning if period == "day" else evening
        if 6 <= hour < 12 and period == "day":
            return afternoon
        return night

    def validate_format(self, format_string: str) -> FormatCheck:
        if not format_string:
            return FormatCheck(False, ["Format string must be a non-empty string"])
        unknown = [w for w in _WORD_RE.findall(format_string) if w not in TOKENS]
        if unknown:
            return FormatCheck(False, [f"Unknown tokens: {', '.join(unknown)}"])
        return FormatCheck(True)

    def test_format(self, format_string: str, when: Optional[datetime] = None) -> FormatCheck:
        """Validate and, when valid, render a preview with the tokens it uses."""
        check = self.validate_format(format_string)
        if not check.is_valid:
            return check
        tokens = list(dict.fromkeys(_TOKEN_RE.findall(format_string)))
        return FormatCheck(True, [], self.format(format_string, when), tokens)


def create_date_formatter_service(
    language: str = "amharic", use_geez_numerals: bool = False
) -> DateFormatterService:
    return DateFormatterService(DateFormatterOptions(language, use_geez_numerals))
