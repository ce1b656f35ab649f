from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, List, Literal, Optional, Tuple, Union

from .errors import InvalidDateError

Language = Literal["amharic", "english"]
Label = Union[int, str]

@dataclass(frozen=True, order=True)
class EthiopianDate:
    year: int
    month: int  # 1..13
    day: int

    def __post_init__(self) -> None:
        if not all(isinstance(v, int) for v in (self.year, self.month, self.day)):
            raise InvalidDateError(f"Ethiopian date fields must be ints, got {self!r}")
        if not (1 <= self.month <= 13):
            raise InvalidDateError(f"month must be in 1..13, got {self.month}")
        limit = 30 if self.month < 13 else (6 if self.year % 4 == 3 else 5)
        if not (1 <= self.day <= limit):
            raise InvalidDateError(
                f"day must be in 1..{limit} for {self.year}/{self.month}, got {self.day}"
            )

    @property
    def code(self) -> int:
        """Integer encoding year*10000 + month*100 + day, monotone in calendar order."""
        return self.year * 10000 + self.month * 100 + self.day

    def __str__(self) -> str:
        return f"{self.year}/{self.month}/{self.day}"

@dataclass(frozen=True)
class EthiopianDateLabel:
    """Display form of an Ethiopian date; numbers may be Geez strings."""
    year: Label
    month: Label
    day: Label

@dataclass(frozen=True)
class Holiday:
    key: str
    name: str
    description: str
    tags: Tuple[str, ...]
    ethiopian: EthiopianDate
    gregorian: Optional[date] = None
    movable: bool = False

@dataclass(frozen=True)
class FastingPeriod:
    start: EthiopianDate
    end: EthiopianDate

@dataclass(frozen=True)
class FastingInfo:
    key: str
    name: str
    description: str
    period: Optional[FastingPeriod]  # None => weekly recurring fast
    tags: Tuple[str, ...] = ()

@dataclass(frozen=True)
class FastingContext:
    key: str
    name: str
    description: str
    current_day: int
    total_days: int
    period: Optional[FastingPeriod]
    is_active: bool = True
    tags: Tuple[str, ...] = ()

@dataclass(frozen=True)
class DayCell:
    ethiopian: EthiopianDate
    label: EthiopianDateLabel
    gregorian: date
    weekday: int  # 0=Sun..6=Sat
    weekday_name: str
    is_today: bool
    holiday_tags: Tuple[str, ...] = ()
    holidays: Tuple[Holiday, ...] = ()

@dataclass(frozen=True)
class MonthGridResult:
    headers: Tuple[str, ...]
    days: Tuple[Optional[DayCell], ...]
    year: Label
    month: int
    month_name: str
    up: Callable[[], "MonthGridResult"] = field(repr=False, compare=False)
    down: Callable[[], "MonthGridResult"] = field(repr=False, compare=False)

    @property
    def padding(self) -> int:
        n = 0
        for cell in self.days:
            if cell is not None:
                break
            n += 1
        return n

    def cells(self) -> List[DayCell]:
        return [c for c in self.days if c is not None]

    def weeks(self) -> List[List[Optional[DayCell]]]:
        """Rows of 7 slots, the last row right-padded with None."""
        slots = list(self.days)
        while len(slots) % 7:
            slots.append(None)
        return [slots[i:i + 7] for i in range(0, len(slots), 7)]

@dataclass(frozen=True)
class DayInformation:
    ethiopian: EthiopianDate
    gregorian: date
    holidays: Tuple[Holiday, ...]
    fasting_periods: Tuple[FastingContext, ...]
    is_today: bool
    weekday: int
    weekday_name: str

@dataclass(frozen=True)
class DayEvent:
    type: Literal["holiday", "fasting"]
    title: str
    description: str
    tags: Tuple[str, ...] = ()

@dataclass(frozen=True)
class DayEvents:
    day_info: DayInformation
    events: Tuple[DayEvent, ...]

    @property
    def has_events(self) -> bool:
        return len(self.events) > 0
