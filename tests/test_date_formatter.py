# tests/test_date_formatter.py

from datetime import datetime

import pytest

from ethcal.core.errors import ConfigurationError
from ethcal.services.date_formatter import (
    DateFormatterOptions,
    DateFormatterService,
    create_date_formatter_service,
    ethiopian_clock,
)

# Sunday, Miazia 27, 2016 at 08:30 (2 o'clock in the morning, Ethiopian time)
WHEN = datetime(2024, 5, 5, 8, 30)


@pytest.mark.parametrize("hour,expected", [
    (6, (12, 0, "day")),
    (7, (1, 0, "day")),
    (12, (6, 0, "day")),
    (17, (11, 0, "day")),
    (18, (12, 0, "night")),
    (0, (6, 0, "night")),
    (5, (11, 0, "night")),
])
def test_ethiopian_clock(hour, expected):
    assert ethiopian_clock(hour, 0) == expected

def test_english_tokens():
    fmt = create_date_formatter_service("english")
    assert fmt.format("dday, mnam dd, year", WHEN) == "Sunday, Miazia 27, 2016"
    assert fmt.format("year-mnum-dd hh:mm", WHEN) == "2016-8-27 02:30"
    assert fmt.format("dnum tp", WHEN) == "0 Morning"

def test_geez_tokens():
    fmt = create_date_formatter_service("amharic", use_geez_numerals=True)
    assert fmt.format("mnam dd year", WHEN) == "ሚያዝያ ፳፯ ፳፻፲፮"
    assert fmt.format("hh:mm", WHEN) == "፪:፴"

def test_presets():
    fmt = create_date_formatter_service("english")
    assert fmt.format_preset("time-only", WHEN) == "02:30 Morning"
    assert fmt.format_preset("date-only", WHEN) == "Sunday 27 Miazia 2016"
    assert fmt.format_preset("full", datetime(2024, 5, 5, 19, 5)) == "Sunday 27 Miazia 2016 01:05 Evening"
    with pytest.raises(ConfigurationError):
        fmt.format_preset("huge", WHEN)

def test_time_periods():
    fmt = create_date_formatter_service("english")
    assert fmt.time_period(3, "day") == "Morning"
    assert fmt.time_period(8, "day") == "Afternoon"
    assert fmt.time_period(3, "night") == "Evening"
    assert fmt.time_period(8, "night") == "Night"
    assert fmt.time_period(12, "day") == "Night"

def test_empty_format():
    assert DateFormatterService().format("") == ""

def test_validate_format():
    fmt = DateFormatterService()
    assert fmt.validate_format("dday, mnam dd, year").is_valid
    bad = fmt.validate_format("invalid_token, mnam dd")
    assert not bad.is_valid
    assert bad.errors == ["Unknown tokens: invalid_token"]
    assert not fmt.validate_format("").is_valid

def test_test_format_preview():
    fmt = create_date_formatter_service("english")
    check = fmt.test_format("dday dd dday", WHEN)
    assert check.is_valid
    assert check.tokens == ["dday", "dd"]
    assert check.preview == "Sunday 27 Sunday"
    assert fmt.test_format("unknown here", WHEN).preview == ""

def test_update_options():
    fmt = create_date_formatter_service("english")
    fmt.update_options(language="amharic")
    assert fmt.format("dday", WHEN) == "እሑድ"
    with pytest.raises(ConfigurationError):
        fmt.update_options(language="latin")

def test_options_validate_language():
    with pytest.raises(ConfigurationError):
        DateFormatterOptions("latin")

def test_available_tokens():
    assert DateFormatterService.available_tokens() == ["dnum", "dday", "dd", "mnum", "mnam", "year", "tp", "hh", "h", "mm", "m"]
