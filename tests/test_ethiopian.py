# tests/test_ethiopian.py

import random
from datetime import date

import pytest

from ethcal.core.errors import InvalidDateError
from ethcal.core.time import from_jdn, to_jdn, weekday
from ethcal.core.types import EthiopianDate
from ethcal.engines import ethiopian as eth


# (Ethiopian, Gregorian) anchors
KNOWN = [
    (EthiopianDate(2016, 1, 1), date(2023, 9, 12)),
    (EthiopianDate(2015, 1, 1), date(2022, 9, 11)),
    (EthiopianDate(2015, 13, 6), date(2023, 9, 11)),
    (EthiopianDate(2016, 4, 28), date(2024, 1, 7)),
    (EthiopianDate(2016, 8, 27), date(2024, 5, 5)),
    (EthiopianDate(2017, 4, 29), date(2025, 1, 7)),
]

@pytest.mark.parametrize("e,g", KNOWN)
def test_known_conversions(e, g):
    assert eth.to_gregorian(e) == g
    assert eth.to_ethiopian(g) == e

def test_jdn_roundtrip():
    random.seed(42)
    # Ethiopian years ~1000..3000
    lo = eth.ethiopian_to_jdn(1000, 1, 1)
    hi = eth.ethiopian_to_jdn(3000, 13, 5)
    for _ in range(5000):
        j = random.randint(lo, hi)
        e = eth.jdn_to_ethiopian(j)
        assert eth.to_jdn_eth(e) == j

def test_gregorian_jdn_epochs():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert from_jdn(2451545) == date(2000, 1, 1)

def test_leap_years_and_pagume():
    assert eth.is_leap_year(2015)
    assert not eth.is_leap_year(2016)
    assert eth.days_in_month(2015, 13) == 6
    assert eth.days_in_month(2016, 13) == 5
    assert all(eth.days_in_month(2016, m) == 30 for m in range(1, 13))
    assert eth.days_in_year(2015) == 366

def test_year_is_contiguous():
    for y in (2011, 2015, 2016):
        first, last = eth.year_bounds(y)
        assert eth.jdn_to_ethiopian(last + 1) == EthiopianDate(y + 1, 1, 1)
        assert eth.jdn_to_ethiopian(first - 1).year == y - 1

def test_month_calendar_pairs():
    days = eth.month_calendar(2015, 13)
    assert len(days) == 6
    assert days[0] == (EthiopianDate(2015, 13, 1), date(2023, 9, 6))
    assert days[-1][1] == date(2023, 9, 11)

def test_weekday_sunday_first():
    assert weekday(date(2023, 9, 12)) == 2  # Tuesday
    assert weekday(date(2024, 5, 5)) == 0   # Sunday
    for d in (date(1999, 12, 31), date(2024, 2, 29), date(2030, 6, 1)):
        assert weekday(d) == d.isoweekday() % 7

def test_diff_and_add_days():
    a = EthiopianDate(2015, 13, 6)
    b = EthiopianDate(2016, 1, 1)
    assert eth.diff_in_days(b, a) == 1
    assert eth.diff_in_days(a, b) == -1
    assert eth.add_days(a, 1) == b
    assert eth.add_days(b, -366) == EthiopianDate(2015, 1, 1)

def test_now_uses_given_day():
    assert eth.now(date(2024, 5, 5)) == EthiopianDate(2016, 8, 27)

@pytest.mark.parametrize("args", [(2016, 14, 1), (2016, 0, 1), (2016, 1, 31), (2016, 13, 6), (2016, 1, 0)])
def test_invalid_dates(args):
    with pytest.raises(InvalidDateError):
        EthiopianDate(*args)

def test_invalid_date_is_value_error():
    with pytest.raises(ValueError):
        EthiopianDate(2016, 13, 6)

def test_date_code_orders_dates():
    a, b = EthiopianDate(2015, 13, 6), EthiopianDate(2016, 1, 1)
    assert a.code == 20151306
    assert a.code < b.code
    assert a < b
