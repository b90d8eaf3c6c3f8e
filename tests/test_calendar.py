# tests/test_calendar.py

import random
from datetime import date

import pytest

from hijrical.engines.calendar import HijriCalendar, normalize_month
from hijrical.engines.specs import TABULAR_ID, UMALQURA_ID
from hijrical.engines.tabular import NO_JDN
from hijrical.engines.umalqura import END_JDN, START_JDN, UmmAlQuraTable
from hijrical.core.types import HijriDate


@pytest.fixture
def cal():
    return HijriCalendar(UMALQURA_ID)


@pytest.fixture
def tab_cal():
    return HijriCalendar(TABULAR_ID, use_umalqura=False)


def test_day_zero_is_last_day_of_previous_month(cal):
    dim = cal.days_in_month(1436, 11)
    assert dim == 29
    last = cal.hijri_to_gregorian(1436, 11, dim)
    assert cal.hijri_to_gregorian(1436, 12, 0) == last
    assert cal.to_jdn(1436, 12, 1) == cal.to_jdn(1436, 11, dim) + 1
    assert cal.hijri_to_gregorian(1436, 12, 1) == (2015, 9, 14)
    assert last == (2015, 9, 13)


def test_month_overflow_is_normalized(cal):
    assert cal.to_jdn(1436, 13, 1) == cal.to_jdn(1437, 1, 1)
    assert cal.to_jdn(1437, 0, 1) == cal.to_jdn(1436, 12, 1)
    assert cal.to_jdn(1437, -11, 1) == cal.to_jdn(1436, 1, 1)


@pytest.mark.parametrize(
    "year,month,expected",
    [
        (1436, 13, (1437, 1)),
        (1436, 0, (1435, 12)),
        (1436, 25, (1438, 1)),
        (-1, 13, (1, 1)),
        (1, 0, (-1, 12)),
        (1436, 5, (1436, 5)),
    ],
)
def test_normalize_month(year, month, expected):
    assert normalize_month(year, month) == expected


def test_check_date(cal):
    assert cal.check_date(1437, 13, 1) is False
    assert cal.days_in_month(1437, 1) == 30
    assert cal.check_date(1437, 1, 30) is True
    assert cal.check_date(1437, 1, 31) is False
    assert cal.check_date(1436, 11, 30) is False
    assert cal.check_date(1436, 12, 30) is True
    assert cal.check_date(1436, 0, 1) is False
    assert cal.check_date(1436, 1, 0) is False
    assert cal.check_date(0, 1, 1) is False
    assert cal.check_date(1600, 1, 30) is True
    assert cal.check_date(1600, 2, 30) is False
    assert cal.check_date(-1, 1, 30) is True


@pytest.mark.parametrize("args", [("1436", 1, 1), (1436, 1.0, 1), (1436, 1, None), (True, 1, 1), (1436, 1, True)])
def test_check_date_rejects_non_integers(cal, args):
    assert cal.check_date(*args) is False


def test_dispatch(cal, tab_cal):
    assert cal.source_for_jdn(2457192) == "umalqura"
    assert cal.source_for_jdn(START_JDN) == "tabular"
    assert cal.source_for_jdn(END_JDN) == "tabular"
    assert cal.source_for_year(1500) == "umalqura"
    assert tab_cal.source_for_jdn(2457192) == "tabular"


def test_umalqura_vs_tabular_known_day(cal, tab_cal):
    assert cal.from_jdn(2457192) == (1436, 9, 1, 236)
    assert tab_cal.from_jdn(2457192) == (1436, 9, 2, 237)


def test_last_month_of_table_uses_tabular(cal):
    assert cal.to_jdn(1500, 12, 1) == END_JDN
    assert cal.from_jdn(END_JDN) == (1500, 12, 1, 325)
    assert cal.days_in_month(1500, 12) == 29
    assert cal.is_leap_year(1500) is False
    assert cal.from_jdn(END_JDN - 1)[:3] == (1500, 11, 30)


def test_first_day_of_table(cal):
    assert cal.from_jdn(START_JDN) == (1318, 1, 1, 0)
    assert cal.from_jdn(START_JDN - 1)[:3] == (1317, 12, 29)


def test_solar_helpers(cal):
    assert cal.gregorian_to_hijri(2015, 6, 18) == HijriDate(1436, 9, 1)
    assert cal.hijri_to_gregorian(1436, 9, 1) == (2015, 6, 18)
    assert cal.hijri_to_julian(1436, 9, 1) == (2015, 6, 5)
    assert cal.julian_to_hijri(2015, 6, 5) == HijriDate(1436, 9, 1)
    assert cal.hijri_to_western(1, 1, 1) == (622, 7, 15)
    assert cal.western_to_hijri(622, 7, 15) == HijriDate(1, 1, 1)


def test_solar_helpers_before_minimum(cal):
    assert cal.to_jdn(-5500, 1, 1) == NO_JDN
    assert cal.hijri_to_gregorian(-5500, 1, 1) is None
    assert cal.hijri_to_julian(-5500, 1, 1) is None
    assert cal.hijri_to_western(-5500, 1, 1) is None
    assert cal.to_gregorian(HijriDate(-5500, 1, 1)) is None


def test_roundtrip_random(cal):
    random.seed(11)
    for _ in range(5000):
        jdn = random.randint(1948439, 2490000)
        y, m, d, _ = cal.from_jdn(jdn)
        assert cal.check_date(y, m, d)
        assert cal.to_jdn(y, m, d) == jdn


def test_day_info(cal):
    info = cal.day_info(date(2015, 6, 18))
    assert info.hijri == HijriDate(1436, 9, 1)
    assert info.jdn == 2457192
    assert info.day_of_year == 236
    assert info.days_in_month == 29
    assert info.is_leap_year is False
    assert info.source == "umalqura"
    assert info.debug is None

    dbg = cal.explain(date(2015, 6, 18))["debug"]
    assert dbg["mjd"] == 57192
    assert dbg["table"]["index"] == 1424


def test_to_gregorian(cal):
    assert cal.to_gregorian(HijriDate(1436, 9, 1)) == date(2015, 6, 18)


def test_month_bounds(cal):
    b = cal.month_bounds(1436, 11)
    assert b["first_jdn"] == 2457251
    assert b["last_jdn"] == 2457279
    assert b["length"] == 29
    assert b["source"] == "umalqura"


def test_adjusted_table_changes_conversion():
    cal = HijriCalendar(UMALQURA_ID, table=UmmAlQuraTable({1426: 57250}))
    assert cal.hijri_to_gregorian(1436, 11, 1) == (2015, 8, 15)
    assert cal.days_in_month(1436, 10) == 29
