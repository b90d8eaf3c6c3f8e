# tests/test_tabular.py

import random

import pytest

from hijrical.engines import tabular as tab


def test_epoch():
    # 1 Muharram 1 AH
    assert tab.hijri_to_jdn(1, 1, 1) == 1948439
    assert tab.jdn_to_hijri(1948439) == (1, 1, 1, 0)


def test_last_day_before_epoch_uses_cycle_boundary_branch():
    # JDN + 7666 is an exact multiple of 10631 here
    assert tab.hijri_to_jdn(-1, 12, 29) == 1948438
    assert tab.jdn_to_hijri(1948438) == (-1, 12, 29, 353)


def test_cycle_boundary_positive_year():
    jdn = 185 * tab.CYCLE_DAYS - tab.EPOCH_SHIFT
    assert tab.jdn_to_hijri(jdn) == (30, 12, 29, 353)
    assert tab.hijri_to_jdn(30, 12, 29) == jdn


def test_minimum_date():
    assert tab.hijri_to_jdn(-5499, 8, 18) == 1
    assert tab.jdn_to_hijri(1) == (-5499, 8, 18, 224)
    assert tab.hijri_to_jdn(-5499, 8, 17) == tab.NO_JDN
    assert tab.hijri_to_jdn(-5499, 7, 30) == tab.NO_JDN
    assert tab.hijri_to_jdn(-5500, 1, 1) == tab.NO_JDN


def test_known_modern_date():
    assert tab.hijri_to_jdn(1436, 1, 1) == 2456955


def test_leap_years_in_cycle():
    leaps = [y for y in range(1, 31) if tab.is_leap_year(y)]
    assert leaps == [2, 5, 7, 10, 13, 15, 18, 21, 24, 26, 29]


def test_leap_cycle_invariance():
    assert tab.is_leap_year(1) == tab.is_leap_year(31)
    for y in range(1, 3000):
        assert tab.is_leap_year(y) == tab.is_leap_year(y + 30)
    for y in range(-5400, -31):
        assert tab.is_leap_year(y) == tab.is_leap_year(y + 30)


@pytest.mark.parametrize("year", [-5400, -1000, -31, -2, -1, 1, 2, 29, 30, 1436, 2000])
def test_year_length_matches_leap_rule(year):
    nxt = 1 if year == -1 else year + 1
    length = tab.hijri_to_jdn(nxt, 1, 1) - tab.hijri_to_jdn(year, 1, 1)
    assert length == tab.days_in_year(year)
    assert sum(tab.days_in_month(year, m) for m in range(1, 13)) == length


def test_days_in_month_alternates():
    assert [tab.days_in_month(1437, m) for m in range(1, 12)] == [30, 29] * 5 + [30]
    assert tab.days_in_month(2, 12) == 30
    assert tab.days_in_month(3, 12) == 29


@pytest.mark.parametrize("year", list(range(-5400, 3000, 37)) + [-2, -1, 1, 2, 29, 30, 1600])
def test_days_in_month_matches_month_starts(year):
    nxt = 1 if year == -1 else year + 1
    for month in range(1, 13):
        start = tab.hijri_to_jdn(year, month, 1)
        end = tab.hijri_to_jdn(nxt, 1, 1) if month == 12 else tab.hijri_to_jdn(year, month + 1, 1)
        assert tab.days_in_month(year, month) == end - start


def test_last_day_of_odd_month_roundtrips():
    jdn = tab.hijri_to_jdn(1600, 1, 30)
    assert tab.jdn_to_hijri(jdn) == (1600, 1, 30, 29)
    assert tab.jdn_to_hijri(jdn + 1)[:3] == (1600, 2, 1)


def test_round_half_away():
    assert tab.round_half_away(324.5) == 325
    assert tab.round_half_away(-354.36667) == -354
    assert tab.round_half_away(-0.5) == -1
    assert tab.round_half_away(10276.63343) == 10277


def test_roundtrip_random():
    random.seed(7)
    for _ in range(20000):
        jdn = random.randint(1, 3500000)
        y, m, d, doy = tab.jdn_to_hijri(jdn)
        assert y != 0
        assert 1 <= m <= 12
        assert 1 <= d <= tab.days_in_month(y, m)
        assert tab.hijri_to_jdn(y, m, d) == jdn
        assert doy == jdn - tab.hijri_to_jdn(y, 1, 1)


def test_engine_wrapper():
    eng = tab.TabularEngine()
    assert eng.to_jdn(1, 1, 1) == 1948439
    assert eng.from_jdn(1948439) == (1, 1, 1, 0)
    info = eng.debug_year(1)
    assert info["first_jdn"] == 1948439
    assert info["leap"] is False
