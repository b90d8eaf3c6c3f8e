"""
Julian Day Number conversions for the proleptic Gregorian and Julian calendars.

Years use the historical numbering with no year 0 (year -1 is 1 BCE), the
same convention as PHP's calendar extension.
"""
from __future__ import annotations
from datetime import date
from typing import Tuple

# First Gregorian day (1582-10-15); earlier "western" dates are Julian.
JDN_GREGORIAN_REFORM = 2299161

# Offset between a JDN and the modified day numbers stored in the Umm al-Qura table.
MJD_OFFSET = 2400000


def _astronomical_year(year: int) -> int:
    return year + 1 if year < 0 else year


def _historical_year(year: int) -> int:
    return year - 1 if year <= 0 else year


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    y = _astronomical_year(year)
    a = (14 - month) // 12
    y2 = y + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return _historical_year(year), month, day


def julian_to_jdn(year: int, month: int, day: int) -> int:
    y = _astronomical_year(year)
    a = (14 - month) // 12
    y2 = y + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083


def jdn_to_julian(jdn: int) -> Tuple[int, int, int]:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return _historical_year(year), month, day


def western_to_jdn(year: int, month: int, day: int) -> int:
    """Julian calendar before the 1582 reform, Gregorian after."""
    jdn = gregorian_to_jdn(year, month, day)
    if jdn < JDN_GREGORIAN_REFORM:
        jdn = julian_to_jdn(year, month, day)
    return jdn


def jdn_to_western(jdn: int) -> Tuple[int, int, int]:
    if jdn >= JDN_GREGORIAN_REFORM:
        return jdn_to_gregorian(jdn)
    return jdn_to_julian(jdn)


def to_jdn(d: date) -> int:
    """Convert a datetime.date (proleptic Gregorian) to a Julian Day Number."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    y, m, d = jdn_to_gregorian(jdn)
    return date(y, m, d)


def mjd_to_gregorian(mjd: int) -> Tuple[int, int, int]:
    return jdn_to_gregorian(mjd + MJD_OFFSET)
