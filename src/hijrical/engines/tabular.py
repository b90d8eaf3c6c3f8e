"""
hijrical.engines.tabular
------------------------
Arithmetic (tabular) Hijri calendar: a fixed 30-year cycle of 10631 days
with 11 leap years of 355 days, and months alternating 30/29 days.

The constants, the negative-year offsets and the truncating casts reproduce
the widely used "Kuwaiti"/Microsoft variant exactly, including its behaviour
for proleptic (negative) years.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Tuple

CYCLE_YEARS = 30
CYCLE_DAYS = 10631
MEAN_YEAR = 354.36667
MEAN_MONTH = 29.5
LEAP_FRACTION = 0.36667

# JDN shift aligning the cycle arithmetic with the Hijri epoch.
EPOCH_SHIFT = 7666

# Year offsets into the internal cycle count.
OFFSET_NEGATIVE = 5520
OFFSET_POSITIVE = 5519
OFFSET_LEAP_NEGATIVE = 5521

# Earliest representable date, -5499/8/18 (JDN 1).
MIN_YEAR = -5499
MIN_MONTH = 8
MIN_DAY = 18

# "No result" sentinel for dates before MIN_YEAR/MIN_MONTH/MIN_DAY.
NO_JDN = 0

# Day of year (1-based) on which month 12 starts: 6*30 + 5*29.
_DAYS_BEFORE_DHU_AL_HIJJAH = 325


def round_half_away(x: float) -> int:
    """Round to nearest integer, ties away from zero."""
    if x < 0:
        return -int(math.floor(-x + 0.5))
    return int(math.floor(x + 0.5))


def _year_start(k: int) -> int:
    return round_half_away(k * MEAN_YEAR)


def hijri_to_jdn(year: int, month: int, day: int) -> int:
    """
    Julian Day Number of a tabular Hijri date.

    Returns NO_JDN for dates earlier than -5499/8/18. Day 0 and day 30 of a
    29-day month are computed arithmetically (previous / next day).
    """
    if (
        year < MIN_YEAR
        or (year == MIN_YEAR and month < MIN_MONTH)
        or (year == MIN_YEAR and month == MIN_MONTH and day < MIN_DAY)
    ):
        return NO_JDN

    hy = year + OFFSET_NEGATIVE if year < 0 else year + OFFSET_POSITIVE
    n = int(hy / CYCLE_YEARS)
    j = n * CYCLE_DAYS + _year_start(hy - n * CYCLE_YEARS)
    j += round_half_away((month - 1) * MEAN_MONTH) + day
    return j - EPOCH_SHIFT


def jdn_to_hijri(jdn: int) -> Tuple[int, int, int, int]:
    """
    Inverse of hijri_to_jdn.

    Returns (year, month, day, day_of_year) with a 0-based day_of_year.
    """
    j = jdn + EPOCH_SHIFT
    n = int(j / CYCLE_DAYS)
    j -= n * CYCLE_DAYS
    j_cycle = j
    y = int(j / MEAN_YEAR)
    j -= _year_start(y)

    if j == 0:
        # Exactly on a rounded year boundary: last day of the previous year.
        y -= 1
        j = j_cycle - _year_start(y)
        doy = j
        month = 12
        day = j - _DAYS_BEFORE_DHU_AL_HIJJAH
    else:
        doy = j
        j += 29
        month = int((24 * j) / 709)
        day = j - int((709 * month) / 24)

    year = n * CYCLE_YEARS + y + 1 - OFFSET_NEGATIVE
    if year <= 0:
        year -= 1
    return year, month, day, doy - 1


def is_leap_year(year: int) -> bool:
    """A year is leap (355 days) when its rounded cycle position steps up."""
    if year < 0:
        year += OFFSET_LEAP_NEGATIVE
    return round_half_away((year % CYCLE_YEARS) * LEAP_FRACTION) > round_half_away(
        ((year - 1) % CYCLE_YEARS) * LEAP_FRACTION
    )


def days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 30 if is_leap_year(year) else 29
    return 29 + month % 2


def days_in_year(year: int) -> int:
    return 355 if is_leap_year(year) else 354


class TabularEngine:
    """
    Stateless wrapper exposing the tabular functions with the same
    surface as the Umm al-Qura table.
    """

    name = "tabular"

    def from_jdn(self, jdn: int) -> Tuple[int, int, int, int]:
        return jdn_to_hijri(jdn)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        return hijri_to_jdn(year, month, day)

    def days_in_month(self, year: int, month: int) -> int:
        return days_in_month(year, month)

    def is_leap_year(self, year: int) -> bool:
        return is_leap_year(year)

    def debug_year(self, year: int) -> Dict[str, Any]:
        hy = year + OFFSET_NEGATIVE if year < 0 else year + OFFSET_POSITIVE
        n = int(hy / CYCLE_YEARS)
        return {
            "year": year,
            "cycle": n,
            "cycle_year": hy - n * CYCLE_YEARS,
            "leap": is_leap_year(year),
            "first_jdn": hijri_to_jdn(year, 1, 1),
            "check": {
                "formula": "jdn = n*10631 + round(r*354.36667) + round((m-1)*29.5) + d - 7666",
                "r": hy - n * CYCLE_YEARS,
            },
        }
