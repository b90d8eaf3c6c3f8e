"""hijrical public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    to_gregorian,
    explain,
    list_engines,
    engine_info,
    get_calendar,
    make_engine,
    register_engine,
    jdn_to_hijri,
    hijri_to_jdn,
    gregorian_to_hijri,
    hijri_to_gregorian,
    julian_to_hijri,
    hijri_to_julian,
    western_to_hijri,
    hijri_to_western,
    check_date,
    is_leap_year,
    days_in_month,
    month_info,
    month_bounds,
    prev_month,
    next_month,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
)
from .adjust import CalendarAdjuster
from .core.types import HijriDate, HijriDayInfo

__all__ = [
    "day_info",
    "to_gregorian",
    "explain",
    "list_engines",
    "engine_info",
    "get_calendar",
    "make_engine",
    "register_engine",
    "jdn_to_hijri",
    "hijri_to_jdn",
    "gregorian_to_hijri",
    "hijri_to_gregorian",
    "julian_to_hijri",
    "hijri_to_julian",
    "western_to_hijri",
    "hijri_to_western",
    "check_date",
    "is_leap_year",
    "days_in_month",
    "month_info",
    "month_bounds",
    "prev_month",
    "next_month",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "CalendarAdjuster",
    "HijriDate",
    "HijriDayInfo",
]
