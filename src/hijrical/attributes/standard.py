from __future__ import annotations
from typing import Any, Dict

from ..core.time import MJD_OFFSET, jdn_to_julian
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat, the week of the Hijri calendar tables.
    return {"weekday": int((info.jdn + 1) % 7)}

def mjd(info) -> Dict[str, Any]:
    return {"mjd": info.jdn - MJD_OFFSET}

def julian_date(info) -> Dict[str, Any]:
    return {"julian_date": jdn_to_julian(info.jdn)}

def days_remaining(info) -> Dict[str, Any]:
    return {"days_remaining_in_month": info.days_in_month - info.hijri.day}

register_attribute("weekday", weekday)
register_attribute("mjd", mjd)
register_attribute("julian_date", julian_date)
register_attribute("days_remaining", days_remaining)
