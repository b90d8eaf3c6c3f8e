"""Umm al-Qura adjustment editing.

The core only consumes and produces the serialized mapping; where it is
stored (file, database, session) is up to the caller.
"""

from .adjuster import CalendarAdjuster, parse_gregorian_start
from .payload import deserialize, load_adjustments, serialize

__all__ = ["CalendarAdjuster", "parse_gregorian_start", "deserialize", "load_adjustments", "serialize"]
