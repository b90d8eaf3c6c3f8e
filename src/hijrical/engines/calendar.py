"""
hijrical.engines.calendar
-------------------------
The Orchestrator. Dispatches each conversion to the Umm al-Qura table when
the date falls inside it (and the calendar is configured to use it), and to
the tabular algorithm otherwise.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple

from ..core.time import (
    MJD_OFFSET,
    from_jdn,
    gregorian_to_jdn,
    jdn_to_gregorian,
    jdn_to_julian,
    jdn_to_western,
    julian_to_jdn,
    to_jdn,
    western_to_jdn,
)
from ..core.types import EngineId, GregorianYMD, HijriDate, HijriDayInfo
from .tabular import NO_JDN, TabularEngine
from .umalqura import END_YEAR, START_YEAR, UmmAlQuraTable


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """
    Carry an out-of-range month into the year, e.g. (1436, 13) -> (1437, 1).
    There is no year 0: (-1, 13) -> (1, 1).
    """
    if 1 <= month <= 12:
        return year, month
    shift, m0 = divmod(month - 1, 12)
    c = year + 1 if year < 0 else year
    c += shift
    return (c if c > 0 else c - 1), m0 + 1


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


class HijriCalendar:
    """
    Translates Hijri dates to Julian Day Numbers (JDN) and back.

    `use_umalqura=False` gives a purely tabular calendar. Otherwise years
    1318..1500 are read from `table`, which may carry adjustments.
    """
    def __init__(
        self,
        id: EngineId,
        *,
        use_umalqura: bool = True,
        table: Optional[UmmAlQuraTable] = None,
    ):
        self.id = id
        self.use_umalqura = use_umalqura
        self.tabular = TabularEngine()
        self._table = table

    @property
    def table(self) -> UmmAlQuraTable:
        if self._table is None:
            self._table = UmmAlQuraTable()
        return self._table

    # ---------------------------------------------------------
    # Dispatch
    # ---------------------------------------------------------

    def source_for_jdn(self, jdn: int) -> str:
        if self.use_umalqura and self.table.covers_jdn(jdn):
            return "umalqura"
        return "tabular"

    def source_for_year(self, year: int) -> str:
        if self.use_umalqura and START_YEAR <= year <= END_YEAR:
            return "umalqura"
        return "tabular"

    # ---------------------------------------------------------
    # Core conversions
    # ---------------------------------------------------------

    def from_jdn(self, jdn: int) -> Tuple[int, int, int, int]:
        """(year, month, day, day_of_year) for a JDN; day_of_year is 0-based."""
        if self.source_for_jdn(jdn) == "umalqura":
            return self.table.from_jdn(jdn)
        return self.tabular.from_jdn(jdn)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        """
        JDN of a Hijri date. Month overflow is carried into the year and day 0
        is the last day of the previous month. Returns 0 when the tabular
        algorithm has no result.
        """
        year, month = normalize_month(year, month)
        if self.source_for_year(year) == "umalqura":
            return self.table.to_jdn(year, month, day)
        return self.tabular.to_jdn(year, month, day)

    def days_in_month(self, year: int, month: int) -> int:
        if self.use_umalqura and self.table.covers_month(year, month):
            return self.table.days_in_month(year, month)
        return self.tabular.days_in_month(year, month)

    def is_leap_year(self, year: int) -> bool:
        if self.use_umalqura and START_YEAR <= year < END_YEAR:
            return self.table.is_leap_year(year)
        return self.tabular.is_leap_year(year)

    def check_date(self, year: Any, month: Any, day: Any) -> bool:
        """True when (year, month, day) is an existing Hijri date."""
        if not (_is_int(year) and _is_int(month) and _is_int(day)):
            return False
        if month < 1 or month > 12 or day < 1 or day > 30 or year == 0:
            return False
        return day <= self.days_in_month(year, month)

    # ---------------------------------------------------------
    # Other calendars
    # ---------------------------------------------------------

    def _hijri(self, jdn: int) -> HijriDate:
        y, m, d, _ = self.from_jdn(jdn)
        return HijriDate(y, m, d)

    def gregorian_to_hijri(self, year: int, month: int, day: int) -> HijriDate:
        return self._hijri(gregorian_to_jdn(year, month, day))

    def hijri_to_gregorian(self, year: int, month: int, day: int) -> Optional[GregorianYMD]:
        jdn = self.to_jdn(year, month, day)
        return None if jdn == NO_JDN else jdn_to_gregorian(jdn)

    def julian_to_hijri(self, year: int, month: int, day: int) -> HijriDate:
        return self._hijri(julian_to_jdn(year, month, day))

    def hijri_to_julian(self, year: int, month: int, day: int) -> Optional[GregorianYMD]:
        jdn = self.to_jdn(year, month, day)
        return None if jdn == NO_JDN else jdn_to_julian(jdn)

    def western_to_hijri(self, year: int, month: int, day: int) -> HijriDate:
        """Western dates are Julian before 1582-10-15 and Gregorian after."""
        return self._hijri(western_to_jdn(year, month, day))

    def hijri_to_western(self, year: int, month: int, day: int) -> Optional[GregorianYMD]:
        jdn = self.to_jdn(year, month, day)
        return None if jdn == NO_JDN else jdn_to_western(jdn)

    # ---------------------------------------------------------
    # Month-level helpers
    # ---------------------------------------------------------

    def month_bounds(self, year: int, month: int) -> Dict[str, Any]:
        first_jdn = self.to_jdn(year, month, 1)
        length = self.days_in_month(year, month)
        return {
            "Y": year,
            "M": month,
            "first_jdn": first_jdn,
            "last_jdn": first_jdn + length - 1,
            "length": length,
            "source": self.source_for_year(year),
        }

    def debug_month(self, year: int, month: int) -> Dict[str, Any]:
        """Table entry for (year, month), or the tabular year breakdown outside the table."""
        if self.source_for_year(year) == "umalqura":
            return self.table.debug_month(year, month)
        out = self.tabular.debug_year(year)
        out["label"] = {"Y": year, "M": month}
        return out

    # ---------------------------------------------------------
    # Day-level views
    # ---------------------------------------------------------
    def info(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id.__dict__, "use_umalqura": self.use_umalqura}
        if self.use_umalqura:
            out["umalqura_years"] = (START_YEAR, END_YEAR)
            out["adjustments"] = len(self.table.adjustments)
        return out

    def day_info(self, d: date, *, debug: bool = False) -> HijriDayInfo:
        jdn = to_jdn(d)
        y, m, day, doy = self.from_jdn(jdn)
        source = self.source_for_jdn(jdn)
        dbg = None
        if debug:
            dbg = {"jdn": jdn, "mjd": jdn - MJD_OFFSET, "source": source}
            if source == "umalqura":
                dbg["table"] = self.table.debug_month(y, m)
            else:
                dbg["tabular"] = self.tabular.debug_year(y)
        return HijriDayInfo(
            civil_date=d,
            jdn=jdn,
            engine=self.id,
            hijri=HijriDate(y, m, day),
            day_of_year=doy,
            days_in_month=self.days_in_month(y, m),
            is_leap_year=self.is_leap_year(y),
            source=source,
            debug=dbg,
        )

    def to_gregorian(self, h: HijriDate) -> Optional[date]:
        jdn = self.to_jdn(h.year, h.month, h.day)
        if jdn == NO_JDN:
            return None
        return from_jdn(jdn)

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__
