"""
hijrical.adjust.adjuster
------------------------
Editing of Umm al-Qura month starts.

Moving the start of one month changes the length of the month before it
(which must stay 29 or 30 days) and of the month it begins, which may force
the following starts forward or back. The adjuster computes those cascades,
applies them atomically, and undoes them together on deletion.

Every public mutation either succeeds, leaving all month lengths at 29 or 30,
or returns False with the adjustment set untouched.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Mapping, Union

from ..core.errors import InvalidAdjustmentLengthError
from ..core.time import MJD_OFFSET, gregorian_to_jdn, jdn_to_gregorian, mjd_to_gregorian
from ..core.types import (
    AdjustmentInfo,
    CascadeEffect,
    EngineId,
    MonthRef,
    StartCandidate,
)
from ..engines.calendar import HijriCalendar
from ..engines.umalqura import (
    TABLE_SIZE,
    UmmAlQuraTable,
    check_index,
    index_of,
    load_baseline,
    month_of,
)
from .payload import check_editable, load_adjustments, serialize

logger = logging.getLogger(__name__)

MIN_MONTH_LENGTH = 29
MAX_MONTH_LENGTH = 30

# day<sep>month<sep>year with sep one of "-", "/", "." or a space.
_GREGORIAN_RE = re.compile(r"^\s*(\d{1,2})[-/. ](\d{1,2})[-/. ](\d{1,4})\s*$")

ADJUSTED_ID = EngineId(family="umalqura", name="umalqura-adjusted", version="1")

StartValue = Union[int, str]


def parse_gregorian_start(text: str) -> int:
    """MJD of a 'day-month-year' Gregorian date string."""
    m = _GREGORIAN_RE.match(text)
    if m is None:
        raise ValueError(f"Expected day-month-year (separators - / . or space), got {text!r}")
    day, month, year = (int(g) for g in m.groups())
    jdn = gregorian_to_jdn(year, month, day)
    if jdn_to_gregorian(jdn) != (year, month, day):
        raise ValueError(f"Invalid Gregorian date {text!r}")
    return jdn - MJD_OFFSET


def _valid_length(length: int) -> bool:
    return MIN_MONTH_LENGTH <= length <= MAX_MONTH_LENGTH


class CalendarAdjuster:
    """
    Edit session over one AdjustmentSet.

    `adjustments` is a mapping or a serialized payload; a malformed payload
    is logged and the session starts from the baseline table.
    """

    def __init__(self, adjustments: Union[Mapping[int, int], str, None] = None):
        self._baseline = load_baseline()
        self._table = UmmAlQuraTable(load_adjustments(adjustments))

    # ---------------------------------------------------------
    # State
    # ---------------------------------------------------------

    @property
    def adjustments(self) -> Dict[int, int]:
        return self._table.adjustments

    @property
    def table(self) -> UmmAlQuraTable:
        return self._table

    def calendar(self, id: EngineId = ADJUSTED_ID) -> HijriCalendar:
        """A calendar reading from a snapshot of the current adjustments."""
        return HijriCalendar(id, use_umalqura=True, table=UmmAlQuraTable(self.adjustments))

    def serialize(self) -> str:
        return serialize(self._table.adjustments)

    def _commit(self, adjustments: Mapping[int, int]) -> None:
        pruned = {k: v for k, v in adjustments.items() if v != self._baseline[k]}
        self._table.set_adjustments(pruned)

    def _effect(self, index: int, mjd: int) -> CascadeEffect:
        year, month = month_of(index)
        return CascadeEffect(year=year, month=month, index=index, mjd=mjd, gregorian=mjd_to_gregorian(mjd))

    # ---------------------------------------------------------
    # Cascades (read-only)
    # ---------------------------------------------------------

    def cascade_for_new_start(self, index: int, new_mjd: int) -> Dict[int, int]:
        """
        Month starts forced by moving entry `index` to `new_mjd`.

        Walks forward from index+1, clamping each month to 29 or 30 days,
        until a month is already valid. The edited entry is not included.
        """
        check_index(index)
        t = list(self._table.values)
        t[index] = new_mjd
        forced: Dict[int, int] = {}
        i = index + 1
        while i < len(t):
            length = t[i] - t[i - 1]
            if length < MIN_MONTH_LENGTH:
                t[i] = t[i - 1] + MIN_MONTH_LENGTH
            elif length > MAX_MONTH_LENGTH:
                t[i] = t[i - 1] + MAX_MONTH_LENGTH
            else:
                break
            forced[i] = t[i]
            i += 1
        return forced

    def cascade_for_deletion(self, index: int) -> List[int]:
        """
        Other adjustments that must go when the one at `index` is removed.

        Reverting an entry to baseline can leave an adjusted neighbour with an
        invalid month; those are reverted too, forward first, then backward.
        Each scan stops at the first month that is already valid.
        """
        check_index(index)
        adj = self._table.adjustments
        if index not in adj:
            return []
        t = list(self._table.values)
        t[index] = self._baseline[index]
        removed: List[int] = []

        i = index + 1
        while i < len(t) and i in adj and not _valid_length(t[i] - t[i - 1]):
            t[i] = self._baseline[i]
            removed.append(i)
            i += 1

        i = index - 1
        while i >= 0 and i in adj and not _valid_length(t[i + 1] - t[i]):
            t[i] = self._baseline[i]
            removed.append(i)
            i -= 1

        return removed

    # ---------------------------------------------------------
    # Mutations
    # ---------------------------------------------------------

    def _resolve_start(self, new_start: StartValue) -> int:
        if isinstance(new_start, bool):
            raise ValueError(f"Month start must be an MJD or a date string, got {new_start!r}")
        if isinstance(new_start, int):
            return new_start
        if isinstance(new_start, str):
            if new_start.strip().isdigit():
                return int(new_start)
            return parse_gregorian_start(new_start)
        raise ValueError(f"Month start must be an MJD or a date string, got {new_start!r}")

    def _check_start(self, index: int, new_mjd: int) -> Dict[int, int]:
        prev_length = new_mjd - self._table.values[index - 1]
        if not (MIN_MONTH_LENGTH - 1 < prev_length < MAX_MONTH_LENGTH + 1):
            raise InvalidAdjustmentLengthError(
                f"Start {new_mjd} would make the previous month {prev_length} days long"
            )
        forced = self.cascade_for_new_start(index, new_mjd)
        if TABLE_SIZE - 1 in forced:
            raise InvalidAdjustmentLengthError(
                f"Start {new_mjd} would move the closing boundary of the table"
            )
        return forced

    def add_adjustment(self, year: int, month: int, new_start: StartValue) -> bool:
        """
        Move the start of (year, month) to `new_start`, an MJD or a
        'day-month-year' Gregorian string, together with any forced cascade.

        Returns False, changing nothing, when the month before would not be
        29 or 30 days long or the string cannot be read. Months outside the
        editable table raise OutOfTableRangeError.
        """
        index = check_editable(index_of(year, month))
        try:
            new_mjd = self._resolve_start(new_start)
            forced = self._check_start(index, new_mjd)
        except ValueError as e:
            logger.warning("Rejected adjustment of %d/%d: %s", year, month, e)
            return False

        merged = self._table.adjustments
        merged[index] = new_mjd
        merged.update(forced)
        self._commit(merged)
        logger.debug("Adjusted %d/%d to MJD %d (%d forced)", year, month, new_mjd, len(forced))
        return True

    def delete_adjustment(self, year: int, month: int) -> bool:
        """Remove the adjustment of (year, month) and every adjustment that depends on it."""
        index = check_editable(index_of(year, month))
        adj = self._table.adjustments
        if index not in adj:
            return False
        extra = self.cascade_for_deletion(index)
        for i in [index, *extra]:
            adj.pop(i, None)
        self._commit(adj)
        logger.debug("Deleted adjustment of %d/%d (%d dependent)", year, month, len(extra))
        return True

    # ---------------------------------------------------------
    # Review
    # ---------------------------------------------------------

    def auto_delete_info(self, year: int, month: int) -> List[MonthRef]:
        """Months whose adjustments delete_adjustment(year, month) would also remove."""
        index = check_editable(index_of(year, month))
        return [MonthRef(*month_of(i)) for i in self.cascade_for_deletion(index)]

    def possible_starts(self, year: int, month: int) -> List[StartCandidate]:
        """
        The valid starts for (year, month): the previous month ending after
        29 or after 30 days. Each candidate lists the months it would force.
        """
        index = check_editable(index_of(year, month))
        prev = self._table.values[index - 1]
        current = self._table.values[index]
        out: List[StartCandidate] = []
        for length in (MIN_MONTH_LENGTH, MAX_MONTH_LENGTH):
            mjd = prev + length
            forced = self.cascade_for_new_start(index, mjd)
            out.append(
                StartCandidate(
                    mjd=mjd,
                    gregorian=mjd_to_gregorian(mjd),
                    is_current=(mjd == current),
                    cascade=tuple(self._effect(i, v) for i, v in sorted(forced.items())),
                )
            )
        return out

    def current_adjustments(self) -> List[AdjustmentInfo]:
        out: List[AdjustmentInfo] = []
        for index, mjd in sorted(self._table.adjustments.items()):
            year, month = month_of(index)
            default = self._baseline[index]
            out.append(
                AdjustmentInfo(
                    year=year,
                    month=month,
                    index=index,
                    current_mjd=mjd,
                    default_mjd=default,
                    current_date=mjd_to_gregorian(mjd),
                    default_date=mjd_to_gregorian(default),
                )
            )
        return out

    def month_start(self, year: int, month: int) -> int:
        """Current effective MJD of (year, month)."""
        return self._table.month_start(year, month)
