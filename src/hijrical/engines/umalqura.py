"""
hijrical.engines.umalqura
-------------------------
Umm al-Qura month-start table, 1318..1500 AH.

The baseline table is a process-wide constant loaded once on first use.
Operator corrections (an AdjustmentSet, table index -> MJD) are overlaid on
it to give the effective table a calendar actually reads from.
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.errors import InvalidAdjustmentLengthError, OutOfTableRangeError
from ..core.time import MJD_OFFSET

logger = logging.getLogger(__name__)

START_YEAR = 1318
END_YEAR = 1500
TABLE_SIZE = (END_YEAR - START_YEAR + 1) * 12

# Open interval of JDNs converted through the table.
START_JDN = 2415140
END_JDN = 2479960

# Mean synodic month and JDN anchor used to guess a table index from a JDN.
_SYNODIC_ESTIMATE = 29.53056
_EPOCH_ESTIMATE = 1948438

Table = Tuple[int, ...]

_baseline: Optional[Table] = None
_baseline_lock = threading.Lock()


def load_baseline() -> Table:
    """Return the shared baseline table, loading it on first call."""
    global _baseline
    if _baseline is None:
        with _baseline_lock:
            if _baseline is None:
                from .umalqura_data import MONTH_STARTS_MJD
                if len(MONTH_STARTS_MJD) != TABLE_SIZE:
                    raise RuntimeError(
                        f"Umm al-Qura data has {len(MONTH_STARTS_MJD)} entries, expected {TABLE_SIZE}"
                    )
                _baseline = tuple(MONTH_STARTS_MJD)
                logger.debug("Loaded Umm al-Qura baseline table (%d months)", len(_baseline))
    return _baseline


@lru_cache(maxsize=32)
def _overlay(items: Tuple[Tuple[int, int], ...]) -> Table:
    values = list(load_baseline())
    for index, mjd in items:
        values[index] = mjd
    logger.debug("Built effective Umm al-Qura table with %d override(s)", len(items))
    return tuple(values)


def effective_table(adjustments: Optional[Mapping[int, int]] = None) -> Table:
    """
    Baseline with `adjustments` overlaid (override wins).

    Results are cached per distinct adjustment set. With no adjustments the
    shared baseline itself is returned; it is an immutable tuple.
    """
    if not adjustments:
        return load_baseline()
    for index in adjustments:
        check_index(index)
    return _overlay(tuple(sorted((int(k), int(v)) for k, v in adjustments.items())))


def check_index(index: int) -> int:
    if not (0 <= index < TABLE_SIZE):
        raise OutOfTableRangeError(f"Table index {index} outside 0..{TABLE_SIZE - 1}")
    return index


def index_of(year: int, month: int) -> int:
    """Table index of (year, month); raises OutOfTableRangeError outside the table."""
    if not (START_YEAR <= year <= END_YEAR):
        raise OutOfTableRangeError(f"Year {year} outside Umm al-Qura range {START_YEAR}..{END_YEAR}")
    if not (1 <= month <= 12):
        raise OutOfTableRangeError(f"Month {month} must be in 1..12")
    return (year - START_YEAR) * 12 + (month - 1)


def month_of(index: int) -> Tuple[int, int]:
    """Inverse of index_of: (year, month)."""
    check_index(index)
    return START_YEAR + index // 12, index % 12 + 1


def month_lengths_valid(values: Table) -> bool:
    return all(29 <= b - a <= 30 for a, b in zip(values, values[1:]))


class UmmAlQuraTable:
    """
    Effective Umm al-Qura table for one calendar.

    Holds a private copy of its AdjustmentSet; the effective table is rebuilt
    wholesale whenever the set is replaced. A set that leaves any month other
    than 29 or 30 days long raises InvalidAdjustmentLengthError.
    """

    name = "umalqura"

    def __init__(self, adjustments: Optional[Mapping[int, int]] = None):
        self._adjustments: Dict[int, int] = {}
        self._values: Table = load_baseline()
        self.set_adjustments(adjustments)

    # ---------------------------------------------------------
    # Table state
    # ---------------------------------------------------------

    @property
    def baseline(self) -> Table:
        return load_baseline()

    @property
    def values(self) -> Table:
        return self._values

    @property
    def adjustments(self) -> Dict[int, int]:
        return dict(self._adjustments)

    def set_adjustments(self, adjustments: Optional[Mapping[int, int]]) -> None:
        adj = {int(k): int(v) for k, v in (adjustments or {}).items()}
        values = effective_table(adj)
        if not month_lengths_valid(values):
            raise InvalidAdjustmentLengthError("Adjustments give a month length other than 29 or 30 days")
        self._values = values
        self._adjustments = adj

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> int:
        return self._values[check_index(index)]

    # ---------------------------------------------------------
    # Coverage
    # ---------------------------------------------------------

    def covers_year(self, year: int) -> bool:
        return START_YEAR <= year <= END_YEAR

    def covers_month(self, year: int, month: int) -> bool:
        """True when the month has both boundaries in the table."""
        if not self.covers_year(year) or not (1 <= month <= 12):
            return False
        return index_of(year, month) + 1 < TABLE_SIZE

    def covers_jdn(self, jdn: int) -> bool:
        return START_JDN < jdn < END_JDN

    # ---------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------

    def month_start(self, year: int, month: int) -> int:
        """MJD of the first day of (year, month)."""
        return self._values[index_of(year, month)]

    def days_in_month(self, year: int, month: int) -> int:
        if not self.covers_month(year, month):
            raise OutOfTableRangeError(f"Month {year}/{month} has no closing boundary in the table")
        i = index_of(year, month)
        return self._values[i + 1] - self._values[i]

    def is_leap_year(self, year: int) -> bool:
        """Leap iff the twelve months sum to more than 354 days."""
        if not (START_YEAR <= year < END_YEAR):
            raise OutOfTableRangeError(f"Year {year} has no closing boundary in the table")
        k = year - START_YEAR
        return self._values[12 * (k + 1)] - self._values[12 * k] > 354

    def to_jdn(self, year: int, month: int, day: int) -> int:
        return self.month_start(year, month) + day - 1 + MJD_OFFSET

    def from_jdn(self, jdn: int) -> Tuple[int, int, int, int]:
        """
        (year, month, day, day_of_year) for a JDN inside the table range.

        The scan starts at an index estimated from the mean lunation, which
        lands within a month of the answer, then walks to the first entry
        later than the target.
        """
        if not self.covers_jdn(jdn):
            raise OutOfTableRangeError(f"JDN {jdn} outside Umm al-Qura range")
        t = self._values
        mjd = jdn - MJD_OFFSET

        i = int((jdn - _EPOCH_ESTIMATE) / _SYNODIC_ESTIMATE) - (START_YEAR - 1) * 12
        i = min(max(0, i), len(t) - 1)
        while i > 0 and t[i - 1] > mjd:
            i -= 1
        while i < len(t) and t[i] <= mjd:
            i += 1

        k = (i - 1) // 12
        year = START_YEAR + k
        month = i - 12 * k
        day = mjd - t[i - 1] + 1
        day_of_year = mjd - t[12 * k]
        return year, month, day, day_of_year

    def debug_month(self, year: int, month: int) -> Dict[str, Any]:
        i = index_of(year, month)
        out: Dict[str, Any] = {
            "label": {"Y": year, "M": month},
            "index": i,
            "start_mjd": self._values[i],
            "baseline_mjd": self.baseline[i],
            "adjusted": i in self._adjustments,
        }
        if i + 1 < TABLE_SIZE:
            out["length"] = self._values[i + 1] - self._values[i]
        return out
