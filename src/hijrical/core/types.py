from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Literal, Mapping, Optional, Tuple, Union

GregorianYMD = Tuple[int, int, int]

@dataclass(frozen=True)
class EngineId:
    family: Literal["umalqura", "tabular", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class HijriDate:
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

@dataclass(frozen=True)
class HijriDayInfo:
    civil_date: date
    jdn: int
    engine: EngineId
    hijri: HijriDate
    day_of_year: int  # 0-based
    days_in_month: int
    is_leap_year: bool
    source: Literal["umalqura", "tabular"]
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class MonthRef:
    year: int
    month: int

@dataclass(frozen=True)
class AdjustmentInfo:
    """One active override, as listed for review."""
    year: int
    month: int
    index: int
    current_mjd: int
    default_mjd: int
    current_date: GregorianYMD
    default_date: GregorianYMD

@dataclass(frozen=True)
class CascadeEffect:
    """A neighbouring month start that an edit would force."""
    year: int
    month: int
    index: int
    mjd: int
    gregorian: GregorianYMD

@dataclass(frozen=True)
class StartCandidate:
    mjd: int
    gregorian: GregorianYMD
    is_current: bool
    cascade: Tuple[CascadeEffect, ...] = ()

AdjustmentPayload = Union[Mapping[int, int], str, None]

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar."""
    id: EngineId
    use_umalqura: bool = True
    adjustments: AdjustmentPayload = None
    meta: Optional[dict] = None

@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for all engine specifications."""
    kind: Literal["umalqura", "tabular"]
    id: EngineId
    payload: CalendarSpec

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))
