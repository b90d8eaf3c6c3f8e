from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import AdjustmentPayload, EngineSpec, GregorianYMD, HijriDate, HijriDayInfo
from .core.time import from_jdn
from .attributes.registry import compute_attributes
from .engines.calendar import normalize_month
from .engines.factory import make_engine as _make_engine

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_calendar(name: str, *, adjustments: AdjustmentPayload = None) -> CalendarEngine:
    """Fresh calendar built from a named spec, optionally with Umm al-Qura adjustments."""
    from .engines.specs import ALL_SPECS
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown engine spec '{name}'")
    spec = ALL_SPECS[name]

    if adjustments is not None:
        if not spec.payload.use_umalqura:
            raise ValueError(f"Calendar '{name}' does not use the Umm al-Qura table.")
        spec = spec.tweak(adjustments=adjustments)

    return _make_engine(spec)

def make_engine(spec: EngineSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Day-level API
# ============================================================

def day_info(
    d: date,
    *,
    engine: str = "umalqura",
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> HijriDayInfo:
    info = _reg().get(engine).day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def to_gregorian(h: HijriDate, *, engine: str = "umalqura") -> Optional[date]:
    return _reg().get(engine).to_gregorian(h)

def explain(d: date, *, engine: str = "umalqura") -> Dict[str, Any]:
    return _reg().get(engine).explain(d)

def jdn_to_hijri(jdn: int, *, engine: str = "umalqura") -> Tuple[int, int, int, int]:
    """(year, month, day, day_of_year) with a 0-based day_of_year."""
    return _reg().get(engine).from_jdn(jdn)

def hijri_to_jdn(year: int, month: int, day: int, *, engine: str = "umalqura") -> int:
    return _reg().get(engine).to_jdn(year, month, day)

def gregorian_to_hijri(year: int, month: int, day: int, *, engine: str = "umalqura") -> HijriDate:
    return _reg().get(engine).gregorian_to_hijri(year, month, day)

def hijri_to_gregorian(year: int, month: int, day: int, *, engine: str = "umalqura") -> Optional[GregorianYMD]:
    return _reg().get(engine).hijri_to_gregorian(year, month, day)

def julian_to_hijri(year: int, month: int, day: int, *, engine: str = "umalqura") -> HijriDate:
    return _reg().get(engine).julian_to_hijri(year, month, day)

def hijri_to_julian(year: int, month: int, day: int, *, engine: str = "umalqura") -> Optional[GregorianYMD]:
    return _reg().get(engine).hijri_to_julian(year, month, day)

def western_to_hijri(year: int, month: int, day: int, *, engine: str = "umalqura") -> HijriDate:
    return _reg().get(engine).western_to_hijri(year, month, day)

def hijri_to_western(year: int, month: int, day: int, *, engine: str = "umalqura") -> Optional[GregorianYMD]:
    return _reg().get(engine).hijri_to_western(year, month, day)

def check_date(year: Any, month: Any, day: Any, *, engine: str = "umalqura") -> bool:
    return _reg().get(engine).check_date(year, month, day)

def is_leap_year(year: int, *, engine: str = "umalqura") -> bool:
    return _reg().get(engine).is_leap_year(year)

# ============================================================
# Month-level API
# ============================================================

def days_in_month(year: int, month: int, *, engine: str = "umalqura") -> int:
    return _reg().get(engine).days_in_month(year, month)

def month_info(year: int, month: int, *, engine: str = "umalqura", debug: bool = False) -> Dict[str, Any]:
    eng = _reg().get(engine)
    out = eng.debug_month(year, month)
    out["days_in_month"] = eng.days_in_month(year, month)
    if debug:
        out["engine"] = eng.info()
    return out

def month_bounds(year: int, month: int, *, engine: str = "umalqura", as_date: bool = True) -> dict:
    out = _reg().get(engine).month_bounds(year, month)
    if as_date:
        out["first_date"] = from_jdn(out["first_jdn"])
        out["last_date"] = from_jdn(out["last_jdn"])
    return out

def prev_month(year: int, month: int) -> dict:
    y, m = normalize_month(year, month - 1)
    return {"Y": y, "M": m}

def next_month(year: int, month: int) -> dict:
    y, m = normalize_month(year, month + 1)
    return {"Y": y, "M": m}

def new_year_day(year: int, *, engine: str = "umalqura", as_date: bool = True) -> dict:
    jdn = _reg().get(engine).to_jdn(year, 1, 1)
    out = {"Y": year, "jdn": jdn, "days_in_year": _reg().get(engine).to_jdn(year, 13, 1) - jdn}
    if as_date:
        out["date"] = from_jdn(jdn)
    return out

def first_day_of_month(year: int, month: int, *, engine: str = "umalqura") -> date:
    b = month_bounds(year, month, engine=engine)
    return b["first_date"]

def last_day_of_month(year: int, month: int, *, engine: str = "umalqura") -> date:
    b = month_bounds(year, month, engine=engine)
    return b["last_date"]
