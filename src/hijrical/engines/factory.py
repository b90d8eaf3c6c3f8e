"""
hijrical.engines.factory
------------------------
Transforms pure data specifications into live, executable calendar objects.
"""

from __future__ import annotations
from hijrical.core.types import EngineSpec, CalendarSpec
from hijrical.engines.calendar import HijriCalendar
from hijrical.engines.umalqura import UmmAlQuraTable


def build_calendar(spec: CalendarSpec) -> HijriCalendar:
    """Transforms a pure data CalendarSpec into a live HijriCalendar."""
    if not spec.use_umalqura:
        return HijriCalendar(spec.id, use_umalqura=False)

    # Adjustments are validated here; a malformed payload degrades to the baseline table.
    from hijrical.adjust.payload import load_adjustments
    table = UmmAlQuraTable(load_adjustments(spec.adjustments)) if spec.adjustments else None
    return HijriCalendar(spec.id, use_umalqura=True, table=table)

def make_engine(spec: EngineSpec) -> HijriCalendar:
    """The universal entry point."""
    if spec.kind not in ("umalqura", "tabular"):
        raise TypeError(f"Unknown engine kind: {spec.kind!r}")
    return build_calendar(spec.payload)
