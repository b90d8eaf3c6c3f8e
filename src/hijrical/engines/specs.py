from __future__ import annotations

from typing import Dict

from ..core.types import CalendarSpec, EngineId, EngineSpec


UMALQURA_ID = EngineId(family="umalqura", name="umalqura", version="1")
TABULAR_ID = EngineId(family="tabular", name="tabular", version="1")

UMALQURA = EngineSpec(
    kind="umalqura",
    id=UMALQURA_ID,
    payload=CalendarSpec(
        id=UMALQURA_ID,
        use_umalqura=True,
        meta={"description": "Saudi Umm al-Qura table for 1318..1500 AH, tabular outside it"},
    ),
)

TABULAR = EngineSpec(
    kind="tabular",
    id=TABULAR_ID,
    payload=CalendarSpec(
        id=TABULAR_ID,
        use_umalqura=False,
        meta={"description": "Arithmetic 30-year cycle (leap years 2,5,7,10,13,15,18,21,24,26,29)"},
    ),
)

ALL_SPECS: Dict[str, EngineSpec] = {
    "umalqura": UMALQURA,
    "tabular": TABULAR,
}
