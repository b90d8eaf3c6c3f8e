"""
Adjustment interchange format.

An AdjustmentSet is a mapping from Umm al-Qura table index to the MJD that
replaces the baseline month start. It travels as a JSON object with decimal
string keys in ascending order:

    {"1425": 57250, "1426": 57280}

The older line format written by the PHP adjuster, one ``index => mjd,``
pair per line, is also read. Both are parsed; nothing is ever evaluated.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Dict, Mapping, Union

from ..core.errors import MalformedAdjustmentPayloadError, OutOfTableRangeError
from ..engines.umalqura import TABLE_SIZE, load_baseline, month_lengths_valid

logger = logging.getLogger(__name__)

# Index 0 has no previous boundary and the last index closes the table.
FIRST_EDITABLE = 1
LAST_EDITABLE = TABLE_SIZE - 2

_LEGACY_LINE = re.compile(r"^\s*(\d+)\s*=>\s*(\d+)\s*,?\s*$")


def check_editable(index: int) -> int:
    if not (FIRST_EDITABLE <= index <= LAST_EDITABLE):
        raise OutOfTableRangeError(
            f"Table index {index} is not editable (allowed {FIRST_EDITABLE}..{LAST_EDITABLE})"
        )
    return index


def serialize(adjustments: Mapping[int, int]) -> str:
    """JSON object, keys ascending by index."""
    items = sorted((int(k), int(v)) for k, v in adjustments.items())
    return json.dumps({str(k): v for k, v in items})


def _as_int(value: object, what: str) -> int:
    if isinstance(value, bool):
        raise MalformedAdjustmentPayloadError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        return int(value)
    raise MalformedAdjustmentPayloadError(f"{what} must be an integer, got {value!r}")


def _parse_text(text: str) -> Mapping[object, object]:
    stripped = text.strip()
    if not stripped:
        return {}
    if stripped.startswith("{"):
        try:
            data = json.loads(stripped)
        except ValueError as e:
            raise MalformedAdjustmentPayloadError(f"Invalid JSON adjustment payload: {e}") from e
        if not isinstance(data, dict):
            raise MalformedAdjustmentPayloadError("Adjustment payload must be a JSON object")
        return data

    out: Dict[str, str] = {}
    for lineno, line in enumerate(stripped.splitlines(), 1):
        if not line.strip():
            continue
        m = _LEGACY_LINE.match(line)
        if m is None:
            raise MalformedAdjustmentPayloadError(f"Line {lineno}: expected 'index => mjd,', got {line!r}")
        out[m.group(1)] = m.group(2)
    return out


def deserialize(payload: Union[Mapping[object, object], str, None]) -> Dict[int, int]:
    """
    Strict parse of an adjustment payload.

    Raises MalformedAdjustmentPayloadError when the payload cannot be parsed,
    names a non-editable index, or would give any month a length other than
    29 or 30 days.
    """
    if payload is None:
        return {}
    raw = _parse_text(payload) if isinstance(payload, str) else payload

    out: Dict[int, int] = {}
    for k, v in raw.items():
        index = _as_int(k, "index")
        try:
            check_editable(index)
        except OutOfTableRangeError as e:
            raise MalformedAdjustmentPayloadError(str(e)) from e
        out[index] = _as_int(v, f"value for index {index}")

    values = list(load_baseline())
    for index, mjd in out.items():
        values[index] = mjd
    if not month_lengths_valid(tuple(values)):
        raise MalformedAdjustmentPayloadError("Adjustments give a month length other than 29 or 30 days")

    base = load_baseline()
    return {k: v for k, v in sorted(out.items()) if v != base[k]}


def load_adjustments(payload: Union[Mapping[object, object], str, None]) -> Dict[int, int]:
    """deserialize(), but a bad payload is logged and treated as no adjustments."""
    try:
        return deserialize(payload)
    except MalformedAdjustmentPayloadError as e:
        logger.warning("Ignoring adjustment data: %s", e)
        return {}
