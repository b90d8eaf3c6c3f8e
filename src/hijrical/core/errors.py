class HijriError(Exception):
    """Base error."""

class OutOfTableRangeError(HijriError, ValueError):
    """Raised when a table-only operation targets a month outside the Umm al-Qura table."""

class InvalidAdjustmentLengthError(HijriError, ValueError):
    """Raised when a proposed month start would give a month other than 29 or 30 days."""

class MalformedAdjustmentPayloadError(HijriError, ValueError):
    """Raised when serialized adjustment data cannot be parsed or is inconsistent."""
