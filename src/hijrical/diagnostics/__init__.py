"""Diagnostics package.

- round_trip: random JDN -> Hijri -> JDN checks (no extras needed)
- compare_tabular: Umm al-Qura vs tabular month starts; --plot needs the diagnostics extras
"""

__all__ = ["round_trip", "compare_tabular"]
