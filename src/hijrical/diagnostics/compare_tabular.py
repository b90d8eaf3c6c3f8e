#!/usr/bin/env python3
from __future__ import annotations

import argparse
from collections import Counter
from typing import List, Optional, Tuple

from hijrical.adjust.payload import load_adjustments
from hijrical.core.time import MJD_OFFSET
from hijrical.engines import tabular
from hijrical.engines.umalqura import END_YEAR, START_YEAR, UmmAlQuraTable, index_of


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "hijrical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "hijrical[diagnostics]"') from e


def month_offsets(table: UmmAlQuraTable, start_year: int, end_year: int) -> List[Tuple[int, int, int]]:
    """(year, month, umalqura_start - tabular_start) for every month in range."""
    out = []
    for Y in range(start_year, end_year + 1):
        for M in range(1, 13):
            uq = table[index_of(Y, M)] + MJD_OFFSET
            out.append((Y, M, uq - tabular.hijri_to_jdn(Y, M, 1)))
    return out


def plot_offsets(rows: List[Tuple[int, int, int]], out: str, title: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    x = np.array([Y + (M - 1) / 12.0 for Y, M, _ in rows], dtype=float)
    y = np.array([off for _, _, off in rows], dtype=int)

    fig, ax = plt.subplots(figsize=(12, 4))
    ax.scatter(x, y, s=6, color="0.15")
    ax.axhline(0, color="0.6", lw=0.8)
    ax.set_xlabel("Hijri year")
    ax.set_ylabel("Umm al-Qura - tabular (days)")
    ax.set_yticks(range(int(y.min()), int(y.max()) + 1))
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(out, dpi=150)
    print(f"Wrote {out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compare Umm al-Qura month starts with the tabular calendar.")
    p.add_argument("--start-year", type=int, default=START_YEAR)
    p.add_argument("--end-year", type=int, default=END_YEAR)
    p.add_argument("--adjustments", default=None, help="JSON adjustment file to overlay on the table")
    p.add_argument("--plot", action="store_true", help="Save a scatter plot (needs numpy and matplotlib)")
    p.add_argument("--out", default="umalqura_vs_tabular.png")
    p.add_argument("--title", default="Umm al-Qura month starts relative to the tabular calendar")
    args = p.parse_args(argv)

    if not (START_YEAR <= args.start_year <= args.end_year <= END_YEAR):
        raise SystemExit(f"Years must satisfy {START_YEAR} <= start <= end <= {END_YEAR}")

    adjustments = None
    if args.adjustments:
        with open(args.adjustments, encoding="utf-8") as f:
            adjustments = load_adjustments(f.read())

    rows = month_offsets(UmmAlQuraTable(adjustments), args.start_year, args.end_year)
    hist = Counter(off for _, _, off in rows)

    print(f"Months {args.start_year}/1 .. {args.end_year}/12: {len(rows)}")
    print("offset  months")
    for off in sorted(hist):
        print(f"{off:+6d}  {hist[off]}")

    if args.plot:
        plot_offsets(rows, args.out, args.title)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
