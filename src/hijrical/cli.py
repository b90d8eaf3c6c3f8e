from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import os
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _fmt_ymd(t) -> str:
    y, m, d = t
    return f"{y:04d}-{m:02d}-{d:02d}"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import hijrical

    p = argparse.ArgumentParser(prog="hijrical day", description="Gregorian -> Hijri day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="umalqura")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = hijrical.day_info(_parse_ymd(args.date), engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    print(info)
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import hijrical

    p = argparse.ArgumentParser(prog="hijrical to-gregorian", description="Hijri -> Gregorian/Julian dates")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--engine", default="umalqura")
    args = p.parse_args(argv)

    if not hijrical.check_date(args.year, args.month, args.day, engine=args.engine):
        print(f"Not a valid Hijri date: {args.year}/{args.month}/{args.day}", file=sys.stderr)
        return 1

    jdn = hijrical.hijri_to_jdn(args.year, args.month, args.day, engine=args.engine)
    greg = hijrical.hijri_to_gregorian(args.year, args.month, args.day, engine=args.engine)
    if greg is None:
        print("Date is before the earliest supported tabular date", file=sys.stderr)
        return 1
    print(f"JDN       = {jdn}")
    print(f"Gregorian = {_fmt_ymd(greg)}")
    print(f"Julian    = {_fmt_ymd(hijrical.hijri_to_julian(args.year, args.month, args.day, engine=args.engine))}")
    print(f"Western   = {_fmt_ymd(hijrical.hijri_to_western(args.year, args.month, args.day, engine=args.engine))}")
    return 0


def cmd_month(argv: list[str]) -> int:
    import hijrical

    p = argparse.ArgumentParser(prog="hijrical month", description="Bounds and length of a Hijri month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--engine", default="umalqura")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    b = hijrical.month_bounds(args.year, args.month, engine=args.engine, as_date=args.year > 0)
    print(b)
    if args.debug:
        print(hijrical.month_info(args.year, args.month, engine=args.engine, debug=True))
    return 0


def _read_payload(path: str) -> str | None:
    if not os.path.exists(path):
        return None
    with open(path, encoding="utf-8") as f:
        return f.read()


def _write_payload(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text + "\n")


def cmd_adjust(argv: list[str]) -> int:
    from hijrical.adjust import CalendarAdjuster

    p = argparse.ArgumentParser(prog="hijrical adjust", description="Review and edit Umm al-Qura month starts.")
    p.add_argument("action", choices=["list", "show", "add", "delete", "starts", "auto-delete"])
    p.add_argument("--file", required=True, help="JSON adjustment file (created on first add)")
    p.add_argument("--year", type=int)
    p.add_argument("--month", type=int)
    p.add_argument("--start", help="new month start: MJD or day-month-year Gregorian date")
    args = p.parse_args(argv)

    adj = CalendarAdjuster(_read_payload(args.file))

    if args.action == "list":
        for a in adj.current_adjustments():
            print(
                f"{a.year}/{a.month:02d}  index={a.index}  current={a.current_mjd} ({_fmt_ymd(a.current_date)})"
                f"  default={a.default_mjd} ({_fmt_ymd(a.default_date)})"
            )
        return 0

    if args.action == "show":
        print(adj.serialize())
        return 0

    if args.year is None or args.month is None:
        p.error(f"{args.action} needs --year and --month")

    if args.action == "starts":
        for c in adj.possible_starts(args.year, args.month):
            mark = "*" if c.is_current else " "
            print(f"{mark} {c.mjd} ({_fmt_ymd(c.gregorian)})")
            for e in c.cascade:
                print(f"    also moves {e.year}/{e.month:02d} to {e.mjd} ({_fmt_ymd(e.gregorian)})")
        return 0

    if args.action == "auto-delete":
        for ref in adj.auto_delete_info(args.year, args.month):
            print(f"{ref.year}/{ref.month:02d}")
        return 0

    if args.action == "add":
        if args.start is None:
            p.error("add needs --start")
        if not adj.add_adjustment(args.year, args.month, args.start):
            print(f"Rejected start {args.start!r} for {args.year}/{args.month}", file=sys.stderr)
            return 1
        _write_payload(args.file, adj.serialize())
        return 0

    if args.action == "delete":
        if not adj.delete_adjustment(args.year, args.month):
            print(f"No adjustment for {args.year}/{args.month}", file=sys.stderr)
            return 1
        _write_payload(args.file, adj.serialize())
        return 0

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `hijrical YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="hijrical", description="Hijri calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Hijri day label")
    sub.add_parser("to-gregorian", help="Hijri -> Gregorian/Julian dates")
    sub.add_parser("month", help="Bounds and length of a Hijri month")
    sub.add_parser("adjust", help="Review and edit Umm al-Qura adjustments")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "compare-tabular"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-gregorian":
        return cmd_to_gregorian(rest)

    if args.cmd == "month":
        return cmd_month(rest)

    if args.cmd == "adjust":
        return cmd_adjust(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "hijrical.diagnostics.round_trip",
            "compare-tabular": "hijrical.diagnostics.compare_tabular",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
