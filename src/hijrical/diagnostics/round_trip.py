from __future__ import annotations

import argparse
import random
from typing import List

import hijrical


def parse_engines(s: str) -> List[str]:
    # "umalqura,tabular" -> ["umalqura", "tabular"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    engine: str,
    N: int,
    start_jdn: int,
    end_jdn: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0

    for _ in range(N):
        jdn = random.randint(start_jdn, end_jdn)
        y, m, d, _ = hijrical.jdn_to_hijri(jdn, engine=engine)

        ok = hijrical.check_date(y, m, d, engine=engine)
        back = hijrical.hijri_to_jdn(y, m, d, engine=engine)
        if not ok or back != jdn:
            failures += 1
            print("\nFAIL")
            print("engine:", engine)
            print("jdn:", jdn)
            print("hijri:", (y, m, d), "valid:", ok)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: JDN -> Hijri -> JDN.")
    p.add_argument("--engines", type=str, default="umalqura,tabular", help="Comma-separated engine list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per engine.")
    p.add_argument("--start-jdn", type=int, default=1948439, help="First JDN (default: 1/1/1 AH).")
    p.add_argument("--end-jdn", type=int, default=2488000, help="Last JDN.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per engine.")
    args = p.parse_args(argv)

    if args.end_jdn < args.start_jdn:
        raise SystemExit("--end-jdn must be >= --start-jdn")

    total_fail = 0
    for eng in parse_engines(args.engines):
        print(f"Testing {eng} ...")
        total_fail += roundtrip_test(
            eng, N=args.N, start_jdn=args.start_jdn, end_jdn=args.end_jdn,
            seed=args.seed, max_failures=args.max_failures,
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
