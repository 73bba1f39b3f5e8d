from __future__ import annotations

from datetime import date
import argparse
from typing import Dict, List

import lichta


def tet_row(year: int, engines: List[str]) -> Dict[str, date]:
    return {eng: lichta.new_year_day(year, engine=eng) for eng in engines}


def leap_column(year: int, engine: str) -> str:
    m = lichta.leap_month(year, engine=engine)
    return "-" if m is None else f"{m}L"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print lunar New Year (Tet) dates for a range of lunar years, one column per engine."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--engines", default="vietnam,china", help="Comma list of engines (default: vietnam,china).")
    p.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd",
                   help="Date format in the table (default: mmdd).")
    p.add_argument("--leap", action="store_true", help="Add the leap month of the first engine.")
    args = p.parse_args(argv)

    engines = [e.strip() for e in args.engines.split(",") if e.strip()]
    if not engines:
        raise SystemExit("--engines must name at least one engine")
    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return d.isoformat() if args.dates == "iso" else f"{d.month:02d}-{d.day:02d}"

    w = 10 if args.dates == "iso" else 5
    cols = ["Year"] + [e.ljust(w) for e in engines] + ["Dow"] + (["Leap"] if args.leap else [])
    head = "  ".join(cols)
    print(head)
    print("=" * len(head))

    disagree: List[int] = []
    for Y in range(args.from_year, args.to_year + 1):
        row = tet_row(Y, engines)
        first = row[engines[0]]
        cells = [f"{Y:<4}"] + [fmt(row[e]).ljust(max(w, len(e))) for e in engines] + [first.strftime("%a")]
        if args.leap:
            cells.append(leap_column(Y, engines[0]))
        if len(set(row.values())) > 1:
            disagree.append(Y)
        print("  ".join(cells))

    if len(engines) > 1:
        print()
        print("Engines disagree in: " + (", ".join(str(y) for y in disagree) or "(no year)"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
