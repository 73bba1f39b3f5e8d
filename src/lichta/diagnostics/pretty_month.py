from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse
from typing import Callable, List, Optional, Tuple

import lichta

CELL_W = 6

# Cell = (top line, bottom line); None pads days outside the printed range
Cell = Optional[Tuple[str, str]]


def week_rows(first: date, last: date, firstweekday: int) -> List[List[date]]:
    """Calendar weeks (lists of 7 dates) covering first..last."""
    rows: List[List[date]] = []
    d = first - timedelta(days=(first.weekday() - firstweekday) % 7)
    while d <= last:
        rows.append([d + timedelta(days=i) for i in range(7)])
        d += timedelta(days=7)
    return rows


def header(firstweekday: int) -> str:
    names = [pycal.day_abbr[i][:2] for i in pycal.Calendar(firstweekday).iterweekdays()]
    return " ".join(n.ljust(CELL_W) for n in names).rstrip()


def render(title: str, first: date, last: date, label: Callable[[date], Tuple[str, str]], firstweekday: int) -> None:
    print(title)
    h = header(firstweekday)
    print(h)
    print("-" * len(h))
    for row in week_rows(first, last, firstweekday):
        cells: List[Cell] = [label(d) if first <= d <= last else None for d in row]
        print(" ".join((c[0] if c else "").ljust(CELL_W) for c in cells).rstrip())
        print(" ".join((c[1] if c else "").ljust(CELL_W) for c in cells).rstrip())
    print()


def lunar_month_calendar(engine: str, Y: int, M: int, is_leap: bool, firstweekday: int = 0) -> None:
    """Grid of one lunar month: lunar day on top, civil MM-DD below."""
    b = lichta.month_bounds(Y, M, is_leap_month=is_leap, engine=engine)
    d0, d1 = b["first_date"], b["last_date"]

    def label(d: date) -> Tuple[str, str]:
        n = (d - d0).days + 1
        return f"{n:2d}", f"{d.month:02d}-{d.day:02d}"

    leap_tag = "L" if is_leap else ""
    title = f"{engine} lunar month {M}{leap_tag} of {Y}  ({d0} .. {d1}, {b['length']} days)"
    render(title, d0, d1, label, firstweekday)


def gregorian_month_calendar(engine: str, gy: int, gm: int, firstweekday: int = 0) -> None:
    """Grid of one civil month: day on top, lunar MM-DD below (`*` marks day 1 of a lunar month)."""
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    def label(d: date) -> Tuple[str, str]:
        t = lichta.to_lunar(d, engine=engine)
        leap_tag = "L" if t.is_leap_month else ""
        mark = "*" if t.day == 1 else ""
        return f"{d.day:2d}{mark}", f"{t.month:02d}{leap_tag}-{t.day:02d}"

    render(f"{engine} Gregorian month  {gy}-{gm:02d}", first, last, label, firstweekday)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar month, or a Gregorian month with lunar labels, as a weekly grid."
    )
    p.add_argument("--engine", default="vietnam", help="vietnam|china (default: vietnam)")
    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: Y M (e.g. 2025 6)")
    p.add_argument("--leap", action="store_true", help="The lunar month is the leap instance.")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 7)")
    p.add_argument("--sunday-first", action="store_true", help="Start weeks on Sunday.")
    args = p.parse_args(argv)

    fw = pycal.SUNDAY if args.sunday_first else pycal.MONDAY

    if not args.lunar and not args.greg:
        # leap month 6 of 2025 and the civil month it starts in
        lunar_month_calendar(args.engine, 2025, 6, True, fw)
        gregorian_month_calendar(args.engine, 2025, 7, fw)
        return 0

    if args.lunar:
        Y, M = args.lunar
        lunar_month_calendar(args.engine, Y, M, args.leap, fw)
    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy, gm, fw)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
