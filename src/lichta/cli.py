from __future__ import annotations

import argparse
from datetime import date
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


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


def _fmt_lunar(t) -> str:
    leap_tag = " (leap)" if t.is_leap_month else ""
    return f"{t.day:02d}/{t.month:02d}{leap_tag}/{t.year}"


def cmd_day(argv: list[str]) -> int:
    import lichta

    p = argparse.ArgumentParser(prog="lichta day", description="Gregorian -> lunar date label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="vietnam")
    p.add_argument("--tz", type=float, default=None, help="UTC offset in hours (overrides the engine's)")
    p.add_argument("--debug", action="store_true")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    info = lichta.day_info(d, engine=args.engine, timezone=args.tz, debug=args.debug)
    print(f"{d.isoformat()}  ->  {_fmt_lunar(info.lunar)}  (solar term {info.solar_term})")
    if args.debug:
        for key, value in info.debug.items():
            if key in ("engine", "result"):
                continue
            print(f"  {key:<17}= {value}")
    return 0


def cmd_to_solar(argv: list[str]) -> int:
    import lichta

    p = argparse.ArgumentParser(prog="lichta to-solar", description="Lunar date label -> Gregorian")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="The month is the leap instance")
    p.add_argument("--engine", default="vietnam")
    p.add_argument("--tz", type=float, default=None)
    args = p.parse_args(argv)

    d = lichta.to_gregorian(
        args.year, args.month, args.day,
        is_leap_month=args.leap, engine=args.engine, timezone=args.tz,
    )
    print(d.isoformat())
    return 0


def cmd_year(argv: list[str]) -> int:
    import lichta
    from lichta.core.time import from_jdn

    p = argparse.ArgumentParser(prog="lichta year", description="List the lunations from month 11 of Y-1 to month 10 of Y")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default="vietnam")
    p.add_argument("--tz", type=float, default=None)
    args = p.parse_args(argv)

    months = lichta.lunar_months(args.year, engine=args.engine, timezone=args.tz)
    print("Year   Month  Start       Days")
    print("-" * 30)
    for m in months:
        leap_tag = "L" if m.is_leap_month else " "
        print(f"{m.year:<6} {m.month:>2}{leap_tag}    {from_jdn(m.first_jdn).isoformat()}  {m.length}")
    return 0


def cmd_astro(argv: list[str]) -> int:
    from lichta.engines.astro import solar
    from lichta.engines.astro.new_moon import get_new_moon_day, new_moon_aa98
    from lichta.engines.month_index import JulianMonthIndex

    p = argparse.ArgumentParser(prog="lichta astro", description="Print solar longitude and new moon values.")
    p.add_argument("--jdn", type=float, default=2451545.0, help="Julian Day Number of the civil day (default: 2451545)")
    p.add_argument("--tz", type=float, default=7.0, help="UTC offset in hours (default: 7.0)")
    p.add_argument("--k", type=int, default=None, help="Lunation index since 1900 (default: derived from --jdn)")
    args = p.parse_args(argv)

    k = JulianMonthIndex(args.k) if args.k is not None else JulianMonthIndex.from_julian_day(args.jdn)

    print(f"JDN = {args.jdn:.6f}   timezone = {args.tz:+g} h")
    print()
    print("Sun at local midnight (degrees)")
    print(f"  longitude  = {solar.get_sun_longitude(args.jdn, args.tz):.10f}")
    print(f"  segment    = {solar.solar_segment(args.jdn, args.tz)}")
    print(f"  solar term = {solar.solar_term(args.jdn, args.tz)}")
    print()
    print(f"New moon (k = {k.value})")
    print(f"  JD (UTC)      = {new_moon_aa98(k):.8f}")
    print(f"  local day JDN = {get_new_moon_day(k, args.tz)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `lichta YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="lichta", description="Vietnamese lunisolar calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar date label")
    sub.add_parser("to-solar", help="Lunar date label -> Gregorian date")
    sub.add_parser("year", help="List the months of a lunar year")
    sub.add_parser("astro", help="Print solar longitude and new moon values")

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print New Year (Tet) table (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["leap-months"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-solar":
        return cmd_to_solar(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "astro":
        return cmd_astro(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("lichta.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("lichta.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-months": "lichta.diagnostics.leap_months",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
