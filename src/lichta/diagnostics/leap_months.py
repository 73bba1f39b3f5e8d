#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import lichta


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "lichta[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "lichta[diagnostics]"') from e


def parse_engines(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    if not (1 <= len(out) <= 3):
        raise SystemExit("--engines must contain 1 to 3 comma-separated engines")
    return out


def collect_leap_months(engine: str, start_year: int, end_year: int) -> List[Tuple[int, int]]:
    out = []
    for Y in range(start_year, end_year + 1):
        M = lichta.leap_month(Y, engine=engine)
        if M is not None:
            out.append((Y, M))
    return out


def plot_leap_months(engines: List[str], start_year: int, end_year: int, out: str, title: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()

    markers = ["o", "s", "^"]
    sizes = [22, 80, 90]

    fig, ax = plt.subplots(figsize=(16, 3.6))
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_yticks([1, 3, 6, 9, 12])
    ax.set_xlabel("Lunar year")
    ax.set_ylabel("Leap month label (month number)")

    for i, engine in enumerate(engines):
        pts = collect_leap_months(engine, start_year, end_year)
        x = np.array([y for y, _ in pts], dtype=int)
        m = np.array([mm for _, mm in pts], dtype=int)
        ax.scatter(
            x, m,
            s=sizes[i],
            marker=markers[i],
            facecolors="none" if i else "0.15",
            edgecolors="0.15",
            linewidths=1.2,
            label=engine,
            zorder=5,
        )

    ax.set_title(title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(out, dpi=250)
    print(f"Saved: {out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="List (and optionally plot) leap months over a range of lunar years.")
    p.add_argument("--start-year", type=int, default=1990)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--engines", default="vietnam", help="Comma list of 1-3 engines (default: vietnam).")
    p.add_argument("--plot", action="store_true", help="Draw a year x month chart (needs matplotlib).")
    p.add_argument("--out", default="leap_months.png")
    p.add_argument("--title", default="Leap month pattern")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    engines = parse_engines(args.engines)

    for engine in engines:
        pts = collect_leap_months(engine, start_year, end_year)
        print(f"{engine}: {len(pts)} leap years in {start_year}..{end_year}")
        for Y, M in pts:
            print(f"  {Y}  leap month {M}")

    if args.plot:
        plot_leap_months(engines, start_year, end_year, args.out, args.title)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
