from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from ethcal.core.types import DayCell, MonthGridResult
from ethcal.services.month_grid import MonthGridService


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def render_cell(c: Optional[DayCell]) -> Tuple[str, str]:
    if c is None:
        return cell("", "")
    mark = "*" if c.is_today else ("+" if c.holidays else "")
    top = f"{c.label.day}{mark}"
    bot = f"{c.gregorian.month:02d}-{c.gregorian.day:02d}"
    return cell(top, bot)


def render_grid(grid: MonthGridResult, w: int = 6) -> List[str]:
    header = " ".join(h[:w].ljust(w) for h in grid.headers)
    lines = [f"{grid.month_name} {grid.year}", header, "-" * len(header)]
    for wk in grid.weeks():
        cells = [render_cell(c) for c in wk]
        lines.append(" ".join(c[0] for c in cells).rstrip())
        lines.append(" ".join(c[1] for c in cells).rstrip())
    holidays = [h for c in grid.cells() for h in c.holidays]
    if holidays:
        lines.append("")
        for h in holidays:
            lines.append(f"  {h.ethiopian.day:2d}  {h.name}  ({', '.join(h.tags)})")
    return lines


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="ethcal month",
        description="Print an Ethiopian month grid with Gregorian equivalents and holidays.",
    )
    p.add_argument("ym", nargs="*", type=int, metavar="Y M", help="Ethiopian year and month (default: current)")
    p.add_argument("--week-start", type=int, default=1, help="0=Sunday .. 6=Saturday (default: 1)")
    p.add_argument("--lang", choices=("amharic", "english"), default="english")
    p.add_argument("--geez", action="store_true", help="Render numbers in Geez numerals")
    p.add_argument("--mode", choices=("christian", "muslim", "public"), default=None)
    p.add_argument("--months", type=int, default=1, help="Number of consecutive months to print")
    args = p.parse_args(argv)

    if len(args.ym) not in (0, 2):
        p.error("expected Y M or nothing")
    year, month = (args.ym if args.ym else (None, None))

    svc = MonthGridService(
        year=year, month=month, week_start=args.week_start,
        use_geez=args.geez, weekday_lang=args.lang, mode=args.mode,
    )
    grid = svc.generate()
    for i in range(args.months):
        if i:
            grid = grid.up()
            print()
        print("\n".join(render_grid(grid)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
