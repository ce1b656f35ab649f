from __future__ import annotations

import argparse
import importlib
import inspect
import logging
from datetime import date, datetime

from rich.logging import RichHandler


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _parse_ymd(s: str) -> tuple[int, int, int]:
    y, m, d = map(int, s.replace("/", "-").split("-"))
    return y, m, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """Import module and run its main(argv)."""
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    rv = fn() if len(sig.parameters) == 0 else fn(argv)
    return int(rv or 0)


def _print_day(date_e, lang: str) -> None:
    from ethcal.services.day_info import DayInfoService

    svc = DayInfoService(lang)
    res = svc.get_day_events(date_e)
    info = res.day_info
    today = "  (today)" if info.is_today else ""
    print(f"{info.ethiopian}  {info.weekday_name}  {info.gregorian.isoformat()}{today}")
    if not res.has_events:
        print("  no events")
        return
    for ev in res.events:
        tags = f"  [{', '.join(ev.tags)}]" if ev.tags else ""
        print(f"  {ev.type:8s} {ev.title}{tags}")
        if ev.description:
            print(f"           {ev.description}")


def cmd_day(argv: list[str]) -> int:
    from ethcal.core.types import EthiopianDate
    from ethcal.engines.ethiopian import to_ethiopian

    p = argparse.ArgumentParser(prog="ethcal day", description="Events of one Ethiopian date")
    p.add_argument("date", help="Ethiopian YYYY-MM-DD (or Gregorian with --gregorian)")
    p.add_argument("--gregorian", action="store_true", help="interpret DATE as a Gregorian date")
    p.add_argument("--lang", choices=("amharic", "english"), default="english")
    args = p.parse_args(argv)

    y, m, d = _parse_ymd(args.date)
    e = to_ethiopian(date(y, m, d)) if args.gregorian else EthiopianDate(y, m, d)
    _print_day(e, args.lang)
    return 0


def cmd_today(argv: list[str]) -> int:
    from ethcal.engines.ethiopian import now

    p = argparse.ArgumentParser(prog="ethcal today", description="Events of the current Ethiopian date")
    p.add_argument("--lang", choices=("amharic", "english"), default="english")
    args = p.parse_args(argv)

    _print_day(now(), args.lang)
    return 0


def cmd_format(argv: list[str]) -> int:
    from ethcal.services.date_formatter import PRESETS, DateFormatterOptions, DateFormatterService
    from ethcal.settings import Settings

    p = argparse.ArgumentParser(prog="ethcal format", description="Render status-bar text for now")
    p.add_argument("pattern", nargs="?", help=f"token pattern or preset {sorted(PRESETS)}")
    p.add_argument("--settings", help="TOML settings file")
    p.add_argument("--lang", choices=("amharic", "english"), default=None)
    p.add_argument("--geez", action="store_true")
    p.add_argument("--at", help="ISO datetime to format instead of now")
    args = p.parse_args(argv)

    settings = Settings.load(args.settings) if args.settings else Settings()
    lang = args.lang or settings.calendar_language
    geez = (args.geez or settings.use_geez_numerals) and lang == "amharic"
    fmt = DateFormatterService(DateFormatterOptions(lang, geez))

    pattern = args.pattern or settings.format_string
    pattern = PRESETS.get(pattern, pattern)
    check = fmt.validate_format(pattern)
    if not check.is_valid:
        raise SystemExit("; ".join(check.errors))

    when = datetime.fromisoformat(args.at) if args.at else None
    print(fmt.format(pattern, when))
    return 0


def cmd_holidays(argv: list[str]) -> int:
    from ethcal.holidays import HolidayTags, get_holidays_in_month

    p = argparse.ArgumentParser(prog="ethcal holidays", description="List holidays of an Ethiopian year")
    p.add_argument("year", type=int)
    p.add_argument("--lang", choices=("amharic", "english"), default="english")
    p.add_argument("--tag", action="append", choices=HolidayTags.ALL, default=None,
                   help="keep holidays carrying this tag (repeatable)")
    args = p.parse_args(argv)

    for month in range(1, 14):
        for h in get_holidays_in_month(args.year, month, lang=args.lang, filter=args.tag):
            print(f"{h.ethiopian}  {h.gregorian.isoformat()}  {h.name}  [{', '.join(h.tags)}]")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="ethcal")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("month", help="Print an Ethiopian month grid.")
    sub.add_parser("day", help="Holidays and fasts of one date.")
    sub.add_parser("today", help="Holidays and fasts of the current date.")
    sub.add_parser("format", help="Render status-bar text.")
    sub.add_parser("holidays", help="List the holidays of a year.")
    sub.add_parser("feasts", help="Movable feasts table for a range of years.")

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "month":
        return _run_module_main("ethcal.diagnostics.pretty_month", rest)

    if args.cmd == "feasts":
        return _run_module_main("ethcal.diagnostics.feasts_table", rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "format":
        return cmd_format(rest)

    if args.cmd == "holidays":
        return cmd_holidays(rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
