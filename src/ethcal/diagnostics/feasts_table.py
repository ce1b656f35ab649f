from __future__ import annotations

import argparse
from typing import List

from ethcal import fasting, holidays
from ethcal.core.types import EthiopianDate
from ethcal.engines import computus
from ethcal.engines.ethiopian import to_gregorian


MOVABLE = ["nineveh", "abiy_tsome", "debre_zeit", "hosanna", "siklet", "fasika", "erget", "peraklitos"]


def fmt(d: EthiopianDate, iso: bool) -> str:
    if iso:
        return to_gregorian(d).isoformat()
    return f"{d.month:02d}-{d.day:02d}"


def row(year: int, iso: bool) -> List[str]:
    f = computus.fasika(year)
    out = [str(year)]
    for key in MOVABLE:
        if key == "nineveh":
            d = fasting.get_fasting_period(fasting.FastingKeys.NINEVEH, year).start
        elif key == "abiy_tsome":
            d = fasting.get_fasting_period(fasting.FastingKeys.ABIY_TSOME, year).start
        elif key == "fasika":
            d = f
        else:
            d = holidays.get_holiday(key, year)[0].ethiopian
        out.append(fmt(d, iso))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="ethcal feasts",
        description="Print the movable feasts (Bahire Hasab) for a range of Ethiopian years.",
    )
    p.add_argument("--from-year", type=int, default=2010)
    p.add_argument("--to-year", type=int, default=2025)
    p.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd",
                   help="Ethiopian MM-DD or Gregorian ISO dates (default: mmdd).")
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    iso = args.dates == "iso"
    headers = ["Year"] + MOVABLE
    colw = [5] + [max(10 if iso else 5, len(h)) for h in MOVABLE]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))
    for Y in range(Y0, Y1 + 1):
        print("  ".join(c.ljust(w) for c, w in zip(row(Y, iso), colw)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
