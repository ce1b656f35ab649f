"""Geez (Ethiopic) numerals.

Numbers are kept as ints everywhere and converted only at display time with
``format_number``.
"""
from __future__ import annotations

from typing import Union

ONES = ("", "፩", "፪", "፫", "፬", "፭", "፮", "፯", "፰", "፱")
TENS = ("", "፲", "፳", "፴", "፵", "፶", "፷", "፸", "፹", "፺")
HUNDRED = "፻"
TEN_THOUSAND = "፼"


def to_geez(n: int) -> str:
    """
    Render a non-negative int in Geez numerals.

    Digits are read in pairs from the right; pairs are joined by ፻ and ፼
    alternately. A lone ፩ is dropped in front of ፻, and in front of ፼ when it
    leads the number (100 -> ፻, 10000 -> ፼, 2016 -> ፳፻፲፮).
    Geez has no zero; 0 renders as "0".
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"to_geez expects an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"to_geez expects a non-negative int, got {n}")
    if n == 0:
        return "0"

    digits = str(n)
    if len(digits) % 2:
        digits = "0" + digits
    pairs = [int(digits[i:i + 2]) for i in range(0, len(digits), 2)]

    out = []
    for idx, p in enumerate(pairs):
        pos = len(pairs) - 1 - idx
        tens, ones = divmod(p, 10)
        chunk = TENS[tens] + ONES[ones]
        if pos == 0:
            out.append(chunk)
            continue
        sep = HUNDRED if pos % 2 == 1 else TEN_THOUSAND
        if p == 0:
            if sep == HUNDRED:
                sep = ""
        elif p == 1 and (sep == HUNDRED or idx == 0):
            chunk = ""
        out.append(chunk + sep)
    return "".join(out)

def format_number(n: int, use_geez: bool) -> Union[int, str]:
    return to_geez(n) if use_geez else n
