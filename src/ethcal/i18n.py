from __future__ import annotations

from typing import Dict, Tuple

from .core.errors import ConfigurationError

LANGUAGES: Tuple[str, ...] = ("amharic", "english")

# Sunday first, matching weekday() indexing.
WEEKDAY_NAMES: Dict[str, Tuple[str, ...]] = {
    "amharic": ("እሑድ", "ሰኞ", "ማክሰኞ", "ረቡዕ", "ሐሙስ", "ዓርብ", "ቅዳሜ"),
    "english": ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
}

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "amharic": (
        "መስከረም", "ጥቅምት", "ኅዳር", "ታኅሣሥ", "ጥር", "የካቲት", "መጋቢት",
        "ሚያዝያ", "ግንቦት", "ሰኔ", "ሐምሌ", "ነሐሴ", "ጳጉሜን",
    ),
    "english": (
        "Meskerem", "Tikimt", "Hidar", "Tahsas", "Tir", "Yekatit", "Megabit",
        "Miazia", "Ginbot", "Sene", "Hamle", "Nehase", "Pagume",
    ),
}

DAY_WORD = {"amharic": "ቀን", "english": "Day"}


def validate_language(lang: str) -> str:
    if lang not in LANGUAGES:
        raise ConfigurationError(f"Invalid language: {lang!r}. Must be one of {LANGUAGES}.")
    return lang

def weekday_name(i: int, lang: str = "amharic") -> str:
    return WEEKDAY_NAMES[validate_language(lang)][i % 7]

def month_name(m: int, lang: str = "amharic") -> str:
    if not (1 <= m <= 13):
        raise ValueError(f"month must be in 1..13, got {m}")
    return MONTH_NAMES[validate_language(lang)][m - 1]

def localized(text: Dict[str, str], lang: str) -> str:
    """Pick a language entry, falling back to Amharic."""
    return text.get(lang) or text["amharic"]
