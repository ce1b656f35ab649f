"""
ethcal.settings
---------------
User settings and change fan-out.

Settings are immutable; an update produces a new Settings value and notifies
the subscribers registered for the keys that actually changed. Subscribers run
in ascending priority, then registration order, and each runs at most once per
update even when it watches several changed keys.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Callable, List, Mapping, Tuple, Union

from .core.errors import ConfigurationError
from .i18n import LANGUAGES
from .services.date_formatter import PRESETS

logger = logging.getLogger(__name__)

POSITIONS: Tuple[str, ...] = ("left", "center", "right")
FORMATS: Tuple[str, ...] = tuple(PRESETS) + ("custom",)


@dataclass(frozen=True)
class Settings:
    status_bar_position: str = "left"
    status_bar_format: str = "full"
    status_bar_custom_format: str = "dday dd mnam year"
    calendar_language: str = "amharic"
    use_geez_numerals: bool = False
    week_start: int = 1

    def __post_init__(self) -> None:
        if self.status_bar_position not in POSITIONS:
            raise ConfigurationError(
                f"Invalid status_bar_position {self.status_bar_position!r}. Available: {POSITIONS}"
            )
        if self.status_bar_format not in FORMATS:
            raise ConfigurationError(
                f"Invalid status_bar_format {self.status_bar_format!r}. Available: {FORMATS}"
            )
        if self.calendar_language not in LANGUAGES:
            raise ConfigurationError(
                f"Invalid calendar_language {self.calendar_language!r}. Available: {LANGUAGES}"
            )
        if isinstance(self.week_start, bool) or not isinstance(self.week_start, int) \
                or not (0 <= self.week_start <= 6):
            raise ConfigurationError(f"Invalid week_start {self.week_start!r}. Must be between 0 and 6.")
        # Geez numerals are only offered with Amharic.
        if self.calendar_language == "english" and self.use_geez_numerals:
            object.__setattr__(self, "use_geez_numerals", False)

    @property
    def format_string(self) -> str:
        if self.status_bar_format == "custom":
            return self.status_bar_custom_format
        return PRESETS[self.status_bar_format]

    @classmethod
    def keys(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        """Build from a flat mapping; dashed keys (status-bar-format) are accepted."""
        known = set(cls.keys())
        kwargs = {}
        for k, v in data.items():
            name = k.replace("-", "_")
            if name not in known:
                raise ConfigurationError(f"Unknown setting {k!r}. Available: {sorted(known)}")
            kwargs[name] = v
        return cls(**kwargs)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Settings":
        """Read a TOML file; settings may sit at top level or under [ethcal]."""
        with open(path, "rb") as f:
            data = tomllib.load(f)
        data = data.get("ethcal", data)
        logger.debug("Loaded settings from %s: %s", path, sorted(data))
        return cls.from_mapping(data)


Subscriber = Callable[[Settings, Tuple[str, ...]], None]


class SettingsRegistry:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self._subs: List[Tuple[int, int, Tuple[str, ...], Subscriber]] = []
        self._seq = 0

    def subscribe(self, keys: Union[str, Tuple[str, ...]], fn: Subscriber, *, priority: int = 0) -> Callable[[], None]:
        """Register fn for one or more setting names; returns an unsubscribe callable."""
        keys = (keys,) if isinstance(keys, str) else tuple(keys)
        valid = set(Settings.keys())
        for k in keys:
            if k not in valid:
                raise ConfigurationError(f"Unknown setting {k!r}. Available: {sorted(valid)}")
        entry = (priority, self._seq, keys, fn)
        self._seq += 1
        self._subs.append(entry)

        def unsubscribe() -> None:
            if entry in self._subs:
                self._subs.remove(entry)
        return unsubscribe

    def update(self, **changes: Any) -> Tuple[str, ...]:
        """Apply changes, notify affected subscribers, and return the changed keys."""
        valid = set(Settings.keys())
        unknown = sorted(k for k in changes if k not in valid)
        if unknown:
            raise ConfigurationError(f"Unknown settings {unknown}. Available: {sorted(valid)}")
        new = replace(self.settings, **changes)
        changed = tuple(k for k in Settings.keys() if getattr(new, k) != getattr(self.settings, k))
        self.settings = new
        if not changed:
            return changed
        logger.debug("Settings changed: %s", changed)
        for _, _, keys, fn in sorted(self._subs, key=lambda s: (s[0], s[1])):
            hit = tuple(k for k in changed if k in keys)
            if hit:
                fn(new, hit)
        return changed
