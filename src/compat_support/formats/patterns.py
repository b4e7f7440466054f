# src/compat_support/formats/patterns.py

"""
patterns.py.

Does: Process-wide registry of date/time patterns keyed by format-descriptor
      identity, and a renderer for legacy custom date patterns
      ("d-MMM-yy", "h:mm:ss tt", ...).
Returns: DateTimeFormatRegistry, MANAGER, render_pattern(), format_date_time().
Used by: Ported code that formatted dates through a shared pattern table.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from itertools import groupby
from pathlib import Path
from typing import Any, Callable

from compat_support.tokenizer import Tokenizer
from compat_support.utils.load_config import ConfigTypeError, bundled_data_dir, load_config

__all__ = [
    "DateTimeFormatRegistry",
    "MANAGER",
    "render_pattern",
    "format_date_time",
]

log = logging.getLogger(__name__)

# Characters passed through verbatim between pattern fields
PATTERN_SEPARATORS = " -/:.,"

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_NAMES = ("January", "February", "March", "April", "May", "June", "July",
                "August", "September", "October", "November", "December")
_DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


# ─────────────────────────────────────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class _Patterns:
    date_pattern: str
    time_pattern: str


def _validate_defaults(data: dict[str, Any]) -> dict[str, Any]:
    for key in ("date_pattern", "time_pattern"):
        if not isinstance(data.get(key), str):
            raise ConfigTypeError(f"'{key}' must be a string")
    return data


class DateTimeFormatRegistry:
    """
    Does: Map a format descriptor (any object, matched by identity) to its
          date and time patterns. Unregistered descriptors get the defaults:
          `defaults` if given, else formats.json from `data_dir` (the bundled
          data/ directory unless overridden), loaded on first use.
    """

    def __init__(
        self,
        defaults: dict[str, str] | None = None,
        *,
        data_dir: Path | None = None,
    ) -> None:
        self._defaults = defaults
        self._data_dir = data_dir
        # id(fmt) -> (fmt, patterns); holding fmt keeps its id from being reused
        self._entries: dict[int, tuple[Any, _Patterns]] = {}
        self._lock = threading.RLock()

    def _default_patterns(self) -> dict[str, str]:
        if self._defaults is None:
            self._defaults = load_config(
                "formats",
                mode="validated_dict",
                base_dir=self._data_dir or bundled_data_dir(),
                validator=_validate_defaults,
            )
            log.debug("Loaded default patterns: %s", self._defaults)
        return self._defaults

    def _entry(self, fmt: Any, create: bool) -> _Patterns | None:
        with self._lock:
            found = self._entries.get(id(fmt))
            if found is not None:
                return found[1]
            if not create:
                return None
            defaults = self._default_patterns()
            patterns = _Patterns(defaults["date_pattern"], defaults["time_pattern"])
            self._entries[id(fmt)] = (fmt, patterns)
            return patterns

    def set_date_pattern(self, fmt: Any, pattern: str) -> None:
        self._entry(fmt, create=True).date_pattern = pattern

    def set_time_pattern(self, fmt: Any, pattern: str) -> None:
        self._entry(fmt, create=True).time_pattern = pattern

    def get_date_pattern(self, fmt: Any) -> str:
        entry = self._entry(fmt, create=False)
        return entry.date_pattern if entry else self._default_patterns()["date_pattern"]

    def get_time_pattern(self, fmt: Any) -> str:
        entry = self._entry(fmt, create=False)
        return entry.time_pattern if entry else self._default_patterns()["time_pattern"]

    def __len__(self) -> int:
        return len(self._entries)


MANAGER = DateTimeFormatRegistry()


# ─────────────────────────────────────────────────────────────────────────────
# Rendering
# ─────────────────────────────────────────────────────────────────────────────


def _num(value: int, width: int) -> str:
    return str(value) if width == 1 else f"{value:0{width}d}"


def _day(dt: datetime, n: int) -> str:
    if n >= 4:
        return _DAY_NAMES[dt.weekday()]
    if n == 3:
        return _DAY_ABBR[dt.weekday()]
    return _num(dt.day, n)


def _month(dt: datetime, n: int) -> str:
    if n >= 4:
        return _MONTH_NAMES[dt.month - 1]
    if n == 3:
        return _MONTH_ABBR[dt.month - 1]
    return _num(dt.month, n)


def _year(dt: datetime, n: int) -> str:
    if n <= 2:
        return _num(dt.year % 100, n)
    return _num(dt.year, n)


def _hour12(dt: datetime, n: int) -> str:
    return _num(dt.hour % 12 or 12, min(n, 2))


def _designator(dt: datetime, n: int) -> str:
    am_pm = "AM" if dt.hour < 12 else "PM"
    return am_pm[0] if n == 1 else am_pm


_FIELDS: dict[str, Callable[[datetime, int], str]] = {
    "d": _day,
    "M": _month,
    "y": _year,
    "h": _hour12,
    "H": lambda dt, n: _num(dt.hour, min(n, 2)),
    "m": lambda dt, n: _num(dt.minute, min(n, 2)),
    "s": lambda dt, n: _num(dt.second, min(n, 2)),
    "t": _designator,
}


def render_pattern(pattern: str, dt: datetime) -> str:
    """
    Does: Render `dt` with a legacy custom pattern. Separator characters are
          returned by the tokenizer as their own tokens and copied through;
          letter runs are grouped by character and mapped to date fields.
    Returns: Formatted string; unknown characters are kept as-is.
    """
    out: list[str] = []
    for token in Tokenizer(pattern, PATTERN_SEPARATORS, retain_delimiters=True):
        if len(token) == 1 and token in PATTERN_SEPARATORS:
            out.append(token)
            continue
        for ch, group in groupby(token):
            run = len(list(group))
            field = _FIELDS.get(ch)
            out.append(field(dt, run) if field else ch * run)
    return "".join(out)


def format_date_time(
    fmt: Any,
    dt: datetime,
    registry: DateTimeFormatRegistry | None = None,
) -> str:
    """
    Does: Render `dt` with the date pattern, a space, then the time pattern
          registered for `fmt`.
    Returns: Formatted string.
    """
    if registry is None:
        registry = MANAGER
    pattern = f"{registry.get_date_pattern(fmt)} {registry.get_time_pattern(fmt)}"
    return render_pattern(pattern, dt)
