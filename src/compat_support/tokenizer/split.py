# src/compat_support/tokenizer/split.py

"""
split.py.

Does: Low-level splitting primitives for the legacy tokenizer: split on any
      delimiter character, drop empty pieces, trim leading delimiters, and
      the delimiter-retaining left-to-right scan.
Returns: Lists of str pieces (or trimmed str).
Used by: tokenizer.core.Tokenizer.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from compat_support.errors import InvalidArgument

__all__ = [
    "DEFAULT_DELIMITERS",
    "normalize_delimiters",
    "split_on_any",
    "remove_empty_strings",
    "strip_leading_delimiters",
    "scan_with_delimiters",
]

# space, tab, newline, carriage-return
DEFAULT_DELIMITERS = " \t\n\r"


def normalize_delimiters(delimiters: str | Iterable[str]) -> str:
    """
    Does: Collapse a delimiter argument into a string of single characters.
    Returns: The delimiter characters, in the order given.
    Raises: InvalidArgument when an item is not exactly one character.
    """
    if isinstance(delimiters, str):
        return delimiters
    chars = list(delimiters)
    for ch in chars:
        if not isinstance(ch, str) or len(ch) != 1:
            raise InvalidArgument(f"delimiters must be single characters, got {ch!r}")
    return "".join(chars)


@lru_cache(maxsize=256)
def _delimiter_re(delimiters: str) -> re.Pattern[str]:
    return re.compile("[" + "".join(re.escape(ch) for ch in delimiters) + "]")


def split_on_any(source: str, delimiters: str) -> list[str]:
    """
    Does: Split `source` at every occurrence of any delimiter character.
          Adjacent delimiters produce empty pieces; nothing is dropped here.
    Returns: list[str] with len == number of delimiter hits + 1.
    """
    if not delimiters:
        return [source]
    return _delimiter_re(delimiters).split(source)


def remove_empty_strings(elements: list[str]) -> None:
    """Does: Drop every empty string from `elements` in place."""
    elements[:] = [e for e in elements if e != ""]


def strip_leading_delimiters(source: str, delimiters: str) -> str:
    # str.lstrip(None) would strip whitespace, so guard the empty set
    if not delimiters:
        return source
    return source.lstrip(delimiters)


def scan_with_delimiters(source: str, delimiters: str) -> list[str]:
    """
    Does: Scan `source` left to right; each maximal run of non-delimiter
          characters becomes one token and each delimiter character becomes
          its own one-character token (adjacent delimiters stay separate).
    Returns: Ordered list of tokens and delimiter pseudo-tokens, no empties.
    Used by: Tokenizer in delimiter-retaining mode.
    """
    elements: list[str] = []
    run: list[str] = []
    for ch in source:
        if ch in delimiters:
            if run:
                elements.append("".join(run))
                run = []
            elements.append(ch)
        else:
            run.append(ch)
    if run:
        elements.append("".join(run))
    remove_empty_strings(elements)
    return elements
