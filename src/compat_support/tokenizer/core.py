# src/compat_support/tokenizer/core.py

"""
core.py.

Does: Legacy string tokenizer with an optional delimiter-retaining mode.
Returns: Tokenizer class and the tokenize() convenience.
Used by: formats.patterns (date pattern splitting), demo CLI, callers porting
         StringTokenizer-style parsing code.

Two modes:
- non-retaining: every next_token() re-splits the *whole* remaining source,
  takes the first non-empty piece, cuts the first occurrence of that text out
  of the source and trims leading delimiters. There is no forward cursor, so
  changing delimiters mid-stream re-interprets everything that is left.
- retaining: the full token stream (tokens + one-char delimiter tokens) is
  computed once at construction and then popped from the front.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from compat_support.errors import TokenizerExhausted
from compat_support.tokenizer.split import (
    DEFAULT_DELIMITERS,
    normalize_delimiters,
    remove_empty_strings,
    scan_with_delimiters,
    split_on_any,
    strip_leading_delimiters,
)
from compat_support.utils.log import debug as trace
from compat_support.utils.log import enabled as trace_enabled

__all__ = ["Tokenizer", "tokenize"]

log = logging.getLogger(__name__)

_TOPIC = "tokenizer"


class Tokenizer:
    """
    Does: Hand out tokens of `source` one at a time, splitting on any
          character of `delimiters`.
    Raises: TokenizerExhausted from next_token() when nothing is left.
    """

    def __init__(
        self,
        source: str,
        delimiters: str | Iterable[str] = DEFAULT_DELIMITERS,
        retain_delimiters: bool = False,
    ) -> None:
        self._source = source
        self._delimiters = normalize_delimiters(delimiters)
        self._retain = retain_delimiters
        if retain_delimiters:
            self._pending = scan_with_delimiters(source, self._delimiters)
        else:
            self._pending = split_on_any(source, self._delimiters)
        remove_empty_strings(self._pending)
        log.debug(
            "Tokenizer init: retain=%s delimiters=%r pending=%d",
            retain_delimiters,
            self._delimiters,
            len(self._pending),
        )

    # ── Introspection ─────────────────────────────────────────────────────────
    @property
    def source(self) -> str:
        """Remaining source (non-retaining) or the original snapshot (retaining)."""
        return self._source

    @property
    def delimiters(self) -> str:
        return self._delimiters

    @property
    def retain_delimiters(self) -> bool:
        return self._retain

    @property
    def count(self) -> int:
        """Tokens queued after the last split (diagnostic only)."""
        return len(self._pending)

    def __len__(self) -> int:
        return self.count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(source={self._source!r}, "
            f"delimiters={self._delimiters!r}, retain_delimiters={self._retain})"
        )

    # ── Token access ──────────────────────────────────────────────────────────
    def has_more_tokens(self) -> bool:
        """
        Does: Report whether next_token() would succeed.
        Returns: Retaining: queue non-empty. Non-retaining: the current source
                 still splits into at least one non-empty token.
        """
        if self._retain:
            return bool(self._pending)
        pieces = split_on_any(self._source, self._delimiters)
        return any(p != "" for p in pieces)

    def next_token(self, delimiters: str | Iterable[str] | None = None) -> str:
        """
        Does: Pop the next token; if `delimiters` is given it replaces the
              active delimiter set first and stays in effect afterwards.
        Returns: The token (or, in retaining mode, possibly a one-char
                 delimiter token).
        Raises: TokenizerExhausted when no token remains.
        """
        if delimiters is not None:
            self._delimiters = normalize_delimiters(delimiters)

        if self._source == "":
            raise TokenizerExhausted("no more tokens: source is empty")

        if self._retain:
            # Queue was built once at construction; new delimiters do not re-scan it.
            remove_empty_strings(self._pending)
            if not self._pending:
                raise TokenizerExhausted("no more tokens")
            return self._pending.pop(0)

        self._pending = split_on_any(self._source, self._delimiters)
        remove_empty_strings(self._pending)
        if not self._pending:
            raise TokenizerExhausted(
                f"no more tokens: source {self._source!r} holds only delimiters"
            )
        result = self._pending.pop(0)

        # Cut the first occurrence of the token's *text*, not a tracked position.
        idx = self._source.find(result)
        rest = self._source[:idx] + self._source[idx + len(result) :]
        self._source = strip_leading_delimiters(rest, self._delimiters)

        if trace_enabled(_TOPIC):
            trace(f"token={result!r} rest={self._source!r} queued={len(self._pending)}", _TOPIC)
        return result

    def __iter__(self) -> Iterator[str]:
        while self.has_more_tokens():
            yield self.next_token()


def tokenize(
    source: str,
    delimiters: str | Iterable[str] = DEFAULT_DELIMITERS,
    *,
    retain_delimiters: bool = False,
) -> list[str]:
    """
    Does: Drain a fresh Tokenizer over `source`.
    Returns: Every token in order.
    """
    return list(Tokenizer(source, delimiters, retain_delimiters))
