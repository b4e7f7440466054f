# src/compat_support/collection/set_support.py
"""
set_support.py.

Does: List-backed set adapter: insertion-ordered, no two elements equal,
      legacy boolean results on bulk operations, plus the standard
      MutableSet operators (|, &, -, ^ and their in-place forms).
Returns: SetSupport (AbstractSetSupport is an alias kept for ported code).
Used by: Ported code that expects add() to report rejection of duplicates.

Containment is a linear scan with ==, so elements need not be hashable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableSet
from collections.abc import Set as AbstractSet
from typing import Any

from compat_support.errors import PreconditionViolation

from .base import ListBacked

__all__ = ["SetSupport", "AbstractSetSupport"]

log = logging.getLogger(__name__)


class SetSupport(ListBacked, MutableSet):
    """Ordered set over a plain list, equality-based uniqueness."""

    def __init__(self, elements: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = []
        if elements is not None:
            for element in elements:
                self.add(element)

    # ── Single-element ops ───────────────────────────────────────────────────
    def add(self, element: Any) -> bool:
        """Does: Append unless an equal element exists. Returns: True iff appended."""
        if self.contains(element):
            return False
        self._items.append(element)
        return True

    def remove(self, element: Any) -> bool:
        """Does: Remove `element` if present. Returns: True iff it was present."""
        if self.contains(element):
            self._items.remove(element)
            return True
        return False

    def discard(self, element: Any) -> None:
        self.remove(element)

    # ── Bulk ops ─────────────────────────────────────────────────────────────
    def add_all(self, elements: Iterable[Any] | None) -> bool:
        """
        Does: Add every non-None element of `elements` in order.
        Returns: Result of the *last* add performed, so a trailing duplicate
                 yields False even if earlier elements were added.
        """
        result = False
        if elements is None:
            return result
        for element in list(elements):
            if element is not None:
                result = self.add(element)
        return result

    def remove_all(self, elements: Iterable[Any]) -> bool:
        """
        Does: Remove each element of `elements`, in order, when present.
        Returns: Result of the last removal performed; False if none was.
        """
        result = False
        for element in elements:
            if self.contains(element):
                result = self.remove(element)
        log.debug("remove_all -> %s (size=%d)", result, len(self._items))
        return result

    def retain_all(self, elements: AbstractSet[Any]) -> bool:
        """
        Does: Remove every element not contained in `elements`; the scan
              restarts from the head after each removal.
        Returns: True iff at least one element was removed.
        Raises: PreconditionViolation when `elements` is not a set.
        """
        if not isinstance(elements, AbstractSet):
            raise PreconditionViolation(
                f"retain_all needs set semantics, got {type(elements).__name__}"
            )
        result = False
        restart = True
        while restart:
            restart = False
            for element in self._items:
                if element not in elements:
                    result = self.remove(element)
                    if result:
                        restart = True
                        break
        log.debug("retain_all -> %s (size=%d)", result, len(self._items))
        return result


AbstractSetSupport = SetSupport
