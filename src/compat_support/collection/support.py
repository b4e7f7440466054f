# src/compat_support/collection/support.py
"""
support.py.

Does: Ordered multiset adapter with legacy bulk-operation result conventions.
Returns: CollectionSupport.
Used by: Ported code that relied on add/addAll/removeAll/retainAll booleans.

Bulk results are "last write wins": add_all/remove_all return the result of
the last add/remove they actually performed, not an all/any fold.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence
from typing import Any

from .base import ListBacked

__all__ = ["CollectionSupport"]

log = logging.getLogger(__name__)


class CollectionSupport(ListBacked, Collection):
    """Duplicate-permitting, insertion-ordered collection."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, elements: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = list(elements) if elements is not None else []

    @classmethod
    def to_collection_support(cls, array: Iterable[Any] | None) -> CollectionSupport:
        """
        Does: Build a collection from `array` through add_all (None entries skipped).
        Returns: New CollectionSupport.
        """
        collection = cls()
        collection.add_all(array)
        return collection

    # ── Single-element ops ───────────────────────────────────────────────────
    def add(self, element: Any) -> bool:
        self._items.append(element)
        return True

    def remove(self, element: Any) -> bool:
        """Does: Remove one occurrence. Returns: True iff it was present."""
        if element in self._items:
            self._items.remove(element)
            return True
        return False

    # ── Bulk ops ─────────────────────────────────────────────────────────────
    def add_all(self, elements: Iterable[Any] | None) -> bool:
        """
        Does: Append every non-None element of `elements` in order.
        Returns: Result of the last add performed; False if none was.
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
        Does: For each element, in order, remove one occurrence if present.
        Returns: Result of the last removal performed; False if none was.
        """
        result = False
        for element in list(elements):
            if self.contains(element):
                result = self.remove(element)
        log.debug("remove_all -> %s (size=%d)", result, len(self._items))
        return result

    def retain_all(self, elements: Iterable[Any]) -> bool:
        """
        Does: Remove every element not found in `elements`. The scan restarts
              from the head after each removal.
        Returns: True iff at least one element was removed.
        """
        keep = CollectionSupport()
        keep.add_all(elements)
        result = False
        restart = True
        while restart:
            restart = False
            for element in self._items:
                if not keep.contains(element):
                    result = self.remove(element)
                    if result:
                        restart = True
                        break
        log.debug("retain_all -> %s (size=%d)", result, len(self._items))
        return result

    def __eq__(self, other: object) -> bool:
        """Does: Ordered comparison with another CollectionSupport or any sequence."""
        if isinstance(other, CollectionSupport):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes, bytearray)):
            return self._items == list(other)
        return NotImplemented
