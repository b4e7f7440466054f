# src/compat_support/collection/base.py
"""
base.py.

Does: Shared list-backed behaviour for the collection and set adapters:
      containment, ordered materialisation, and the Python container dunders.
Used by: collection.support.CollectionSupport, collection.set_support.SetSupport.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import Any

from .helpers import copy_into

__all__ = ["ListBacked"]


class ListBacked:
    """Mixin holding the ordered backing list `_items`."""

    _items: list[Any]

    def contains(self, element: Any) -> bool:
        return element in self._items

    def contains_all(self, elements: Iterable[Any]) -> bool:
        """
        Does: Check every element of `elements`, in iteration order,
              stopping at the first miss.
        Returns: True iff all were found. An empty argument yields False,
                 since no check ever succeeded.
        """
        result = False
        for element in elements:
            result = self.contains(element)
            if not result:
                break
        return result

    def is_empty(self) -> bool:
        return len(self._items) == 0

    def to_array(self, dst: MutableSequence[Any] | None = None) -> list[Any] | MutableSequence[Any]:
        """
        Does: Materialise the contents in iteration order. With `dst`, fill it
              from index 0 (IndexError if too short) and return it.
        Returns: A new list, or `dst`.
        """
        if dst is None:
            return list(self._items)
        return copy_into(self._items, dst)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
