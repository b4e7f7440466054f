# src/compat_support/collection/helpers.py
"""
helpers.py.

Does: Small list/mapping helpers that reproduce legacy collection idioms
      (resize with padding, remove-and-report, put-returning-old, ...).
Used by: Ported code operating on plain lists and dicts.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, MutableMapping, MutableSequence
from typing import Any

from compat_support.errors import InvalidArgument

__all__ = [
    "set_size",
    "remove_element",
    "put_element",
    "pop_key",
    "stack_push",
    "copy_into",
    "collections_equal",
]


def set_size(items: MutableSequence[Any], new_size: int) -> None:
    """
    Does: Truncate `items` to `new_size`, or pad it with None up to it.
    Raises: InvalidArgument when `new_size` is negative.
    """
    if new_size < 0:
        raise InvalidArgument(f"size must be >= 0, got {new_size}")
    if new_size < len(items):
        del items[new_size:]
    else:
        items.extend([None] * (new_size - len(items)))


def remove_element(items: MutableSequence[Any], element: Any) -> bool:
    """Does: Remove the first occurrence of `element`. Returns: True iff it was present."""
    if element in items:
        items.remove(element)
        return True
    return False


def put_element(mapping: MutableMapping[Any, Any], key: Any, value: Any) -> Any:
    """Does: Store `value` under `key`. Returns: The previous value, or None."""
    previous = mapping.get(key)
    mapping[key] = value
    return previous


def pop_key(mapping: MutableMapping[Any, Any], key: Any) -> Any:
    return mapping.pop(key, None)


def stack_push(stack: MutableSequence[Any], element: Any) -> Any:
    stack.append(element)
    return element


def copy_into(source: Iterable[Any], dst: MutableSequence[Any]) -> MutableSequence[Any]:
    """Does: Overwrite `dst` from index 0 with `source` in order. Returns: `dst`."""
    for index, element in enumerate(source):
        dst[index] = element
    return dst


def collections_equal(a: Collection[Any], b: Collection[Any]) -> bool:
    """
    Does: Compare two collections element by element in iteration order.
    Returns: True iff same length and every pair is equal.
    """
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))
