# src/compat_support/collection/__init__.py
"""
collection
==========

Does: Expose the list-backed collection/set adapters and legacy container helpers.
Exports: CollectionSupport, SetSupport, AbstractSetSupport, set_size, remove_element,
         put_element, pop_key, stack_push, copy_into, collections_equal
Used by: Ported code relying on legacy add/remove/retain result conventions.
"""

from __future__ import annotations

from .helpers import (
    collections_equal,
    copy_into,
    pop_key,
    put_element,
    remove_element,
    set_size,
    stack_push,
)
from .set_support import AbstractSetSupport, SetSupport
from .support import CollectionSupport

__all__ = [
    # adapters
    "CollectionSupport",
    "SetSupport",
    "AbstractSetSupport",
    # helpers
    "set_size",
    "remove_element",
    "put_element",
    "pop_key",
    "stack_push",
    "copy_into",
    "collections_equal",
]
