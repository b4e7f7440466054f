# tests/test_collection_helpers.py
from __future__ import annotations

import pytest

from compat_support.collection import helpers as H
from compat_support.errors import InvalidArgument


@pytest.mark.parametrize(
    "items,new_size,expected",
    [
        ([1, 2, 3], 1, [1]),                 # truncate
        ([1], 3, [1, None, None]),           # pad with None
        ([1, 2], 2, [1, 2]),                 # unchanged
        ([1, 2], 0, []),
    ],
)
def test_set_size(items, new_size, expected):
    H.set_size(items, new_size)
    assert items == expected


def test_set_size_rejects_negative():
    with pytest.raises(InvalidArgument):
        H.set_size([1], -1)
    with pytest.raises(ValueError):
        H.set_size([], -5)


def test_remove_element_reports_presence():
    items = ["a", "b", "a"]
    assert H.remove_element(items, "a") is True
    assert items == ["b", "a"]
    assert H.remove_element(items, "z") is False


def test_put_element_returns_previous():
    d = {}
    assert H.put_element(d, "k", 1) is None
    assert H.put_element(d, "k", 2) == 1
    assert d == {"k": 2}


def test_pop_key():
    d = {"k": 1}
    assert H.pop_key(d, "k") == 1
    assert H.pop_key(d, "k") is None
    assert d == {}


def test_stack_push_returns_element():
    stack = [1]
    assert H.stack_push(stack, 2) == 2
    assert stack == [1, 2]


def test_copy_into():
    dst = [0, 0, 0]
    assert H.copy_into("ab", dst) is dst
    assert dst == ["a", "b", 0]


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ([1, 2], [1, 2], True),
        ([1, 2], [2, 1], False),    # order matters
        ([1], [1, 1], False),
        ([], (), True),
    ],
)
def test_collections_equal(a, b, expected):
    assert H.collections_equal(a, b) is expected
