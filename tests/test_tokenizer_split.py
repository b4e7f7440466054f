# tests/test_tokenizer_split.py
from __future__ import annotations

import pytest

from compat_support.errors import InvalidArgument
from compat_support.tokenizer import split as S


@pytest.mark.parametrize(
    "source,delimiters,expected",
    [
        ("a,,b", ",", ["a", "", "b"]),                        # empties kept at this level
        ("", ",", [""]),
        ("abc", "", ["abc"]),                                 # empty delimiter set
        ("a]b^c-d\\e", "]^-\\", ["a", "b", "c", "d", "e"]),  # regex metachars escaped
        (" x ", " ", ["", "x", ""]),
    ],
)
def test_split_on_any(source, delimiters, expected):
    assert S.split_on_any(source, delimiters) == expected


def test_remove_empty_strings_in_place():
    items = ["", "a", "", "", "b", ""]
    S.remove_empty_strings(items)
    assert items == ["a", "b"]


@pytest.mark.parametrize(
    "source,delimiters,expected",
    [
        (",, a,b", ", ", "a,b"),
        ("abc", ",", "abc"),
        ("  abc", "", "  abc"),  # empty set strips nothing (not whitespace)
    ],
)
def test_strip_leading_delimiters(source, delimiters, expected):
    assert S.strip_leading_delimiters(source, delimiters) == expected


def test_scan_with_delimiters_keeps_every_delimiter_char():
    assert S.scan_with_delimiters("ab,,cd,", ",") == ["ab", ",", ",", "cd", ","]
    assert S.scan_with_delimiters("", ",") == []
    assert S.scan_with_delimiters("abc", "") == ["abc"]


def test_normalize_delimiters():
    assert S.normalize_delimiters(",;") == ",;"
    assert S.normalize_delimiters((",", ";")) == ",;"
    with pytest.raises(InvalidArgument):
        S.normalize_delimiters([",", ""])
