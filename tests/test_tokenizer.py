# tests/test_tokenizer.py
from __future__ import annotations

import pytest

from compat_support.errors import CompatSupportError, InvalidArgument, TokenizerExhausted
from compat_support.tokenizer import DEFAULT_DELIMITERS, Tokenizer, tokenize
from compat_support.utils import log as LOG


@pytest.fixture(autouse=True)
def _reset_topics(monkeypatch):
    """Keep tracing off unless a test turns it on."""
    monkeypatch.delenv("COMPAT_SUPPORT_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()
    yield
    LOG.reload_topics()


def _drain(t: Tokenizer) -> list[str]:
    out = []
    while t.has_more_tokens():
        out.append(t.next_token())
    return out


# ─────────────────────────────────────────────────────────────────────────────
# Non-retaining mode
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "source,delimiters,expected",
    [
        ("a b  c", DEFAULT_DELIMITERS, ["a", "b", "c"]),          # runs of delimiters collapse
        ("  lead trail  ", DEFAULT_DELIMITERS, ["lead", "trail"]),  # leading/trailing ignored
        ("a\tb\nc\rd", DEFAULT_DELIMITERS, ["a", "b", "c", "d"]),  # all four defaults
        ("k=v;x=y", ";=", ["k", "v", "x", "y"]),                    # any char of the set
        ("abc", ",", ["abc"]),                                      # no delimiter present
        ("", ",", []),                                              # empty input
        (",,,", ",", []),                                           # only delimiters
    ],
)
def test_non_retaining_token_sequence(source, delimiters, expected):
    assert _drain(Tokenizer(source, delimiters)) == expected


def test_default_delimiters_are_the_four_whitespace_chars():
    assert DEFAULT_DELIMITERS == " \t\n\r"
    assert Tokenizer("x").delimiters == " \t\n\r"


def test_source_without_delimiters_is_returned_once():
    t = Tokenizer("whole-thing", ",")
    assert t.has_more_tokens() is True
    assert t.next_token() == "whole-thing"
    assert t.has_more_tokens() is False
    assert t.source == ""


def test_source_shrinks_and_leading_delimiters_are_trimmed():
    t = Tokenizer("  alpha  beta")
    assert t.next_token() == "alpha"
    assert t.source == "beta"
    assert t.next_token() == "beta"
    assert t.source == ""


def test_count_reflects_last_split():
    t = Tokenizer("a b c")
    assert t.count == 3
    t.next_token()
    assert t.count == 2
    assert len(t) == 2


def test_next_token_with_new_delimiters_resplits_whole_remainder():
    t = Tokenizer("a,b c")
    assert t.next_token(",") == "a"
    assert t.source == "b c"
    # the new set stays active for later calls
    assert t.delimiters == ","
    assert t.next_token() == "b c"
    assert t.has_more_tokens() is False


def test_same_input_with_default_delimiters_keeps_comma_inside_token():
    t = Tokenizer("a,b c")
    assert t.next_token() == "a,b"
    assert t.source == "c"


def test_switching_delimiters_between_calls():
    t = Tokenizer("x y,z")
    assert t.next_token() == "x"
    assert t.source == "y,z"
    assert t.next_token(",") == "y"
    assert t.source == "z"
    assert t.next_token(" ") == "z"


def test_has_more_tokens_uses_current_delimiters():
    t = Tokenizer("a;b")
    assert t.next_token(";") == "a"
    assert t.has_more_tokens() is True


@pytest.mark.parametrize("source", ["", "   ", "\t\n"])
def test_next_token_raises_when_exhausted(source):
    t = Tokenizer(source)
    assert t.has_more_tokens() is False
    with pytest.raises(TokenizerExhausted):
        t.next_token()


def test_exhausted_is_a_lookup_error_and_a_package_error():
    t = Tokenizer("only")
    t.next_token()
    with pytest.raises(LookupError):
        t.next_token()
    with pytest.raises(CompatSupportError):
        t.next_token()


# ─────────────────────────────────────────────────────────────────────────────
# Retaining mode
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "source,delimiters,expected",
    [
        ("a,b,,c", ",", ["a", ",", "b", ",", ",", "c"]),  # adjacent delimiters not coalesced
        (",,", ",", [",", ","]),                           # only delimiters: one per char
        (",a,", ",", [",", "a", ","]),
        ("abc", ",", ["abc"]),
        ("", ",", []),
        ("k=v; x", "=; ", ["k", "=", "v", ";", " ", "x"]),
    ],
)
def test_retaining_token_sequence(source, delimiters, expected):
    assert _drain(Tokenizer(source, delimiters, retain_delimiters=True)) == expected


def test_retaining_mode_precomputes_queue():
    t = Tokenizer("a,b", ",", retain_delimiters=True)
    assert t.count == 3
    assert t.retain_delimiters is True
    assert t.next_token() == "a"
    assert t.count == 2
    # source is a fixed snapshot in this mode
    assert t.source == "a,b"


def test_retaining_mode_ignores_new_delimiters_for_the_queue():
    t = Tokenizer("a,b", ",", retain_delimiters=True)
    assert t.next_token(";") == "a"
    assert t.delimiters == ";"
    assert t.next_token() == ","
    assert t.next_token() == "b"


def test_retaining_mode_raises_when_queue_empty():
    t = Tokenizer(",", ",", retain_delimiters=True)
    assert t.next_token() == ","
    assert t.has_more_tokens() is False
    with pytest.raises(TokenizerExhausted):
        t.next_token()


# ─────────────────────────────────────────────────────────────────────────────
# Python protocol & helpers
# ─────────────────────────────────────────────────────────────────────────────

def test_iteration_drains_tokens():
    assert list(Tokenizer("one two  three")) == ["one", "two", "three"]


def test_tokenize_helper():
    assert tokenize("a,b,,c", ",", retain_delimiters=True) == ["a", ",", "b", ",", ",", "c"]
    assert tokenize("a b  c") == ["a", "b", "c"]


def test_iterable_delimiters_are_accepted():
    assert tokenize("a;b|c", [";", "|"]) == ["a", "b", "c"]


def test_multi_char_delimiter_items_are_rejected():
    with pytest.raises(InvalidArgument):
        Tokenizer("a", ["ab"])


def test_repr_mentions_mode():
    assert "retain_delimiters=True" in repr(Tokenizer("x", ",", True))


def test_trace_topic_prints_consumed_tokens(monkeypatch, capsys):
    monkeypatch.setenv("COMPAT_SUPPORT_DEBUG_TOPICS", "tokenizer")
    LOG.reload_topics()

    Tokenizer("a b").next_token()

    err = capsys.readouterr().err
    assert "[tokenizer][DEBUG]" in err
    assert "token='a'" in err


def test_trace_is_silent_by_default(capsys):
    list(Tokenizer("a b"))
    assert capsys.readouterr().err == ""
