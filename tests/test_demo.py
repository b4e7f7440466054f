# tests/test_demo.py
from __future__ import annotations

import json

from compat_support import demo


def test_demo_default_text(capsys):
    demo.main([])
    out = json.loads(capsys.readouterr().out)
    assert out == {"tokens": ["a", "b", "c"], "count": 3}


def test_demo_retain_mode(capsys):
    demo.main(["a,b,,c", "--delimiters", ",", "--retain"])
    out = json.loads(capsys.readouterr().out)
    assert out["tokens"] == ["a", ",", "b", ",", ",", "c"]
    assert out["count"] == 6


def test_demo_joins_words(capsys):
    demo.main(["x;y", "z", "-d", "; "])
    assert json.loads(capsys.readouterr().out)["tokens"] == ["x", "y", "z"]
