# src/compat_support/tokenizer/__init__.py
"""
tokenizer
=========

Does: Expose the legacy tokenizer and its splitting primitives.
Exports: Tokenizer, tokenize, DEFAULT_DELIMITERS, split_on_any, scan_with_delimiters
Used by: formats.patterns, demo CLI, and ported parsing code.
"""

from __future__ import annotations

from .core import Tokenizer, tokenize
from .split import (
    DEFAULT_DELIMITERS,
    scan_with_delimiters,
    split_on_any,
)

__all__ = [
    "Tokenizer",
    "tokenize",
    "DEFAULT_DELIMITERS",
    "split_on_any",
    "scan_with_delimiters",
]
