# src/compat_support/formats/__init__.py
"""
formats
=======

Does: Expose the shared date/time pattern registry and the pattern renderer.
Exports: DateTimeFormatRegistry, MANAGER, render_pattern, format_date_time
"""

from __future__ import annotations

from .patterns import (
    MANAGER,
    DateTimeFormatRegistry,
    format_date_time,
    render_pattern,
)

__all__ = [
    "DateTimeFormatRegistry",
    "MANAGER",
    "render_pattern",
    "format_date_time",
]
