# src/compat_support/errors.py
"""
errors.py.

Does: Define the typed failures raised by the tokenizer, the collection
      adapters, and the collection helpers.
Returns: CompatSupportError and its subclasses.
Used by: tokenizer.core, collection.set_support, collection.helpers.
"""

from __future__ import annotations

__all__ = [
    "CompatSupportError",
    "TokenizerExhausted",
    "InvalidArgument",
    "PreconditionViolation",
]


class CompatSupportError(Exception):
    """Base class for every error raised by compat_support."""


class TokenizerExhausted(CompatSupportError, LookupError):
    """Raise when a token is requested and none remain."""


class InvalidArgument(CompatSupportError, ValueError):
    """Raise when an argument is outside the accepted domain (e.g. negative size)."""


class PreconditionViolation(CompatSupportError, TypeError):
    """Raise when an argument lacks a capability the operation relies on."""
