"""
compat_support
==============

Does: Root package for the legacy tokenizer and collection/set adapters.
Returns: Re-exports the public surface of `tokenizer`, `collection` and `errors`.
Used by: Code ported from legacy collection and tokenizing idioms.
"""

from .collection import AbstractSetSupport, CollectionSupport, SetSupport
from .errors import (
    CompatSupportError,
    InvalidArgument,
    PreconditionViolation,
    TokenizerExhausted,
)
from .tokenizer import DEFAULT_DELIMITERS, Tokenizer, tokenize

__all__: list[str] = [
    "Tokenizer",
    "tokenize",
    "DEFAULT_DELIMITERS",
    "CollectionSupport",
    "SetSupport",
    "AbstractSetSupport",
    "CompatSupportError",
    "TokenizerExhausted",
    "InvalidArgument",
    "PreconditionViolation",
]
__docformat__ = "google"
