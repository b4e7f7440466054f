# src/compat_support/utils/__init__.py
"""

Does: Provide settings loading and lightweight topic tracing for the support layer.
Returns: Public API via load_config/clear_config_cache/bundled_data_dir and debug/reload_topics.
Used by: formats, tokenizer, demo and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    bundled_data_dir,
    clear_config_cache,
    load_config,
)
from .log import (
    debug,
    enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "bundled_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Tracing helpers
    "debug",
    "enabled",
    "reload_topics",
]
