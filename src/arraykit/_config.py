"""
Configuration-time switches for arraykit.

Debug mode is decided once, when this module is imported:
    ARRAYKIT_DEBUG=1 python ...     # checks + diagnostics on
    python -O ...                   # always off, regardless of the env var

Other modules bind `DEBUG` into their own globals at import, so flipping the
environment variable after import has no effect.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

ENV_VAR: str = "ARRAYKIT_DEBUG"
_TRUTHY = {"1", "true", "yes", "on"}

__all__ = ["ENV_VAR", "DEBUG", "debug_enabled"]


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Return True iff `environ` (default: os.environ) turns debug mode on."""
    if environ is None:
        environ = os.environ
    raw = environ.get(ENV_VAR, "")
    return __debug__ and raw.strip().lower() in _TRUTHY


DEBUG: bool = debug_enabled()
