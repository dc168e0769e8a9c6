"""Debug utilities."""

from __future__ import annotations
import os

DEBUG_ENV_VAR = "GLMATH_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def debug_matrix_info(name: str, m):
    """Print the columns of a matrix (or the components of a vector)."""
    if is_debug_enabled():
        print(f"[{name}] {m!r}")
