"""Camera parameter helpers."""

from __future__ import annotations
import math


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians (the builders take radians)."""
    return math.radians(deg)


def compute_aspect_ratio(width: float, height: float) -> float:
    """
    Viewport aspect ratio (width / height).

    Raises:
        ValueError: If height is zero
    """
    if height == 0:
        raise ValueError("viewport height must be non-zero")
    return float(width) / float(height)
