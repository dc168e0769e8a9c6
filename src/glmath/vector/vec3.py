"""3-component vector."""

from __future__ import annotations
import numpy as np

from .base import FixedVector


class Vec3(FixedVector):
    """Geometric input for the transform builders (positions, axes, factors)."""
    __slots__ = ()

    size = 3

    def cross(self, other: "Vec3") -> "Vec3":
        """Right-handed cross product; zero for parallel inputs."""
        if not isinstance(other, Vec3):
            raise TypeError(f"cross requires Vec3, got {type(other).__name__}")
        x1, y1, z1 = self.data
        x2, y2, z2 = other.data
        return Vec3(np.array([
            y1 * z2 - z1 * y2,
            z1 * x2 - x1 * z2,
            x1 * y2 - y1 * x2,
        ]))
