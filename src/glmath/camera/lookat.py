"""Look-at view transform."""

from __future__ import annotations
import numpy as np

from ..constants import DTYPE
from ..vector import Vec3


def build_lookat_view_matrix(eye, center, up) -> np.ndarray:
    """
    Build a world-to-view matrix from look-at parameters.

    Right-handed camera basis (OpenGL convention, camera looks down -Z):
        z = normalize(eye - center)   (points back toward the viewer)
        x = normalize(up x z)         (right)
        y = z x x                     (recomputed up, already unit length)

    Args:
        eye: (3,) Camera position in world coordinates
        center: (3,) Look-at point in world coordinates
        up: (3,) World 'up' direction hint

    Returns:
        (4, 4) float32 array in column-major ``[col][row]`` order

    Notes:
        - 'up' must not be parallel to (eye - center). In that case x is the
          zero vector and the result contains NaN; nothing is raised.
    """
    eye = eye if isinstance(eye, Vec3) else Vec3(eye)
    center = center if isinstance(center, Vec3) else Vec3(center)
    up = up if isinstance(up, Vec3) else Vec3(up)

    z = (eye - center).normalized()
    x = up.cross(z).normalized()
    y = z.cross(x)

    # Rows of the rotation are the camera axes; stored transposed
    m = np.zeros((4, 4), dtype=DTYPE)
    m[:3, 0] = x.data
    m[:3, 1] = y.data
    m[:3, 2] = z.data
    m[3, :3] = (-x.dot(eye), -y.dot(eye), -z.dot(eye))
    m[3, 3] = 1.0

    return m
