"""Projection matrix construction."""

from __future__ import annotations
import numpy as np

from ..constants import DTYPE
from ..utils.validation import validate_perspective_params


def build_perspective_matrix(
    fov_y: float,
    aspect: float,
    z_near: float,
    z_far: float
) -> np.ndarray:
    """
    Build a right-handed OpenGL-style perspective projection matrix.

    Maps view space (camera looking down -Z) to homogeneous clip space;
    clip.w = -z_view, so NDC follow from the perspective division.

    Args:
        fov_y: Vertical field of view (radians)
        aspect: Viewport width / height
        z_near, z_far: Near and far clipping planes

    Returns:
        (4, 4) float32 array in column-major ``[col][row]`` order

    Raises:
        ValueError: If aspect is zero or z_near == z_far
    """
    validate_perspective_params(aspect, z_near, z_far)

    f = 1.0 / np.tan(fov_y / 2.0)

    P = np.zeros((4, 4), dtype=DTYPE)
    P[0, 0] = f / aspect
    P[1, 1] = f

    # Depth encoding
    P[2, 2] = (z_near + z_far) / (z_near - z_far)
    P[3, 2] = (2.0 * z_near * z_far) / (z_near - z_far)

    # Perspective division: clip.w = -z_view
    P[2, 3] = -1.0

    return P
