"""Input validation utilities."""

from __future__ import annotations
import numpy as np

from ..constants import DTYPE


def validate_components(values, size: int, name: str = "vector") -> np.ndarray:
    """
    Convert input to a flat float32 array of exactly ``size`` components.

    Args:
        values: Sequence or array of numbers
        size: Required number of components
        name: Label used in error messages

    Returns:
        (size,) float32 numpy array (always a fresh copy)

    Raises:
        ValueError: If input is not numeric (strings included) or has the
            wrong length
    """
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} components must be numeric, got {values!r}") from e

    # bool, signed/unsigned int, float
    if raw.dtype.kind not in "biuf":
        raise ValueError(f"{name} components must be numeric, got {values!r}")

    arr = raw.astype(DTYPE)

    if arr.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},), got {arr.shape}")

    return arr


def validate_index(i, size: int, name: str = "index") -> int:
    """
    Check that ``i`` is an integer in ``0..size-1``.

    Negative indices are rejected rather than wrapped.

    Raises:
        IndexError: If ``i`` is out of range or not an integer
    """
    if isinstance(i, (bool, np.bool_)) or not isinstance(i, (int, np.integer)):
        raise IndexError(f"{name} must be an integer, got {type(i).__name__}")
    if not 0 <= i < size:
        raise IndexError(f"{name} {i} out of range 0..{size - 1}")
    return int(i)


def validate_perspective_params(aspect: float, z_near: float, z_far: float):
    """
    Validate perspective projection parameters.

    Raises:
        ValueError: If aspect is zero or the clip planes coincide
    """
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")

    if z_near == z_far:
        raise ValueError(f"z_near and z_far must differ, both are {z_near}")
