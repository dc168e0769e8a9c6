"""4x4 transform matrix."""

from .mat4 import Mat4, MatColumn

__all__ = [
    "Mat4",
    "MatColumn",
]
