"""Fixed-size column vectors."""

from .base import FixedVector
from .vec3 import Vec3
from .vec4 import Vec4

__all__ = [
    "FixedVector",
    "Vec3",
    "Vec4",
]
