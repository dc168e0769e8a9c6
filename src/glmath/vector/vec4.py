"""4-component vector."""

from .base import FixedVector


class Vec4(FixedVector):
    """
    Homogeneous column vector.

    By convention w = 1 for points and w = 0 for directions; the type does
    not enforce either.
    """
    __slots__ = ()

    size = 4
