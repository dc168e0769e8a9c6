"""Fixed-size column vector shared by Vec3 and Vec4."""

from __future__ import annotations
import numpy as np

from ..constants import DTYPE
from ..utils.validation import validate_components, validate_index


class FixedVector:
    """
    Column vector with a fixed number of float32 components.

    Subclasses only set ``size`` (and add operations that make sense for
    that size, e.g. ``Vec3.cross``); the arithmetic below is shared.

    Vectors are values: arithmetic returns new instances. The only ways to
    mutate one in place are index assignment and ``normalize``.
    """
    __slots__ = ('data',)

    size: int = 0

    def __init__(self, components):
        self.data = validate_components(components, self.size, type(self).__name__)

    @classmethod
    def zero(cls):
        """
        Vector with every component set to 0.0.

        Returns:
            New instance of the calling class
        """
        return cls(np.zeros(cls.size, dtype=DTYPE))

    def copy(self):
        """Independent copy; mutating it leaves this vector untouched."""
        return type(self)(self.data)

    def to_array(self) -> np.ndarray:
        """
        Components as a numpy array.

        Returns:
            (size,) float32 array (a copy, not a view)
        """
        return self.data.copy()

    def length_squared(self) -> float:
        """Square of the length (norm). Slightly cheaper than ``length``."""
        return self.dot(self)

    def length(self) -> float:
        """Length (Euclidean norm), never negative."""
        return float(np.sqrt(DTYPE(self.length_squared())))

    def normalize(self):
        """
        Scale in place to unit length, keeping the orientation.

        A zero-length vector ends up with NaN components; no warning is
        emitted, the caller has to avoid that case.
        """
        length = DTYPE(self.length())
        with np.errstate(divide='ignore', invalid='ignore'):
            self.data /= length

    def normalized(self):
        """Unit-length copy of this vector (see ``normalize``)."""
        result = self.copy()
        result.normalize()
        return result

    def dot(self, other) -> float:
        """
        Inner product with a vector of the same size.

        Args:
            other: Vector of the same type

        Returns:
            Sum of pairwise component products

        Raises:
            TypeError: If other is not the same vector type
        """
        if not isinstance(other, type(self)):
            raise TypeError(
                f"dot requires {type(self).__name__}, got {type(other).__name__}"
            )
        return float(np.dot(self.data, other.data))

    def add(self, other):
        """
        Component-wise sum, same as ``self + other``.

        Args:
            other: Vector of the same type

        Returns:
            New vector; both operands are left unchanged

        Raises:
            TypeError: If the vector types differ
        """
        return self + other

    def sub(self, other):
        """
        Component-wise difference, same as ``self - other``.

        Args:
            other: Vector of the same type

        Returns:
            New vector; both operands are left unchanged

        Raises:
            TypeError: If the vector types differ
        """
        return self - other

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.data + other.data)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.data - other.data)

    def __neg__(self):
        return type(self)(-self.data)

    def __getitem__(self, i) -> float:
        return float(self.data[validate_index(i, self.size)])

    def __setitem__(self, i, value):
        self.data[validate_index(i, self.size)] = value

    def __len__(self):
        return self.size

    def __iter__(self):
        for value in self.data:
            yield float(value)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.data, other.data))

    __hash__ = None

    def __repr__(self):
        values = ", ".join(f"{v:g}" for v in self)
        return f"{type(self).__name__}([{values}])"
