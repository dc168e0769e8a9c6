"""4x4 transform matrix."""

from __future__ import annotations
import math
import numpy as np

from ..constants import DTYPE
from ..utils.validation import validate_components, validate_index
from ..vector import Vec4


class MatColumn:
    """
    One column of a ``Mat4``, backed by the matrix storage.

    Writing through it (``m[c][r] = x``) mutates the matrix. Row indices
    must be in ``0..3``; anything else raises ``IndexError``.
    """
    __slots__ = ('data',)

    def __init__(self, data: np.ndarray):
        self.data = data

    def __getitem__(self, row) -> float:
        return float(self.data[validate_index(row, 4, "row")])

    def __setitem__(self, row, value):
        self.data[validate_index(row, 4, "row")] = value

    def __len__(self):
        return 4

    def __iter__(self):
        for value in self.data:
            yield float(value)

    def __array__(self, dtype=None, copy=None):
        return np.array(self.data, dtype=dtype)

    def __repr__(self):
        values = ", ".join(f"{v:g}" for v in self)
        return f"MatColumn([{values}])"


class Mat4:
    """
    4x4 float32 matrix stored column-major: ``m[col][row]``.

    Matrices pre-multiply column vectors, so ``A @ B`` applies B first and
    ``M @ v`` transforms a ``Vec4``. ``*`` is accepted as an alias for both.
    Flattening the storage gives the entry ``[col][row]`` at offset
    ``col * 4 + row``, which is what GL uniform uploads expect.
    """
    __slots__ = ('m',)

    def __init__(self, columns):
        m = np.array(columns, dtype=DTYPE)
        if m.shape != (4, 4):
            raise ValueError(f"Mat4 expects 4 columns of 4 rows, got shape {m.shape}")
        self.m = m

    @classmethod
    def zero(cls) -> 'Mat4':
        return cls(np.zeros((4, 4), dtype=DTYPE))

    @classmethod
    def identity(cls) -> 'Mat4':
        return cls(np.eye(4, dtype=DTYPE))

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> 'Mat4':
        return cls(np.diag(np.array([x, y, z, 1.0], dtype=DTYPE)))

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> 'Mat4':
        mat = cls.identity()
        mat.m[3, :3] = (x, y, z)
        return mat

    @classmethod
    def rotate_x(cls, angle: float) -> 'Mat4':
        """Rotation around the X-axis by ``angle`` radians."""
        cos = math.cos(angle)
        sin = math.sin(angle)

        return cls([
            [1.0,  0.0, 0.0, 0.0],
            [0.0,  cos, sin, 0.0],
            [0.0, -sin, cos, 0.0],
            [0.0,  0.0, 0.0, 1.0],
        ])

    @classmethod
    def rotate_y(cls, angle: float) -> 'Mat4':
        """Rotation around the Y-axis by ``angle`` radians."""
        cos = math.cos(angle)
        sin = math.sin(angle)

        return cls([
            [cos, 0.0, -sin, 0.0],
            [0.0, 1.0,  0.0, 0.0],
            [sin, 0.0,  cos, 0.0],
            [0.0, 0.0,  0.0, 1.0],
        ])

    @classmethod
    def rotate_z(cls, angle: float) -> 'Mat4':
        """Rotation around the Z-axis by ``angle`` radians."""
        cos = math.cos(angle)
        sin = math.sin(angle)

        return cls([
            [ cos, sin, 0.0, 0.0],
            [-sin, cos, 0.0, 0.0],
            [ 0.0, 0.0, 1.0, 0.0],
            [ 0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def look_at(cls, eye, center, up) -> 'Mat4':
        """View matrix; see ``glmath.camera.build_lookat_view_matrix``."""
        from ..camera.lookat import build_lookat_view_matrix
        return cls(build_lookat_view_matrix(eye, center, up))

    @classmethod
    def perspective(cls, fov_y: float, aspect: float,
                    z_near: float, z_far: float) -> 'Mat4':
        """Projection matrix; see ``glmath.camera.build_perspective_matrix``."""
        from ..camera.projection import build_perspective_matrix
        return cls(build_perspective_matrix(fov_y, aspect, z_near, z_far))

    @classmethod
    def from_buffer(cls, data) -> 'Mat4':
        """
        Build from a flat column-major buffer of 16 floats or a (4, 4)
        ``[col][row]`` array.

        Raises:
            ValueError: If the input cannot be reshaped to 4x4
        """
        M = np.asarray(data, dtype=DTYPE)

        if M.shape == (16,):
            M = M.reshape(4, 4)

        return cls(M)

    def copy(self) -> 'Mat4':
        """Independent copy; mutating it leaves this matrix untouched."""
        return Mat4(self.m)

    def to_array(self) -> np.ndarray:
        """(4, 4) float32 copy indexed ``[col][row]``."""
        return self.m.copy()

    def to_buffer(self) -> np.ndarray:
        """Flat contiguous float32 copy, column-major."""
        return np.ascontiguousarray(self.m).reshape(16).copy()

    def tobytes(self) -> bytes:
        """Raw column-major bytes (64) for a uniform upload."""
        return self.to_buffer().tobytes()

    def __getitem__(self, col) -> 'MatColumn':
        return MatColumn(self.m[validate_index(col, 4, "column")])

    def __setitem__(self, col, column):
        self.m[validate_index(col, 4, "column")] = validate_components(column, 4, "column")

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            # result[c][r] = sum_i self[i][r] * other[c][i]
            return Mat4(other.m @ self.m)
        if isinstance(other, Vec4):
            # result[r] = sum_c self[c][r] * vec[c]
            return Vec4(other.data @ self.m)
        return NotImplemented

    __mul__ = __matmul__

    def __eq__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self.m, other.m))

    __hash__ = None

    def __repr__(self):
        cols = ", ".join(
            "[" + ", ".join(f"{v:g}" for v in col) + "]" for col in self.m
        )
        return f"Mat4([{cols}])"
