"""
glmath - 3D linear algebra for real-time rendering

Fixed-size column vectors and a column-major 4x4 matrix for building the
model/view/projection transform chain.

Components:
    - Vector: Vec3, Vec4
    - Matrix: Mat4 and its transform constructors
    - Camera: Look-at view and perspective projection builders, config
    - Utils: Conversion, validation and debug helpers

Example:
    >>> from glmath import Mat4, Vec4
    >>>
    >>> model = Mat4.translate(1.0, 2.0, 3.0) @ Mat4.scale(2.0, 2.0, 2.0)
    >>> model @ Vec4([3.0, 3.0, 3.0, 1.0])
    Vec4([7, 8, 9, 1])
"""

__version__ = "0.2.0"

from .constants import TAU, DTYPE

# Vector
from .vector import FixedVector, Vec3, Vec4

# Matrix
from .matrix import Mat4

# Camera
from .camera import (
    build_lookat_view_matrix,
    build_perspective_matrix,
    make_matrices_from_config,
    load_camera_config,
    CameraConfig,
)

# Utils
from .utils import (
    to_numpy_array,
    to_torch_tensor,
    debug_print,
    is_debug_enabled,
)

__all__ = [
    "__version__",
    "TAU",
    "DTYPE",

    # Vector
    "FixedVector",
    "Vec3",
    "Vec4",

    # Matrix
    "Mat4",

    # Camera
    "build_lookat_view_matrix",
    "build_perspective_matrix",
    "make_matrices_from_config",
    "load_camera_config",
    "CameraConfig",

    # Utils
    "to_numpy_array",
    "to_torch_tensor",
    "debug_print",
    "is_debug_enabled",
]
