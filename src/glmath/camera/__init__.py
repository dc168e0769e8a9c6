"""Camera transforms: view, projection and their configuration."""

from .utils import (
    deg_to_rad,
    compute_aspect_ratio,
)
from .projection import build_perspective_matrix
from .lookat import build_lookat_view_matrix
from .config import CameraConfig, make_matrices_from_config, load_camera_config

__all__ = [
    "deg_to_rad",
    "compute_aspect_ratio",
    "build_perspective_matrix",
    "build_lookat_view_matrix",
    "CameraConfig",
    "make_matrices_from_config",
    "load_camera_config",
]
