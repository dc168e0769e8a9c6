"""Camera configuration parser."""

from __future__ import annotations
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Tuple, Dict, Any, List

from ..matrix import Mat4
from ..vector import Vec3
from ..utils.debug import debug_print, debug_matrix_info
from .utils import deg_to_rad, compute_aspect_ratio


@dataclass
class CameraConfig:
    """Camera parameters with their defaults."""

    eye: List[float] = field(default_factory=lambda: [0.0, 0.0, 5.0])
    center: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    up: List[float] = field(default_factory=lambda: [0.0, 1.0, 0.0])
    fov_y_deg: float = 60.0
    width: int = 1280
    height: int = 720
    z_near: float = 0.1
    z_far: float = 100.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def make_matrices_from_config(
    camera_cfg: Dict[str, Any]
) -> Tuple[Mat4, Mat4, Vec3]:
    """
    Build view and projection matrices from a configuration dictionary.

    Args:
        camera_cfg: Camera configuration (plain dict or OmegaConf DictConfig)
            with keys, all optional:
                - width, height: Viewport size
                - fov_y: Vertical field of view in degrees
                - znear, zfar: Clipping planes
                - lookat: Look-at parameters (dict)
                    - eye: Camera position [x, y, z]
                    - center: Look-at point [x, y, z]
                    - up: Up direction hint [x, y, z]

    Returns:
        Tuple of:
            - view (Mat4): World-to-view transform
            - proj (Mat4): Perspective projection
            - eye (Vec3): Camera position in world space

    Raises:
        ValueError: If the viewport height is zero or znear == zfar

    Example:
        >>> view, proj, eye = make_matrices_from_config({
        ...     "width": 800, "height": 600, "fov_y": 45.0,
        ...     "lookat": {"eye": [0, 2, 5], "center": [0, 0, 0]},
        ... })
    """
    defaults = CameraConfig()

    width = int(camera_cfg.get("width", defaults.width))
    height = int(camera_cfg.get("height", defaults.height))
    fov_y_deg = float(camera_cfg.get("fov_y", defaults.fov_y_deg))
    znear = float(camera_cfg.get("znear", defaults.z_near))
    zfar = float(camera_cfg.get("zfar", defaults.z_far))

    lookat_cfg = camera_cfg.get("lookat") or {}
    cfg = CameraConfig(
        eye=[float(v) for v in lookat_cfg.get("eye", defaults.eye)],
        center=[float(v) for v in lookat_cfg.get("center", defaults.center)],
        up=[float(v) for v in lookat_cfg.get("up", defaults.up)],
        fov_y_deg=fov_y_deg,
        width=width,
        height=height,
        z_near=znear,
        z_far=zfar,
    )
    debug_print(f"[Camera] {cfg}")

    eye = Vec3(cfg.eye)
    view = Mat4.look_at(eye, Vec3(cfg.center), Vec3(cfg.up))
    proj = Mat4.perspective(
        deg_to_rad(cfg.fov_y_deg),
        compute_aspect_ratio(cfg.width, cfg.height),
        cfg.z_near,
        cfg.z_far,
    )

    debug_matrix_info("view", view)
    debug_matrix_info("proj", proj)

    return view, proj, eye


def load_camera_config(config_path: str):
    """
    Load camera configuration from YAML.

    The file must contain a top-level ``camera`` section, which is returned
    and can be passed straight to ``make_matrices_from_config``.

    Args:
        config_path: Path to YAML config file

    Returns:
        OmegaConf DictConfig of the camera section

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the ``camera`` section is missing
    """
    from omegaconf import OmegaConf

    if not Path(config_path).exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = OmegaConf.load(config_path)

    if "camera" not in config:
        raise ValueError("Missing required config section: camera")

    camera = config.camera
    print(f"[Config] Loaded camera configuration from: {config_path}")
    debug_print(f"  - Viewport: {camera.get('width')}x{camera.get('height')}")
    debug_print(f"  - FOV: {camera.get('fov_y')}")

    return camera
