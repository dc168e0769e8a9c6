"""Type conversion utilities."""

from __future__ import annotations
from typing import Union
import numpy as np

from ..constants import DTYPE


def to_numpy_array(
    x: Union[np.ndarray, "torch.Tensor", list],
    dtype: np.dtype = DTYPE
) -> np.ndarray:
    """
    Convert input to NumPy array.

    Vectors and matrices are converted via their ``to_array`` method, so a
    ``Mat4`` comes out as a (4, 4) array indexed ``[col][row]``.

    Args:
        x: Input (Vec3/Vec4/Mat4, numpy array, torch tensor or list)
        dtype: Target dtype

    Returns:
        NumPy array
    """
    if hasattr(x, 'to_array'):  # Vec3/Vec4/Mat4
        return x.to_array().astype(dtype)
    if hasattr(x, 'detach'):  # torch.Tensor
        return x.detach().cpu().numpy().astype(dtype)
    return np.asarray(x, dtype=dtype)


def to_torch_tensor(
    x,
    device: str = "cpu",
    dtype: "torch.dtype" = None,
    requires_grad: bool = False
):
    """
    Convert input to PyTorch tensor.

    Args:
        x: Input (Vec3/Vec4/Mat4, numpy array, torch tensor or list)
        device: Target device
        dtype: Target dtype (default: torch.float32)
        requires_grad: Whether to enable gradient computation

    Returns:
        PyTorch tensor on specified device
    """
    import torch

    if dtype is None:
        dtype = torch.float32

    if isinstance(x, torch.Tensor):
        tensor = x.to(dtype)
    else:
        tensor = torch.as_tensor(to_numpy_array(x), dtype=dtype)

    if device and tensor.device != torch.device(device):
        tensor = tensor.to(device)

    if requires_grad and not tensor.requires_grad:
        tensor.requires_grad_(True)

    return tensor
