"""Common utilities for the math types."""

from .conversion import (
    to_torch_tensor,
    to_numpy_array,
)
from .validation import (
    validate_components,
    validate_index,
    validate_perspective_params,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
)

__all__ = [
    # Conversion
    "to_torch_tensor",
    "to_numpy_array",

    # Validation
    "validate_components",
    "validate_index",
    "validate_perspective_params",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
]
