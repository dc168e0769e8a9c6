"""Numeric constants shared across the library."""

import numpy as np

# Single precision matches what GL vertex/uniform buffers expect
DTYPE = np.float32

TAU = DTYPE(2.0 * np.pi)
