"""Small numeric helpers shared by the value types."""

from __future__ import annotations

import numbers
from typing import TypeAlias

import numpy as np

# Type aliases for better readability (Python 3.12+ syntax)
ArrayLike: TypeAlias = np.ndarray | list | tuple


def is_scalar(value) -> bool:
    """Check if value is a real scalar (Python or numpy number, not bool)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def approx_fields(a: np.ndarray, b: np.ndarray, tolerance: float) -> bool:
    """Per-field absolute comparison.

    :param a: First array
    :param b: Second array (same shape as a)
    :param tolerance: Maximum allowed absolute difference per field
    :returns: True if every |a_i - b_i| <= tolerance
    """
    if a.shape != b.shape:
        return False
    return bool(np.all(np.abs(a - b) <= tolerance))


def as_float_array(values: ArrayLike) -> np.ndarray:
    """Flatten any real sequence to a contiguous float64 array."""
    return np.ascontiguousarray(np.asarray(values, dtype=np.float64).reshape(-1))
