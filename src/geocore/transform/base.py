"""Shared behaviour of the 3D homogeneous transform types."""

from __future__ import annotations

import numpy as np

from geocore.config import TOLERANCE_CONFIG
from geocore.linalg import Matrix4, Vector3
from geocore.rotation import AngleAxis, Quaternion
from geocore.utils import ArrayLike, approx_fields

# ============================================================================
# 4x4 Homogeneous Transformation Matrix Building (NumPy)
# ============================================================================


def build_matrix_4x4(linear: np.ndarray, translation: np.ndarray) -> np.ndarray:
    """Build a 4x4 homogeneous matrix from a 3x3 linear part and a translation."""
    M = np.eye(4, dtype=np.float64)
    M[:3, :3] = linear
    M[:3, 3] = translation
    return M


def as_quaternion(rotation: Quaternion | AngleAxis) -> Quaternion:
    """Accept a Quaternion or an AngleAxis wherever a rotation is expected."""
    if isinstance(rotation, AngleAxis):
        return rotation.to_quaternion()
    if isinstance(rotation, Quaternion):
        return rotation
    raise TypeError(f"expected Quaternion or AngleAxis, got {type(rotation).__name__}")


def as_points(points: ArrayLike) -> np.ndarray:
    """Validate and convert an [N, 3] point array to contiguous float64."""
    points = np.ascontiguousarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f"points must be [N, 3], got shape {points.shape}")
    return points


class HomogeneousTransform:
    """Mixin for transforms represented by a 4x4 homogeneous matrix.

    Subclasses implement ``_matrix_array``, ``concatenate`` and
    ``transform``. Equality and approximate equality are defined on the
    composed 4x4 matrix, so two transforms built from double-cover partner
    quaternions compare equal.
    """

    __slots__ = ()

    def _matrix_array(self) -> np.ndarray:
        raise NotImplementedError

    def matrix(self) -> Matrix4:
        """4x4 homogeneous matrix of the transform."""
        return Matrix4._wrap(self._matrix_array())

    def __mul__(self, other):
        if isinstance(other, type(self)):
            return self.concatenate(other)
        if isinstance(other, Vector3):
            return self.transform(other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bool(np.array_equal(self._matrix_array(), other._matrix_array()))

    __hash__ = None

    def approx(self, other, tolerance: float | None = None) -> bool:
        """Per-entry absolute comparison of the 4x4 matrices."""
        tol = TOLERANCE_CONFIG.approx.resolve(tolerance)
        if not isinstance(other, type(self)):
            return False
        return approx_fields(self._matrix_array(), other._matrix_array(), tol)

    def __repr__(self) -> str:
        rows = [" ".join(f"{v:g}" for v in row) for row in self._matrix_array().tolist()]
        indent = " " * (len(type(self).__name__) + 1)
        return f"{type(self).__name__}(" + f"\n{indent}".join(rows) + ")"
