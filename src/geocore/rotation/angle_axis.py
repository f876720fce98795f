"""Angle-axis rotation value type."""

from __future__ import annotations

import numpy as np

from geocore.config import TOLERANCE_CONFIG
from geocore.linalg import Matrix4, MatrixX, Vector3
from geocore.rotation.conversions import (
    angle_axis_to_quaternion,
    angle_axis_to_rotation_matrix,
    quaternion_to_angle_axis_positive,
    rotation_matrix_to_euler,
)
from geocore.rotation.quaternion import Quaternion
from geocore.utils import ArrayLike, approx_fields


class AngleAxis:
    """Rotation of ``angle`` radians around ``axis``.

    The axis is stored as given; conversions assume it has unit length.
    Composition follows the Quaternion convention: ``a * b`` applies ``b``
    first.
    """

    __slots__ = ("_angle", "_axis")

    def __init__(self, angle: float = 0.0, axis: Vector3 | None = None):
        self._angle = float(angle)
        self._axis = Vector3.unit_x() if axis is None else axis.copy()

    # Factory methods

    @classmethod
    def identity(cls) -> AngleAxis:
        """Zero rotation around X."""
        return cls(0.0, Vector3.unit_x())

    @classmethod
    def from_quaternion(cls, q: Quaternion) -> AngleAxis:
        """Angle in [0, pi] and unit axis of q's rotation.

        The zero rotation gives angle 0 around X.
        """
        angle, axis = quaternion_to_angle_axis_positive(q.to_numpy())
        return cls(angle, Vector3._wrap(axis))

    @classmethod
    def from_euler(
        cls, angles: Vector3 | ArrayLike, axis0: int = 2, axis1: int = 1, axis2: int = 0
    ) -> AngleAxis:
        """See :meth:`Quaternion.from_euler`."""
        return cls.from_quaternion(Quaternion.from_euler(angles, axis0, axis1, axis2))

    @classmethod
    def from_matrix(cls, m: Matrix4 | MatrixX | ArrayLike) -> AngleAxis:
        return cls.from_quaternion(Quaternion.from_matrix(m))

    # Field access

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        self._angle = float(value)

    @property
    def axis(self) -> Vector3:
        """Copy of the rotation axis."""
        return self._axis.copy()

    @axis.setter
    def axis(self, value: Vector3) -> None:
        self._axis = value.copy()

    def copy(self) -> AngleAxis:
        return AngleAxis(self._angle, self._axis)

    def to_list(self) -> list[float]:
        """Return [angle, axis_x, axis_y, axis_z]."""
        return [self._angle, *self._axis.to_list()]

    # Conversions

    def to_quaternion(self) -> Quaternion:
        return Quaternion._wrap(angle_axis_to_quaternion(self._angle, self._axis.to_numpy()))

    def _rotation_matrix(self) -> np.ndarray:
        return angle_axis_to_rotation_matrix(self._angle, self._axis.to_numpy())

    def matrix(self) -> MatrixX:
        """3x3 rotation matrix."""
        return MatrixX.from_numpy(self._rotation_matrix())

    def to_scaled_axis(self) -> Vector3:
        return self._axis * self._angle

    def to_euler(self, axis0: int = 2, axis1: int = 1, axis2: int = 0) -> Vector3:
        """See :meth:`Quaternion.to_euler`."""
        eps = TOLERANCE_CONFIG.euler_singularity.default
        angles = rotation_matrix_to_euler(self._rotation_matrix(), axis0, axis1, axis2, eps)
        return Vector3._wrap(angles)

    # Algebra

    def inverse(self) -> AngleAxis:
        return AngleAxis(-self._angle, self._axis)

    def concatenate(self, other: AngleAxis) -> AngleAxis:
        """Rotation applying other first, then self."""
        return AngleAxis.from_quaternion(self.to_quaternion().concatenate(other.to_quaternion()))

    compose = concatenate

    def transform(self, v: Vector3) -> Vector3:
        return Vector3._wrap(self._rotation_matrix() @ v.to_numpy())

    apply = transform

    def __mul__(self, other):
        if isinstance(other, AngleAxis):
            return self.concatenate(other)
        if isinstance(other, Vector3):
            return self.transform(other)
        return NotImplemented

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, AngleAxis):
            return NotImplemented
        return self._angle == other._angle and self._axis == other._axis

    __hash__ = None

    def approx(self, other: AngleAxis, tolerance: float | None = None) -> bool:
        """Compare angle and each axis component.

        (angle, axis) and (-angle, -axis) are the same rotation but do not
        compare equal here.
        """
        tol = TOLERANCE_CONFIG.approx.resolve(tolerance)
        if not isinstance(other, AngleAxis):
            return False
        return abs(self._angle - other._angle) <= tol and approx_fields(
            self._axis.to_numpy(), other._axis.to_numpy(), tol
        )

    # Serialization

    def to_bytes(self) -> bytes:
        from geocore.codec import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, payload: bytes) -> AngleAxis:
        from geocore.codec import decode

        return decode(cls, payload)

    def __reduce__(self):
        from geocore.codec import decode, encode

        return (decode, (type(self), encode(self)))

    def __repr__(self) -> str:
        return f"AngleAxis(angle={self._angle}, axis={self._axis!r})"
