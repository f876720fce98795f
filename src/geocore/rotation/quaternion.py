"""Quaternion value type with rotation semantics.

Quaternion Convention: (w, x, y, z) - scalar first.
"""

from __future__ import annotations

import numpy as np

from geocore.config import TOLERANCE_CONFIG
from geocore.linalg import Matrix4, MatrixX, Vector3
from geocore.rotation.conversions import (
    angle_axis_to_quaternion,
    as_rotation_block,
    euler_to_quaternion,
    quaternion_inverse,
    quaternion_multiply,
    quaternion_to_angle_axis,
    quaternion_to_rotation_matrix,
    rotation_matrix_to_euler,
    rotation_matrix_to_quaternion,
)
from geocore.rotation.kernels import (
    quaternion_rotate_points_numba,
    quaternion_rotate_vector_numba,
)
from geocore.utils import ArrayLike, approx_fields


class Quaternion:
    """Quaternion w + xi + yj + zk.

    Not normalized automatically. Rotation operations assume a unit
    quaternion, except :meth:`transform` which is exact for any non-zero q.

    Example:
        >>> q = Quaternion.from_angle_axis(math.pi / 2, Vector3(0, 0, 1))
        >>> q.transform(Vector3(1, 0, 0)).approx(Vector3(0, 1, 0), 1e-12)
        True
    """

    __slots__ = ("_data",)

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([w, x, y, z], dtype=np.float64)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Quaternion:
        q = cls.__new__(cls)
        q._data = data
        return q

    # Factory methods

    @classmethod
    def identity(cls) -> Quaternion:
        """Return (1, 0, 0, 0)."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_angle_axis(cls, angle: float, axis: Vector3) -> Quaternion:
        """Rotation of angle radians around axis.

        :param angle: Rotation angle in radians
        :param axis: Unit rotation axis
        """
        return cls._wrap(angle_axis_to_quaternion(angle, axis.to_numpy()))

    @classmethod
    def from_euler(
        cls, angles: Vector3 | ArrayLike, axis0: int = 2, axis1: int = 1, axis2: int = 0
    ) -> Quaternion:
        """Compose three elemental rotations.

        The result is R(axis0, a0) * R(axis1, a1) * R(axis2, a2): the
        rotation about axis2 is applied first.

        :param angles: (a0, a1, a2) in radians
        :param axis0: Axis of a0 (0=X, 1=Y, 2=Z)
        :param axis1: Axis of a1
        :param axis2: Axis of a2
        :raises ValueError: If an axis is not 0, 1 or 2
        """
        if isinstance(angles, Vector3):
            angles = angles.to_numpy()
        return cls._wrap(euler_to_quaternion(angles, axis0, axis1, axis2))

    @classmethod
    def from_yaw(cls, angle: float) -> Quaternion:
        """Rotation of angle radians around Z."""
        return cls.from_euler((angle, 0.0, 0.0), 2, 1, 0)

    @classmethod
    def from_matrix(cls, m: Matrix4 | MatrixX | ArrayLike) -> Quaternion:
        """Quaternion of the rotation held in the top-left 3x3 block of m."""
        return cls._wrap(rotation_matrix_to_quaternion(as_rotation_block(m)))

    # Field access

    @property
    def w(self) -> float:
        return float(self._data[0])

    @w.setter
    def w(self, value: float) -> None:
        self._data[0] = value

    @property
    def x(self) -> float:
        return float(self._data[1])

    @x.setter
    def x(self, value: float) -> None:
        self._data[1] = value

    @property
    def y(self) -> float:
        return float(self._data[2])

    @y.setter
    def y(self, value: float) -> None:
        self._data[2] = value

    @property
    def z(self) -> float:
        return float(self._data[3])

    @z.setter
    def z(self, value: float) -> None:
        self._data[3] = value

    @property
    def re(self) -> float:
        """Real (scalar) part."""
        return self.w

    @property
    def im(self) -> Vector3:
        """Imaginary (vector) part."""
        return Vector3._wrap(self._data[1:].copy())

    def to_list(self) -> list[float]:
        """Return [w, x, y, z]."""
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def copy(self) -> Quaternion:
        return Quaternion._wrap(self._data.copy())

    # Algebra

    def norm(self) -> float:
        return float(np.linalg.norm(self._data))

    def normalize(self) -> Quaternion:
        """Return a unit-norm copy."""
        return Quaternion._wrap(self._data / np.linalg.norm(self._data))

    def normalize_inplace(self) -> None:
        self._data /= np.linalg.norm(self._data)

    def inverse(self) -> Quaternion:
        """Multiplicative inverse (the conjugate for unit quaternions)."""
        return Quaternion._wrap(quaternion_inverse(self._data))

    def concatenate(self, other: Quaternion) -> Quaternion:
        """Hamilton product self * other: other is applied first."""
        return Quaternion._wrap(quaternion_multiply(self._data, other._data))

    compose = concatenate

    def transform(self, v: Vector3) -> Vector3:
        """Rotate v by this quaternion."""
        out = np.empty(3, dtype=np.float64)
        quaternion_rotate_vector_numba(self._data, v._data, out)
        return Vector3._wrap(out)

    apply = transform

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """Rotate an [N, 3] array of points.

        :param points: Points [N, 3]
        :returns: Rotated points [N, 3]
        :raises ValueError: If points is not [N, 3]
        """
        points = np.ascontiguousarray(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] != 3:
            raise ValueError(f"points must be [N, 3], got shape {points.shape}")
        out = np.empty_like(points)
        quaternion_rotate_points_numba(self._data, points, np.zeros(3), out)
        return out

    def __mul__(self, other):
        if isinstance(other, Quaternion):
            return self.concatenate(other)
        if isinstance(other, Vector3):
            return self.transform(other)
        return NotImplemented

    def __neg__(self) -> Quaternion:
        return Quaternion._wrap(-self._data)

    # Conversions

    def matrix(self) -> MatrixX:
        """3x3 rotation matrix."""
        return MatrixX.from_numpy(quaternion_to_rotation_matrix(self._data))

    def to_angle_axis(self, eps: float | None = None) -> tuple[float, Vector3]:
        """Angle in [0, 2*pi] and unit axis of this rotation.

        :param eps: Vector-part norm under which (0, Z) is returned
        """
        eps = TOLERANCE_CONFIG.angle_axis.resolve(eps)
        angle, axis = quaternion_to_angle_axis(self._data, eps)
        return angle, Vector3._wrap(axis)

    def to_scaled_axis(self, eps: float | None = None) -> Vector3:
        """Rotation vector: axis scaled by the angle."""
        angle, axis = self.to_angle_axis(eps)
        return axis * angle

    def to_euler(self, axis0: int = 2, axis1: int = 1, axis2: int = 0) -> Vector3:
        """Euler angles such that from_euler(angles, axis0, axis1, axis2) gives self.

        :raises ValueError: If an axis is invalid or two consecutive axes are equal
        """
        R = quaternion_to_rotation_matrix(self._data)
        eps = TOLERANCE_CONFIG.euler_singularity.default
        return Vector3._wrap(rotation_matrix_to_euler(R, axis0, axis1, axis2, eps))

    @property
    def yaw(self) -> float:
        return self.to_euler()[0]

    @property
    def pitch(self) -> float:
        return self.to_euler()[1]

    @property
    def roll(self) -> float:
        return self.to_euler()[2]

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def approx(self, other: Quaternion, tolerance: float | None = None) -> bool:
        """Per-field comparison of (w, x, y, z).

        q and -q describe the same rotation but do not compare equal here.
        """
        tol = TOLERANCE_CONFIG.approx.resolve(tolerance)
        if not isinstance(other, Quaternion):
            return False
        return approx_fields(self._data, other._data, tol)

    # Serialization

    def to_bytes(self) -> bytes:
        from geocore.codec import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, payload: bytes) -> Quaternion:
        from geocore.codec import decode

        return decode(cls, payload)

    def __reduce__(self):
        from geocore.codec import decode, encode

        return (decode, (type(self), encode(self)))

    def __repr__(self) -> str:
        return f"Quaternion(w={self.w}, x={self.x}, y={self.y}, z={self.z})"
