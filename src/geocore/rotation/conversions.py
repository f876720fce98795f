"""Rotation representation conversions (NumPy).

Conversions between quaternions, angle-axis pairs, Euler angle sequences
and 3x3 rotation matrices. The value classes in :mod:`geocore.rotation`
wrap these functions; they can also be used directly on arrays.

Quaternion Convention: (w, x, y, z) - scalar first
Euler Convention: angles (a0, a1, a2) about axes (axis0, axis1, axis2)
    describe R = R(axis0, a0) * R(axis1, a1) * R(axis2, a2), i.e. the
    rotation a2 about axis2 is applied first.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from geocore.linalg import Matrix4, MatrixX
from geocore.rotation.kernels import quaternion_multiply_numba
from geocore.utils import ArrayLike

logger = logging.getLogger(__name__)


# ============================================================================
# Rotation matrices
# ============================================================================


def quaternion_to_rotation_matrix(q: np.ndarray) -> np.ndarray:
    """Quaternion to 3x3 rotation matrix.

    The quaternion is not normalized first; the 2/|q|^2 factor makes the
    result the matrix of q * v * q^-1 for any non-zero q.

    :param q: Quaternion [4] (w, x, y, z)
    :returns: 3x3 rotation matrix
    """
    w, x, y, z = q[0], q[1], q[2], q[3]
    s = 2.0 / (w * w + x * x + y * y + z * z)

    tx = s * x
    ty = s * y
    tz = s * z
    twx = tx * w
    twy = ty * w
    twz = tz * w
    txx = tx * x
    txy = ty * x
    txz = tz * x
    tyy = ty * y
    tyz = tz * y
    tzz = tz * z

    R = np.empty((3, 3), dtype=np.float64)

    R[0, 0] = 1 - (tyy + tzz)
    R[0, 1] = txy - twz
    R[0, 2] = txz + twy

    R[1, 0] = txy + twz
    R[1, 1] = 1 - (txx + tzz)
    R[1, 2] = tyz - twx

    R[2, 0] = txz - twy
    R[2, 1] = tyz + twx
    R[2, 2] = 1 - (txx + tyy)

    return R


def rotation_matrix_to_quaternion(R: np.ndarray) -> np.ndarray:
    """3x3 rotation matrix to quaternion.

    Trace-based closed form; when the trace is not positive the largest
    diagonal entry picks the pivot component.

    :param R: 3x3 rotation matrix
    :returns: Quaternion [4] (w, x, y, z)
    """
    q = np.empty(4, dtype=np.float64)
    trace = R[0, 0] + R[1, 1] + R[2, 2]

    if trace > 0:
        t = np.sqrt(trace + 1.0)
        q[0] = 0.5 * t
        t = 0.5 / t
        q[1] = (R[2, 1] - R[1, 2]) * t
        q[2] = (R[0, 2] - R[2, 0]) * t
        q[3] = (R[1, 0] - R[0, 1]) * t
    else:
        i = 0
        if R[1, 1] > R[0, 0]:
            i = 1
        if R[2, 2] > R[i, i]:
            i = 2
        j = (i + 1) % 3
        k = (j + 1) % 3

        t = np.sqrt(R[i, i] - R[j, j] - R[k, k] + 1.0)
        q[1 + i] = 0.5 * t
        t = 0.5 / t
        q[0] = (R[k, j] - R[j, k]) * t
        q[1 + j] = (R[j, i] + R[i, j]) * t
        q[1 + k] = (R[k, i] + R[i, k]) * t

    return q


def as_rotation_block(m: Matrix4 | MatrixX | ArrayLike) -> np.ndarray:
    """Top-left 3x3 block of a Matrix4, MatrixX or 2D array.

    :raises ValueError: If the input is smaller than 3x3
    """
    if isinstance(m, Matrix4 | MatrixX):
        data = m.to_numpy()
    else:
        data = np.asarray(m, dtype=np.float64)
    if data.ndim != 2 or data.shape[0] < 3 or data.shape[1] < 3:
        raise ValueError(f"rotation matrix must be at least 3x3, got shape {data.shape}")
    return np.ascontiguousarray(data[:3, :3], dtype=np.float64)


# ============================================================================
# Angle-axis
# ============================================================================


def angle_axis_to_quaternion(angle: float, axis: np.ndarray) -> np.ndarray:
    """Angle and axis to quaternion.

    :param angle: Rotation angle in radians
    :param axis: Rotation axis [3], assumed unit length
    :returns: Quaternion [4] (w, x, y, z)
    """
    half_angle = 0.5 * angle
    sin_half = math.sin(half_angle)
    return np.array(
        [math.cos(half_angle), sin_half * axis[0], sin_half * axis[1], sin_half * axis[2]],
        dtype=np.float64,
    )


def quaternion_to_angle_axis(q: np.ndarray, eps: float = 1e-12) -> tuple[float, np.ndarray]:
    """Quaternion to angle and axis.

    When the vector part is shorter than eps the axis is undefined and the
    Z axis is returned with a zero angle.

    :param q: Quaternion [4] (w, x, y, z)
    :param eps: Vector-part norm under which the rotation is treated as zero
    :returns: (angle, axis [3]) with angle in [0, 2*pi]
    """
    w, x, y, z = q[0], q[1], q[2], q[3]
    norm = math.sqrt(x * x + y * y + z * z)
    if norm < eps:
        logger.debug("[quaternion_to_angle_axis] Degenerate axis, returning Z")
        return 0.0, np.array([0.0, 0.0, 1.0], dtype=np.float64)

    angle = 2.0 * math.atan2(norm, w)
    axis = np.array([x, y, z], dtype=np.float64) / norm
    return angle, axis


def quaternion_to_angle_axis_positive(q: np.ndarray) -> tuple[float, np.ndarray]:
    """Quaternion to angle and axis with the angle folded into [0, pi].

    The sign of w is moved onto the axis. The zero rotation maps to angle 0
    about the X axis.

    :param q: Quaternion [4] (w, x, y, z)
    :returns: (angle, axis [3])
    """
    w = q[0]
    vec = np.array([q[1], q[2], q[3]], dtype=np.float64)
    n = float(np.linalg.norm(vec))
    if n == 0.0:
        return 0.0, np.array([1.0, 0.0, 0.0], dtype=np.float64)

    angle = 2.0 * math.atan2(n, abs(w))
    axis = vec / n
    if w < 0:
        axis = -axis
    return angle, axis


def angle_axis_to_rotation_matrix(angle: float, axis: np.ndarray) -> np.ndarray:
    """Angle and axis to 3x3 rotation matrix (Rodrigues form).

    :param angle: Rotation angle in radians
    :param axis: Rotation axis [3], assumed unit length
    :returns: 3x3 rotation matrix
    """
    sin_axis = math.sin(angle) * axis
    c = math.cos(angle)
    cos1_axis = (1.0 - c) * axis

    R = np.empty((3, 3), dtype=np.float64)

    tmp = cos1_axis[0] * axis[1]
    R[0, 1] = tmp - sin_axis[2]
    R[1, 0] = tmp + sin_axis[2]

    tmp = cos1_axis[0] * axis[2]
    R[0, 2] = tmp + sin_axis[1]
    R[2, 0] = tmp - sin_axis[1]

    tmp = cos1_axis[1] * axis[2]
    R[1, 2] = tmp - sin_axis[0]
    R[2, 1] = tmp + sin_axis[0]

    R[0, 0] = cos1_axis[0] * axis[0] + c
    R[1, 1] = cos1_axis[1] * axis[1] + c
    R[2, 2] = cos1_axis[2] * axis[2] + c

    return R


# ============================================================================
# Euler angles
# ============================================================================


def _check_axis(axis: int) -> int:
    if axis not in (0, 1, 2):
        raise ValueError(f"Euler axis must be 0, 1 or 2, got {axis}")
    return int(axis)


def euler_to_quaternion(angles: ArrayLike, axis0: int, axis1: int, axis2: int) -> np.ndarray:
    """Euler angles to quaternion.

    :param angles: Angles [3] in radians, about axis0, axis1, axis2
    :param axis0: Axis of the last applied rotation (0=X, 1=Y, 2=Z)
    :param axis1: Axis of the second rotation
    :param axis2: Axis of the first applied rotation
    :returns: Quaternion [4] (w, x, y, z)
    """
    angles = np.asarray(angles, dtype=np.float64)
    q = np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float64)
    for angle, axis in zip(angles, (axis0, axis1, axis2), strict=True):
        elemental = np.zeros(4, dtype=np.float64)
        elemental[0] = math.cos(0.5 * angle)
        elemental[1 + _check_axis(axis)] = math.sin(0.5 * angle)
        quaternion_multiply_numba(q, elemental, q)
    return q


def rotation_matrix_to_euler(
    R: np.ndarray, axis0: int = 2, axis1: int = 1, axis2: int = 0, eps: float = 1e-12
) -> np.ndarray:
    """Decompose a rotation matrix into Euler angles.

    Inverse of :func:`euler_to_quaternion` for the same axis sequence.
    Tait-Bryan sequences (all axes distinct) return a1 in [-pi/2, pi/2];
    proper sequences (axis0 == axis2) return a1 in [0, pi]. In gimbal lock
    a0 is set to 0 and the whole remaining rotation is carried by a2.

    :param R: 3x3 rotation matrix
    :param axis0: Axis of a0 (0=X, 1=Y, 2=Z)
    :param axis1: Axis of a1
    :param axis2: Axis of a2
    :param eps: Threshold under which the sequence is in gimbal lock
    :returns: Angles [3] (a0, a1, a2) in radians
    :raises ValueError: If an axis is invalid or two consecutive axes are equal
    """
    i, j, k = _check_axis(axis0), _check_axis(axis1), _check_axis(axis2)
    if i == j or j == k:
        raise ValueError(f"Consecutive Euler axes must differ, got ({i}, {j}, {k})")

    if i == k:
        return _proper_euler(R, i, j, eps)

    # +1 for cyclic sequences (XYZ, YZX, ZXY), -1 otherwise
    s = 1.0 if (j - i) % 3 == 1 else -1.0

    cos_b = math.hypot(R[i, i], R[i, j])
    b = math.atan2(s * R[i, k], cos_b)
    if cos_b > eps:
        a = math.atan2(-s * R[j, k], R[k, k])
        c = math.atan2(-s * R[i, j], R[i, i])
    else:
        logger.debug("[rotation_matrix_to_euler] Gimbal lock for axes (%d, %d, %d)", i, j, k)
        a = 0.0
        sign = 1.0 if s * R[i, k] < 0 else -1.0
        c = sign * math.atan2(-R[k, j], R[j, j])

    return np.array([a, b, c], dtype=np.float64)


def _proper_euler(R: np.ndarray, i: int, j: int, eps: float) -> np.ndarray:
    """Decomposition for sequences of the form (i, j, i)."""
    k = 3 - i - j
    s = 1.0 if (j - i) % 3 == 1 else -1.0

    sin_b = math.hypot(R[i, j], R[i, k])
    b = math.atan2(sin_b, R[i, i])
    if sin_b > eps:
        a = math.atan2(R[j, i], -s * R[k, i])
        c = math.atan2(R[i, j], s * R[i, k])
    else:
        logger.debug("[rotation_matrix_to_euler] Gimbal lock for axes (%d, %d, %d)", i, j, i)
        a = 0.0
        sign = 1.0 if R[i, i] >= 0 else -1.0
        c = math.atan2(sign * s * R[k, j], R[j, j])

    return np.array([a, b, c], dtype=np.float64)


# ============================================================================
# Convenience Functions
# ============================================================================


def quaternion_multiply(q1: ArrayLike, q2: ArrayLike) -> np.ndarray:
    """Hamilton product q1 * q2 of two [4] quaternions.

    Example:
        >>> q1 = np.array([1.0, 0.0, 0.0, 0.0])  # Identity
        >>> q2 = np.array([0.0, 0.0, 1.0, 0.0])  # 180 deg Y rotation
        >>> quaternion_multiply(q1, q2)
        array([0., 0., 1., 0.])
    """
    out = np.empty(4, dtype=np.float64)
    quaternion_multiply_numba(
        np.ascontiguousarray(q1, dtype=np.float64),
        np.ascontiguousarray(q2, dtype=np.float64),
        out,
    )
    return out


def quaternion_inverse(q: np.ndarray) -> np.ndarray:
    """Multiplicative inverse: conjugate divided by |q|^2."""
    conj = np.array([q[0], -q[1], -q[2], -q[3]], dtype=np.float64)
    n2 = float(np.dot(q, q))
    if n2 == 1.0:
        return conj
    return conj / n2
