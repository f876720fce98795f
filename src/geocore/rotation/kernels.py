"""
Numba-optimized quaternion kernels.

Provides JIT-compiled kernels for the Hamilton product and for rotating
vectors by a quaternion. Kernels write into a caller-provided ``out`` buffer;
all inputs are read before ``out`` is written, so ``out`` may alias an input.

Quaternion convention: (w, x, y, z) - scalar first, float64.
"""

from __future__ import annotations

import numpy as np
from numba import njit, prange
from numpy.typing import NDArray


@njit(cache=True, nogil=True)
def quaternion_multiply_numba(
    q1: NDArray[np.float64],
    q2: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Hamilton product q1 * q2 (q2 applied first, then q1).

    Args:
        q1: First quaternion [4] (w, x, y, z)
        q2: Second quaternion [4] (w, x, y, z)
        out: Output quaternion [4] (modified in-place)
    """
    w1, x1, y1, z1 = q1[0], q1[1], q1[2], q1[3]
    w2, x2, y2, z2 = q2[0], q2[1], q2[2], q2[3]

    w = w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2
    x = w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2
    y = w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2
    z = w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2

    out[0] = w
    out[1] = x
    out[2] = y
    out[3] = z


@njit(cache=True, nogil=True)
def quaternion_rotate_vector_numba(
    q: NDArray[np.float64],
    v: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Rotate a 3-vector by q (vector part of q * v * q^-1).

    Uses v' = v + w*t + u x t with t = (2 / |q|^2) * (u x v), which reduces
    to the usual unit-quaternion formula when |q| == 1.

    Args:
        q: Quaternion [4] (w, x, y, z), must be non-zero
        v: Vector [3]
        out: Output vector [3] (modified in-place)
    """
    w, ux, uy, uz = q[0], q[1], q[2], q[3]
    s = 2.0 / (w * w + ux * ux + uy * uy + uz * uz)
    vx, vy, vz = v[0], v[1], v[2]

    tx = s * (uy * vz - uz * vy)
    ty = s * (uz * vx - ux * vz)
    tz = s * (ux * vy - uy * vx)

    out[0] = vx + w * tx + (uy * tz - uz * ty)
    out[1] = vy + w * ty + (uz * tx - ux * tz)
    out[2] = vz + w * tz + (ux * ty - uy * tx)


@njit(parallel=True, cache=True, nogil=True)
def quaternion_rotate_points_numba(
    q: NDArray[np.float64],
    points: NDArray[np.float64],
    translation: NDArray[np.float64],
    out: NDArray[np.float64],
) -> None:
    """
    Rotate N points by q, then add a translation.

    Args:
        q: Quaternion [4] (w, x, y, z), must be non-zero
        points: Input points [N, 3]
        translation: Offset added after rotation [3]
        out: Output points [N, 3] (modified in-place)
    """
    w, ux, uy, uz = q[0], q[1], q[2], q[3]
    s = 2.0 / (w * w + ux * ux + uy * uy + uz * uz)
    n = points.shape[0]

    for i in prange(n):
        vx = points[i, 0]
        vy = points[i, 1]
        vz = points[i, 2]

        tx = s * (uy * vz - uz * vy)
        ty = s * (uz * vx - ux * vz)
        tz = s * (ux * vy - uy * vx)

        out[i, 0] = vx + w * tx + (uy * tz - uz * ty) + translation[0]
        out[i, 1] = vy + w * ty + (uz * tx - ux * tz) + translation[1]
        out[i, 2] = vz + w * tz + (ux * ty - uy * tx) + translation[2]
