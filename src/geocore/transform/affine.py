"""General affine transforms: linear part (rotation, scale, shear) plus translation."""

from __future__ import annotations

import numpy as np

from geocore.linalg import MatrixX, Vector3
from geocore.rotation import AngleAxis, Quaternion
from geocore.rotation.conversions import quaternion_to_rotation_matrix
from geocore.transform.base import (
    HomogeneousTransform,
    as_points,
    as_quaternion,
    build_matrix_4x4,
)
from geocore.utils import ArrayLike, is_scalar


def _rotation_matrix(rotation: Quaternion | AngleAxis) -> np.ndarray:
    return quaternion_to_rotation_matrix(as_quaternion(rotation).to_numpy())


def _scale_vector(factor: float | Vector3 | ArrayLike) -> np.ndarray:
    """Uniform or per-axis scale factor as a [3] array."""
    if is_scalar(factor):
        return np.full(3, float(factor), dtype=np.float64)
    if isinstance(factor, Vector3):
        return factor.to_numpy()
    scale = np.asarray(factor, dtype=np.float64).reshape(-1)
    if scale.shape != (3,):
        raise ValueError(f"scale must be a scalar or have 3 components, got shape {scale.shape}")
    return scale


def polar_rotation(linear: np.ndarray) -> np.ndarray:
    """Rotation factor R of the polar decomposition linear = R * S.

    :param linear: 3x3 invertible matrix
    :returns: 3x3 proper rotation matrix (det = +1)
    """
    U, _, Vt = np.linalg.svd(linear)
    if np.linalg.det(U @ Vt) < 0:
        U[:, -1] = -U[:, -1]
    return U @ Vt


class Affine3(HomogeneousTransform):
    """3D affine transform ``p -> linear @ p + translation``.

    ``a * b`` applies ``b`` first.
    """

    __slots__ = ("_translation", "_linear")

    def __init__(self):
        self._translation = np.zeros(3, dtype=np.float64)
        self._linear = np.eye(3, dtype=np.float64)

    @classmethod
    def identity(cls) -> Affine3:
        return cls()

    @classmethod
    def from_position_orientation(
        cls, position: Vector3, orientation: Quaternion | AngleAxis
    ) -> Affine3:
        t = cls()
        t.prerotate(orientation)
        t.pretranslate(position)
        return t

    # Accessors

    @property
    def translation(self) -> Vector3:
        return Vector3._wrap(self._translation.copy())

    @translation.setter
    def translation(self, value: Vector3) -> None:
        self._translation = value.to_numpy()

    @property
    def linear(self) -> MatrixX:
        """3x3 linear part."""
        return MatrixX.from_numpy(self._linear)

    @linear.setter
    def linear(self, value: MatrixX | ArrayLike) -> None:
        data = value.to_numpy() if isinstance(value, MatrixX) else np.asarray(value)
        if data.shape != (3, 3):
            raise ValueError(f"linear part must be 3x3, got shape {data.shape}")
        self._linear = np.array(data, dtype=np.float64)

    @property
    def rotation(self) -> Quaternion:
        """Rotation part of the linear map, with scale and shear removed.

        Recovered from the polar factor of the linear part, so it matches the
        rotation passed in only up to sign (q and -q are one rotation) and
        only to rounding. Below 120 degrees the returned w is positive.
        """
        return Quaternion.from_matrix(polar_rotation(self._linear))

    def copy(self) -> Affine3:
        t = Affine3()
        t._translation = self._translation.copy()
        t._linear = self._linear.copy()
        return t

    def _matrix_array(self) -> np.ndarray:
        return build_matrix_4x4(self._linear, self._translation)

    # In-place composition

    def prerotate(self, rotation: Quaternion | AngleAxis) -> Affine3:
        """Apply rotation after this transform."""
        R = _rotation_matrix(rotation)
        self._linear = R @ self._linear
        self._translation = R @ self._translation
        return self

    def pretranslate(self, offset: Vector3) -> Affine3:
        """Apply a translation after this transform."""
        self._translation = self._translation + offset.to_numpy()
        return self

    def prescale(self, factor: float | Vector3 | ArrayLike) -> Affine3:
        """Apply a uniform or per-axis scale after this transform."""
        scale = _scale_vector(factor)
        self._linear = scale[:, None] * self._linear
        self._translation = scale * self._translation
        return self

    def rotate(self, rotation: Quaternion | AngleAxis) -> Affine3:
        """Apply rotation before this transform."""
        self._linear = self._linear @ _rotation_matrix(rotation)
        return self

    def translate(self, offset: Vector3) -> Affine3:
        """Apply a translation before this transform."""
        self._translation = self._translation + self._linear @ offset.to_numpy()
        return self

    def scale(self, factor: float | Vector3 | ArrayLike) -> Affine3:
        """Apply a uniform or per-axis scale before this transform."""
        self._linear = self._linear * _scale_vector(factor)[None, :]
        return self

    # Algebra

    def concatenate(self, other: Affine3) -> Affine3:
        """Transform applying other first, then self."""
        t = Affine3()
        t._linear = self._linear @ other._linear
        t._translation = self._linear @ other._translation + self._translation
        return t

    compose = concatenate

    def transform(self, v: Vector3) -> Vector3:
        return Vector3._wrap(self._linear @ v.to_numpy() + self._translation)

    apply = transform

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """Apply the transform to an [N, 3] array of points."""
        points = as_points(points)
        return points @ self._linear.T + self._translation

    def inverse(self) -> Affine3:
        """Inverse transform.

        :raises numpy.linalg.LinAlgError: If the linear part is singular
        """
        t = Affine3()
        t._linear = np.linalg.inv(self._linear)
        t._translation = -(t._linear @ self._translation)
        return t
