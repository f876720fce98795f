"""Rigid transforms: rotation followed by translation."""

from __future__ import annotations

import numpy as np

from geocore.linalg import Vector3
from geocore.rotation import AngleAxis, Quaternion
from geocore.rotation.conversions import quaternion_to_rotation_matrix
from geocore.rotation.kernels import quaternion_rotate_points_numba
from geocore.transform.base import (
    HomogeneousTransform,
    as_points,
    as_quaternion,
    build_matrix_4x4,
)


class Isometry3(HomogeneousTransform):
    """Element of SE(3) stored as a translation and a rotation quaternion.

    A point p maps to ``rotation * p + translation``. ``a * b`` applies
    ``b`` first.

    Example:
        >>> t = Isometry3.from_position_orientation(Vector3(1, 2, 3), Quaternion(0, 0, 1, 0))
        >>> t * Vector3(0, 0, 0)
        Vector3(1.0, 2.0, 3.0)
    """

    __slots__ = ("_translation", "_rotation")

    def __init__(self):
        self._translation = Vector3.zero()
        self._rotation = Quaternion.identity()

    @classmethod
    def identity(cls) -> Isometry3:
        return cls()

    @classmethod
    def from_position_orientation(
        cls, position: Vector3, orientation: Quaternion | AngleAxis
    ) -> Isometry3:
        """Transform whose translation is position and rotation is orientation."""
        t = cls()
        t.prerotate(orientation)
        t.pretranslate(position)
        return t

    # Accessors

    @property
    def translation(self) -> Vector3:
        return self._translation.copy()

    @translation.setter
    def translation(self, value: Vector3) -> None:
        self._translation = value.copy()

    @property
    def rotation(self) -> Quaternion:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: Quaternion | AngleAxis) -> None:
        self._rotation = as_quaternion(value).copy()

    def copy(self) -> Isometry3:
        t = Isometry3()
        t._translation = self._translation.copy()
        t._rotation = self._rotation.copy()
        return t

    def _matrix_array(self) -> np.ndarray:
        R = quaternion_to_rotation_matrix(self._rotation.to_numpy())
        return build_matrix_4x4(R, self._translation.to_numpy())

    # In-place composition

    def prerotate(self, rotation: Quaternion | AngleAxis) -> Isometry3:
        """Apply rotation after this transform."""
        q = as_quaternion(rotation)
        self._rotation = q.concatenate(self._rotation)
        self._translation = q.transform(self._translation)
        return self

    def pretranslate(self, offset: Vector3) -> Isometry3:
        """Apply a translation after this transform."""
        self._translation = self._translation + offset
        return self

    def rotate(self, rotation: Quaternion | AngleAxis) -> Isometry3:
        """Apply rotation before this transform."""
        self._rotation = self._rotation.concatenate(as_quaternion(rotation))
        return self

    def translate(self, offset: Vector3) -> Isometry3:
        """Apply a translation before this transform."""
        self._translation = self._translation + self._rotation.transform(offset)
        return self

    # Algebra

    def concatenate(self, other: Isometry3) -> Isometry3:
        """Transform applying other first, then self."""
        t = Isometry3()
        t._translation = self._rotation.transform(other._translation) + self._translation
        t._rotation = self._rotation.concatenate(other._rotation)
        return t

    compose = concatenate

    def transform(self, v: Vector3) -> Vector3:
        return self._rotation.transform(v) + self._translation

    apply = transform

    def transform_points(self, points: np.ndarray) -> np.ndarray:
        """Apply the transform to an [N, 3] array of points."""
        points = as_points(points)
        out = np.empty_like(points)
        quaternion_rotate_points_numba(
            self._rotation.to_numpy(), points, self._translation.to_numpy(), out
        )
        return out

    def inverse(self) -> Isometry3:
        t = Isometry3()
        t._rotation = self._rotation.inverse()
        t._translation = t._rotation.transform(-self._translation)
        return t
