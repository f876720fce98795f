"""
Protocol definitions for geocore value types.

Structural interfaces shared by the rotation and transform types, so code
can accept "any rotation" or "any transform" without naming concrete
classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from geocore.linalg import Vector3


@runtime_checkable
class SupportsApprox(Protocol):
    """Protocol for values compared with an absolute per-field tolerance."""

    def approx(self, other: Self, tolerance: float | None = None) -> bool:
        """
        Compare with other field by field.

        :param other: Value of the same type
        :param tolerance: Maximum absolute difference, None for the configured default
        :returns: True if every field is within tolerance
        """
        ...


@runtime_checkable
class Rotation3(Protocol):
    """Protocol for 3D rotations (Quaternion, AngleAxis)."""

    def concatenate(self, other: Self) -> Self:
        """Rotation applying other first, then self."""
        ...

    def transform(self, v: Vector3) -> Vector3:
        """Rotate a vector."""
        ...

    def inverse(self) -> Self:
        """Inverse rotation."""
        ...

    def to_euler(self, axis0: int = 2, axis1: int = 1, axis2: int = 0) -> Vector3:
        """Euler angles about the given axis sequence."""
        ...


@runtime_checkable
class Transform3(Protocol):
    """Protocol for 3D homogeneous transforms (Isometry3, Affine3)."""

    def concatenate(self, other: Self) -> Self:
        """Transform applying other first, then self."""
        ...

    def transform(self, v: Vector3) -> Vector3:
        """Map a point."""
        ...

    def inverse(self) -> Self:
        """Inverse transform."""
        ...

    def prerotate(self, rotation) -> Self: ...

    def pretranslate(self, offset: Vector3) -> Self: ...


@runtime_checkable
class BinarySerializable(Protocol):
    """Protocol for types with a binary encoding in :mod:`geocore.codec`."""

    def to_bytes(self) -> bytes:
        """Serialize to bytes."""
        ...

    @classmethod
    def from_bytes(cls, payload: bytes) -> Self:
        """Deserialize from bytes."""
        ...
