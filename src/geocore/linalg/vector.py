"""Dense real vectors: fixed 3-component and arbitrary length.

Both types own a contiguous float64 numpy array. Equality (``==``) is exact
per field; use :meth:`Vector3.approx` / :meth:`VectorX.approx` for
tolerance-based comparisons.
"""

from __future__ import annotations

import math

import numpy as np

from geocore.config import TOLERANCE_CONFIG
from geocore.errors import SizeMismatchError
from geocore.utils import ArrayLike, approx_fields, as_float_array, is_scalar


class Vector3:
    """3-vector holding floating-point numbers.

    Example:
        >>> v = Vector3(1, 2, 3)
        >>> (v + Vector3.unit_x()).to_list()
        [2.0, 2.0, 3.0]
    """

    __slots__ = ("_data",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._data = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Vector3:
        """Build a vector that takes ownership of a float64 [3] array."""
        v = cls.__new__(cls)
        v._data = data
        return v

    # Factory methods

    @classmethod
    def zero(cls) -> Vector3:
        """Return the (0, 0, 0) vector."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls) -> Vector3:
        """Return the (1, 0, 0) unit vector."""
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls) -> Vector3:
        """Return the (0, 1, 0) unit vector."""
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls) -> Vector3:
        """Return the (0, 0, 1) unit vector."""
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, values: ArrayLike) -> Vector3:
        """Create a vector from exactly three values.

        :raises SizeMismatchError: If values does not hold exactly 3 elements
        """
        v = cls()
        v.assign(values)
        return v

    # Field access

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._data[0] = value

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._data[1] = value

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._data[2] = value

    @property
    def data(self) -> list[float]:
        """The [x, y, z] components."""
        return self.to_list()

    @data.setter
    def data(self, values: ArrayLike) -> None:
        self.assign(values)

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = value

    def __len__(self) -> int:
        return 3

    def __iter__(self):
        return iter(self.to_list())

    # Flattening

    def to_list(self) -> list[float]:
        """Return the [x, y, z] list."""
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        """Return a float64 [3] array copy."""
        return self._data.copy()

    def assign(self, values: ArrayLike) -> None:
        """Set all three components in place.

        :raises SizeMismatchError: If values does not hold exactly 3 elements
        """
        arr = as_float_array(values)
        if arr.shape[0] != 3:
            raise SizeMismatchError(f"Vector3 expects exactly 3 values, got {arr.shape[0]}")
        self._data[:] = arr

    def copy(self) -> Vector3:
        return Vector3._wrap(self._data.copy())

    # Arithmetic

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3._wrap(self._data + other._data)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3._wrap(self._data - other._data)

    def __neg__(self) -> Vector3:
        return Vector3._wrap(-self._data)

    def __mul__(self, scalar: float) -> Vector3:
        if not is_scalar(scalar):
            return NotImplemented
        return Vector3._wrap(self._data * float(scalar))

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector3:
        if not is_scalar(scalar):
            return NotImplemented
        return Vector3._wrap(self._data / float(scalar))

    def dot(self, other: Vector3) -> float:
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vector3) -> Vector3:
        """Return the cross product of self with other."""
        return Vector3._wrap(np.cross(self._data, other._data))

    def norm(self) -> float:
        """Euclidean norm."""
        return float(np.linalg.norm(self._data))

    def normalize(self) -> Vector3:
        """Return a unit vector with the direction of self.

        Undefined for the zero vector; guard with :meth:`norm` first.
        """
        return Vector3._wrap(self._data / np.linalg.norm(self._data))

    def normalize_inplace(self) -> None:
        """Make this vector unit-length."""
        self._data /= np.linalg.norm(self._data)

    # Angles

    def angle_to(self, v: Vector3) -> float:
        """Angle in the XY plane from self to v, in (-pi, pi]."""
        ret = math.atan2(v.y, v.x) - math.atan2(self.y, self.x)
        if ret > math.pi:
            ret -= 2 * math.pi
        if ret < -math.pi:
            ret += 2 * math.pi
        return ret

    def signed_angle_to(self, v: Vector3, axis: Vector3) -> float:
        """Signed angle between self and v, positive around axis.

        The rotation of the returned angle around axis brings self onto v.
        The acos argument is clamped to [-1, 1].
        """
        cos_angle = self.dot(v) / self.norm() / v.norm()
        unsigned = math.acos(max(-1.0, min(1.0, cos_angle)))
        if self.cross(v).dot(axis) > 0:
            return unsigned
        return -unsigned

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def approx(self, other: Vector3, tolerance: float | None = None) -> bool:
        """True if each coordinate differs from other's by at most tolerance."""
        tol = TOLERANCE_CONFIG.approx.resolve(tolerance)
        if not isinstance(other, Vector3):
            return False
        return approx_fields(self._data, other._data, tol)

    # Serialization

    def to_bytes(self) -> bytes:
        from geocore.codec import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, payload: bytes) -> Vector3:
        from geocore.codec import decode

        return decode(cls, payload)

    def __reduce__(self):
        from geocore.codec import decode, encode

        return (decode, (type(self), encode(self)))

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


class VectorX:
    """Arbitrary-size vector.

    The length only changes through :meth:`resize`,
    :meth:`conservative_resize` or the implicit resize of :meth:`assign`.
    """

    __slots__ = ("_data",)

    def __init__(self, size: int = 0):
        self._data = np.zeros(int(size), dtype=np.float64)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> VectorX:
        v = cls.__new__(cls)
        v._data = data
        return v

    @classmethod
    def zero(cls, size: int) -> VectorX:
        return cls(size)

    @classmethod
    def from_array(cls, values: ArrayLike) -> VectorX:
        """Create a vector holding values, sized to their count."""
        v = cls()
        v.assign(values)
        return v

    @property
    def size(self) -> int:
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self.size

    def resize(self, size: int) -> None:
        """Resize to size elements. Previous contents are not kept."""
        self._data = np.zeros(int(size), dtype=np.float64)

    def conservative_resize(self, size: int) -> None:
        """Resize keeping the leading elements; new elements are zero."""
        data = np.zeros(int(size), dtype=np.float64)
        n = min(self.size, data.shape[0])
        data[:n] = self._data[:n]
        self._data = data

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = value

    def __iter__(self):
        return iter(self.to_list())

    def to_list(self) -> list[float]:
        return self._data.tolist()

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def assign(self, values: ArrayLike) -> None:
        """Resize to len(values) and copy values in."""
        arr = as_float_array(values)
        self.resize(arr.shape[0])
        self._data[:] = arr

    def copy(self) -> VectorX:
        return VectorX._wrap(self._data.copy())

    def _check_size(self, other: VectorX) -> None:
        if other.size != self.size:
            raise SizeMismatchError(f"VectorX size mismatch: {self.size} vs {other.size}")

    def __add__(self, other: VectorX) -> VectorX:
        if not isinstance(other, VectorX):
            return NotImplemented
        self._check_size(other)
        return VectorX._wrap(self._data + other._data)

    def __sub__(self, other: VectorX) -> VectorX:
        if not isinstance(other, VectorX):
            return NotImplemented
        self._check_size(other)
        return VectorX._wrap(self._data - other._data)

    def __neg__(self) -> VectorX:
        return VectorX._wrap(-self._data)

    def __mul__(self, scalar: float) -> VectorX:
        if not is_scalar(scalar):
            return NotImplemented
        return VectorX._wrap(self._data * float(scalar))

    def __rmul__(self, scalar: float) -> VectorX:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> VectorX:
        if not is_scalar(scalar):
            return NotImplemented
        return VectorX._wrap(self._data / float(scalar))

    def dot(self, other: VectorX) -> float:
        self._check_size(other)
        return float(np.dot(self._data, other._data))

    def norm(self) -> float:
        return float(np.linalg.norm(self._data))

    def normalize(self) -> VectorX:
        """Return a unit-length copy. Undefined for the zero vector."""
        return VectorX._wrap(self._data / np.linalg.norm(self._data))

    def normalize_inplace(self) -> None:
        self._data /= np.linalg.norm(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, VectorX):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def approx(self, other: VectorX, tolerance: float | None = None) -> bool:
        """Per-element absolute comparison; vectors of different size never match."""
        tol = TOLERANCE_CONFIG.approx.resolve(tolerance)
        if not isinstance(other, VectorX):
            return False
        return approx_fields(self._data, other._data, tol)

    def to_bytes(self) -> bytes:
        from geocore.codec import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, payload: bytes) -> VectorX:
        from geocore.codec import decode

        return decode(cls, payload)

    def __reduce__(self):
        from geocore.codec import decode, encode

        return (decode, (type(self), encode(self)))

    def __repr__(self) -> str:
        return "VectorX(" + " ".join(repr(v) for v in self.to_list()) + ")"
