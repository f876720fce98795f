"""Dense real matrices: fixed 4x4 and arbitrary size.

Flattening defaults to column-major order (consecutive values belong to the
same column), the order used by the serialized layouts.
"""

from __future__ import annotations

import numpy as np

from geocore.config import TOLERANCE_CONFIG
from geocore.errors import SizeMismatchError
from geocore.linalg.vector import VectorX
from geocore.utils import ArrayLike, approx_fields, as_float_array, is_scalar


def _flatten(data: np.ndarray, column_major: bool) -> list[float]:
    order = "F" if column_major else "C"
    return data.ravel(order=order).tolist()


class Matrix4:
    """4x4 matrix. A new matrix is all zeros.

    Example:
        >>> m = Matrix4.from_array(range(16))
        >>> m[1, 0]
        1.0
    """

    __slots__ = ("_data",)

    rows = 4
    cols = 4
    size = 16

    def __init__(self):
        self._data = np.zeros((4, 4), dtype=np.float64)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Matrix4:
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def identity(cls) -> Matrix4:
        return cls._wrap(np.eye(4, dtype=np.float64))

    @classmethod
    def zero(cls) -> Matrix4:
        return cls()

    @classmethod
    def from_array(cls, values: ArrayLike, column_major: bool = True) -> Matrix4:
        """Create a matrix from at most 16 values.

        :param values: Flat values; missing trailing values are filled with 0
        :param column_major: If True, consecutive values fill a column
        :raises SizeMismatchError: If more than 16 values are given
        """
        m = cls()
        m.assign(values, column_major)
        return m

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self._data[row, col] = value

    def to_list(self, column_major: bool = True) -> list[float]:
        """Return the 16 values flattened.

        :param column_major: If True, the values of a column are adjacent,
            if not the values of a row are
        """
        return _flatten(self._data, column_major)

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def assign(self, values: ArrayLike, column_major: bool = True) -> None:
        """Set the matrix from a flat array of at most 16 values."""
        arr = as_float_array(values)
        if arr.shape[0] > 16:
            raise SizeMismatchError("array should be of size maximum 16")
        padded = np.zeros(16, dtype=np.float64)
        padded[: arr.shape[0]] = arr
        order = "F" if column_major else "C"
        self._data[:, :] = padded.reshape((4, 4), order=order)

    def copy(self) -> Matrix4:
        return Matrix4._wrap(self._data.copy())

    @property
    def T(self) -> Matrix4:
        """Transposed copy."""
        return Matrix4._wrap(self._data.T.copy())

    def norm(self) -> float:
        """Frobenius norm."""
        return float(np.linalg.norm(self._data))

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4._wrap(self._data + other._data)

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4._wrap(self._data - other._data)

    def __neg__(self) -> Matrix4:
        return Matrix4._wrap(-self._data)

    def __mul__(self, scalar: float) -> Matrix4:
        if not is_scalar(scalar):
            return NotImplemented
        return Matrix4._wrap(self._data * float(scalar))

    def __rmul__(self, scalar: float) -> Matrix4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Matrix4:
        if not is_scalar(scalar):
            return NotImplemented
        return Matrix4._wrap(self._data / float(scalar))

    def dot(self, other: Matrix4) -> Matrix4:
        """Matrix product self * other."""
        return Matrix4._wrap(self._data @ other._data)

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self.dot(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def approx(self, other: Matrix4, tolerance: float | None = None) -> bool:
        """Per-entry absolute comparison."""
        tol = TOLERANCE_CONFIG.approx.resolve(tolerance)
        if not isinstance(other, Matrix4):
            return False
        return approx_fields(self._data, other._data, tol)

    def to_bytes(self) -> bytes:
        from geocore.codec import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, payload: bytes) -> Matrix4:
        from geocore.codec import decode

        return decode(cls, payload)

    def __reduce__(self):
        from geocore.codec import decode, encode

        return (decode, (type(self), encode(self)))

    def __repr__(self) -> str:
        lines = [" ".join(f"{v:g}" for v in row) for row in self._data.tolist()]
        return "Matrix4(" + "\n        ".join(lines) + ")"


class MatrixX:
    """Arbitrary-size matrix.

    :meth:`resize` allocates a new zero-filled store; use
    :meth:`conservative_resize` to keep the overlapping block.
    """

    __slots__ = ("_data",)

    def __init__(self, rows: int = 0, cols: int = 0):
        self._data = np.zeros((int(rows), int(cols)), dtype=np.float64)

    @classmethod
    def _wrap(cls, data: np.ndarray) -> MatrixX:
        m = cls.__new__(cls)
        m._data = data
        return m

    @classmethod
    def zero(cls, rows: int, cols: int) -> MatrixX:
        return cls(rows, cols)

    @classmethod
    def identity(cls, n: int) -> MatrixX:
        return cls._wrap(np.eye(int(n), dtype=np.float64))

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> MatrixX:
        """Create a matrix from a 2D array (copied)."""
        data = np.array(array, dtype=np.float64, ndmin=2)
        if data.ndim != 2:
            raise SizeMismatchError(f"MatrixX expects a 2D array, got {data.ndim}D")
        return cls._wrap(data)

    @classmethod
    def from_array(
        cls,
        values: ArrayLike,
        rows: int | None = None,
        cols: int | None = None,
        column_major: bool = True,
    ) -> MatrixX:
        """Create a matrix from flat values. See :meth:`assign`."""
        m = cls()
        m.assign(values, rows, cols, column_major)
        return m

    @property
    def rows(self) -> int:
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        return int(self._data.shape[1])

    @property
    def size(self) -> int:
        return int(self._data.size)

    def resize(self, rows: int, cols: int) -> None:
        """Resize to rows x cols. Previous contents are not kept."""
        self._data = np.zeros((int(rows), int(cols)), dtype=np.float64)

    def conservative_resize(self, rows: int, cols: int) -> None:
        """Resize keeping the overlapping top-left block; new entries are zero."""
        data = np.zeros((int(rows), int(cols)), dtype=np.float64)
        r = min(self.rows, data.shape[0])
        c = min(self.cols, data.shape[1])
        data[:r, :c] = self._data[:r, :c]
        self._data = data

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = index
        self._data[row, col] = value

    def row(self, i: int) -> VectorX:
        return VectorX._wrap(self._data[i, :].copy())

    def set_row(self, i: int, v: VectorX) -> None:
        if v.size != self.cols:
            raise SizeMismatchError(f"row of size {v.size} does not fit {self.cols} columns")
        self._data[i, :] = v._data

    def col(self, j: int) -> VectorX:
        return VectorX._wrap(self._data[:, j].copy())

    def set_col(self, j: int, v: VectorX) -> None:
        if v.size != self.rows:
            raise SizeMismatchError(f"column of size {v.size} does not fit {self.rows} rows")
        self._data[:, j] = v._data

    def to_list(self, column_major: bool = True) -> list[float]:
        return _flatten(self._data, column_major)

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    def assign(
        self,
        values: ArrayLike,
        rows: int | None = None,
        cols: int | None = None,
        column_major: bool = True,
    ) -> None:
        """Resize, then fill from a flat array.

        Shape resolution:
        - rows and cols given: used as is
        - only rows given: cols = len(values) // rows
        - only cols given: rows = len(values) // cols
        - neither: current shape

        Entries not covered by values are zero.

        :raises SizeMismatchError: If values holds more than rows * cols elements
        """
        arr = as_float_array(values)
        n = arr.shape[0]
        if rows is None and cols is None:
            rows, cols = self.rows, self.cols
        elif cols is None:
            cols = n // rows if rows else 0
        elif rows is None:
            rows = n // cols if cols else 0

        if n > rows * cols:
            raise SizeMismatchError(f"{n} values do not fit a {rows}x{cols} matrix")

        padded = np.zeros(rows * cols, dtype=np.float64)
        padded[:n] = arr
        order = "F" if column_major else "C"
        self._data = padded.reshape((rows, cols), order=order).copy()

    def copy(self) -> MatrixX:
        return MatrixX._wrap(self._data.copy())

    @property
    def T(self) -> MatrixX:
        return MatrixX._wrap(self._data.T.copy())

    def norm(self) -> float:
        """Frobenius norm."""
        return float(np.linalg.norm(self._data))

    def _check_shape(self, other: MatrixX) -> None:
        if self._data.shape != other._data.shape:
            raise SizeMismatchError(
                f"MatrixX shape mismatch: {self._data.shape} vs {other._data.shape}"
            )

    def __add__(self, other: MatrixX) -> MatrixX:
        if not isinstance(other, MatrixX):
            return NotImplemented
        self._check_shape(other)
        return MatrixX._wrap(self._data + other._data)

    def __sub__(self, other: MatrixX) -> MatrixX:
        if not isinstance(other, MatrixX):
            return NotImplemented
        self._check_shape(other)
        return MatrixX._wrap(self._data - other._data)

    def __neg__(self) -> MatrixX:
        return MatrixX._wrap(-self._data)

    def __mul__(self, scalar: float) -> MatrixX:
        if not is_scalar(scalar):
            return NotImplemented
        return MatrixX._wrap(self._data * float(scalar))

    def __rmul__(self, scalar: float) -> MatrixX:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> MatrixX:
        if not is_scalar(scalar):
            return NotImplemented
        return MatrixX._wrap(self._data / float(scalar))

    def dot_vector(self, v: VectorX) -> VectorX:
        """Matrix-vector product."""
        if v.size != self.cols:
            raise SizeMismatchError(f"cannot multiply {self.rows}x{self.cols} by size {v.size}")
        return VectorX._wrap(self._data @ v._data)

    def dot_matrix(self, other: MatrixX) -> MatrixX:
        """Matrix product self * other."""
        if other.rows != self.cols:
            raise SizeMismatchError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        return MatrixX._wrap(self._data @ other._data)

    def __matmul__(self, other: MatrixX | VectorX) -> MatrixX | VectorX:
        if isinstance(other, MatrixX):
            return self.dot_matrix(other)
        if isinstance(other, VectorX):
            return self.dot_vector(other)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatrixX):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def approx(self, other: MatrixX, tolerance: float | None = None) -> bool:
        """Per-entry absolute comparison; different shapes never match."""
        tol = TOLERANCE_CONFIG.approx.resolve(tolerance)
        if not isinstance(other, MatrixX):
            return False
        return approx_fields(self._data, other._data, tol)

    def to_bytes(self) -> bytes:
        from geocore.codec import encode

        return encode(self)

    @classmethod
    def from_bytes(cls, payload: bytes) -> MatrixX:
        from geocore.codec import decode

        return decode(cls, payload)

    def __reduce__(self):
        from geocore.codec import decode, encode

        return (decode, (type(self), encode(self)))

    def __repr__(self) -> str:
        lines = [" ".join(repr(v) for v in row) for row in self._data.tolist()]
        return "MatrixX(\n" + "\n".join(lines) + "\n)"
