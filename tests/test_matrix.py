"""Tests for Matrix4 and MatrixX.

Tests cover:
- Column-major and row-major flattening
- assign/from_array shape resolution and size errors
- Algebra, row/column access and resizing
"""

import numpy as np
import pytest

from geocore import Matrix4, MatrixX, SizeMismatchError, VectorX


class TestMatrix4:
    """Test Matrix4."""

    def test_new_matrix_is_zero(self):
        """Test a fresh Matrix4 is all zeros."""
        assert Matrix4().to_list() == [0.0] * 16
        assert Matrix4() == Matrix4.zero()

    def test_column_major_fill(self):
        """Test consecutive values fill a column by default."""
        m = Matrix4.from_array(range(16))
        assert m[1, 0] == 1.0
        assert m[0, 1] == 4.0
        assert m.to_list() == [float(i) for i in range(16)]

    def test_row_major_fill(self):
        """Test row-major fill and flatten."""
        m = Matrix4.from_array(range(16), column_major=False)
        assert m[0, 1] == 1.0
        assert m[1, 0] == 4.0
        assert m.to_list(column_major=False) == [float(i) for i in range(16)]
        assert m.to_list() == Matrix4.from_array(range(16)).T.to_list()

    def test_partial_fill_pads_with_zero(self):
        """Test missing trailing values are 0."""
        m = Matrix4.from_array([1, 2, 3])
        assert m[2, 0] == 3.0
        assert m[3, 3] == 0.0

    def test_thirteen_values(self):
        """Test 13 values fill entries 0-12 and leave 13-15 at 0."""
        m = Matrix4.from_array(range(1, 14))
        values = m.to_list()
        assert values[:13] == [float(i) for i in range(1, 14)]
        assert values[13:] == [0.0, 0.0, 0.0]
        assert m[0, 3] == 13.0
        assert m[1, 3] == 0.0

    def test_too_many_values(self):
        """Test more than 16 values raises."""
        with pytest.raises(SizeMismatchError, match="array should be of size maximum 16"):
            Matrix4.from_array(range(17))

    def test_set_get(self):
        """Test element assignment."""
        m = Matrix4()
        m[2, 3] = 7.5
        assert m[2, 3] == 7.5
        assert m.to_numpy()[2, 3] == 7.5

    def test_identity_product(self):
        """Test identity is neutral for the matrix product."""
        m = Matrix4.from_array(np.arange(16) * 0.5)
        assert Matrix4.identity() @ m == m
        assert m.dot(Matrix4.identity()) == m

    def test_arithmetic(self):
        """Test elementwise and scalar arithmetic."""
        m = Matrix4.from_array(range(16))
        assert (m + m) == m * 2
        assert (m - m) == Matrix4.zero()
        assert -m == m * -1
        assert (m / 2)[1, 0] == 0.5
        assert Matrix4.identity().norm() == 2.0

    def test_approx(self):
        """Test per-entry approximate equality."""
        a = Matrix4.identity()
        b = Matrix4.identity()
        b[0, 3] = 1e-13
        assert a != b
        assert a.approx(b)
        assert not a.approx(b, 1e-14)


class TestMatrixXAssign:
    """Test MatrixX.assign shape resolution."""

    def test_both_dimensions(self):
        """Test explicit rows and cols."""
        m = MatrixX.from_array(range(6), rows=2, cols=3)
        assert (m.rows, m.cols) == (2, 3)
        assert m[1, 0] == 1.0
        assert m[0, 1] == 2.0

    def test_rows_only(self):
        """Test cols is derived from rows."""
        m = MatrixX.from_array(range(6), rows=2)
        assert (m.rows, m.cols) == (2, 3)

    def test_cols_only(self):
        """Test rows is derived from cols."""
        m = MatrixX.from_array(range(6), cols=2)
        assert (m.rows, m.cols) == (3, 2)

    def test_current_shape(self):
        """Test the current shape is kept when no dimension is given."""
        m = MatrixX(2, 2)
        m.assign([1, 2, 3, 4])
        assert (m.rows, m.cols) == (2, 2)
        assert m[0, 1] == 3.0

    def test_padding(self):
        """Test uncovered entries are 0."""
        m = MatrixX.from_array([1, 2, 3], rows=2, cols=2)
        assert m[1, 1] == 0.0
        assert m[0, 1] == 3.0

    def test_row_major(self):
        """Test row-major assign."""
        m = MatrixX.from_array(range(6), rows=2, cols=3, column_major=False)
        assert m[0, 1] == 1.0
        assert m.to_list(column_major=False) == [float(i) for i in range(6)]

    def test_too_many_values(self):
        """Test more values than entries raises."""
        with pytest.raises(SizeMismatchError):
            MatrixX.from_array(range(7), rows=2, cols=3)

    @pytest.mark.parametrize("dims", [{"rows": 0}, {"cols": 0}])
    def test_zero_dimension_empty(self, dims):
        """Test an empty array with a zero dimension gives an empty matrix."""
        m = MatrixX.from_array([], **dims)
        assert (m.rows, m.cols) == (0, 0)
        assert m.to_list() == []

    @pytest.mark.parametrize("dims", [{"rows": 0}, {"cols": 0}])
    def test_zero_dimension_with_values(self, dims):
        """Test values cannot fit a matrix with a zero dimension."""
        with pytest.raises(SizeMismatchError):
            MatrixX.from_array([1.0], **dims)


class TestMatrixX:
    """Test MatrixX algebra and resizing."""

    def test_resize_discards(self):
        """Test resize gives a zero-filled store."""
        m = MatrixX.from_array(range(4), rows=2, cols=2)
        m.resize(3, 3)
        assert m == MatrixX.zero(3, 3)

    def test_conservative_resize_keeps_block(self):
        """Test conservative_resize keeps the overlapping block."""
        m = MatrixX.from_array([1, 2, 3, 4], rows=2, cols=2)
        m.conservative_resize(3, 1)
        assert (m.rows, m.cols) == (3, 1)
        assert m.to_list() == [1.0, 2.0, 0.0]

    def test_row_col(self):
        """Test row and column access."""
        m = MatrixX.from_array(range(6), rows=2, cols=3)
        assert m.row(1).to_list() == [1.0, 3.0, 5.0]
        assert m.col(2).to_list() == [4.0, 5.0]
        m.set_row(0, VectorX.from_array([7, 8, 9]))
        assert m.row(0).to_list() == [7.0, 8.0, 9.0]
        m.set_col(0, VectorX.from_array([-1, -2]))
        assert m.col(0).to_list() == [-1.0, -2.0]
        with pytest.raises(SizeMismatchError):
            m.set_row(0, VectorX.from_array([1, 2]))

    def test_products(self):
        """Test matrix-matrix and matrix-vector products."""
        a = MatrixX.from_array([1, 3, 2, 4], rows=2, cols=2)
        v = VectorX.from_array([1, 1])
        assert (a @ v).to_list() == [3.0, 7.0]
        assert a @ MatrixX.identity(2) == a
        np.testing.assert_array_equal((a @ a).to_numpy(), a.to_numpy() @ a.to_numpy())
        with pytest.raises(SizeMismatchError):
            a @ VectorX.from_array([1, 2, 3])
        with pytest.raises(SizeMismatchError):
            a @ MatrixX(3, 3)

    def test_shape_mismatch(self):
        """Test elementwise operations reject different shapes."""
        with pytest.raises(SizeMismatchError):
            MatrixX(2, 2) + MatrixX(2, 3)

    def test_transpose_and_norm(self):
        """Test transpose and Frobenius norm."""
        m = MatrixX.from_array(range(6), rows=2, cols=3)
        assert (m.T.rows, m.T.cols) == (3, 2)
        assert m.T[2, 1] == m[1, 2]
        assert MatrixX.from_array([3, 4], rows=1).norm() == 5.0

    def test_equality_requires_same_shape(self):
        """Test matrices of different shapes never compare equal."""
        assert MatrixX(2, 3) != MatrixX(3, 2)
        assert not MatrixX(2, 3).approx(MatrixX(3, 2), 1.0)
