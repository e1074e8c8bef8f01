"""Tests for the fixed-size Vector and Matrix containers."""
from decimal import Decimal

import pytest

from linsys.containers import (
    IndexOutOfRangeError,
    InvalidSizeError,
    Matrix,
    SizeMismatchError,
    Vector,
)


class TestVector:

    @pytest.mark.parametrize("size", [1, 2, 7, 64])
    def test_new_vector_reads_default_at_every_index(self, size):
        vector = Vector(size)
        assert vector.size == size
        assert [vector.get(i) for i in range(size)] == [None] * size

        zeros = Vector(size, Decimal(0))
        assert all(zeros[i] == 0 for i in range(size))

    @pytest.mark.parametrize("size", [0, -1, -10])
    def test_non_positive_size_is_rejected(self, size):
        with pytest.raises(InvalidSizeError):
            Vector(size)

    def test_non_integer_size_is_rejected(self):
        with pytest.raises(InvalidSizeError):
            Vector(2.5)
        with pytest.raises(InvalidSizeError):
            Vector(True)

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_access_outside_bounds(self, index):
        vector = Vector(3, 0)
        with pytest.raises(IndexOutOfRangeError):
            vector.get(index)
        with pytest.raises(IndexOutOfRangeError):
            vector.set(index, 1)
        # IndexError keeps plain Python handling working.
        with pytest.raises(IndexError):
            vector[index]

    def test_copy_does_not_alias(self):
        source = Vector.from_values([1, 2, 3])
        duplicate = source.copy()
        assert duplicate == source

        duplicate[0] = 99
        assert source[0] == 1
        assert duplicate != source

    def test_fill(self):
        vector = Vector(4)
        vector.fill("0")
        assert vector.to_list() == ["0"] * 4

    def test_assign_copies_every_element(self):
        target = Vector(3, 0)
        source = Vector.from_values([4, 5, 6])
        target.assign(source)
        assert target.to_list() == [4, 5, 6]

        source[1] = 0
        assert target[1] == 5

    def test_assign_size_mismatch_leaves_target_untouched(self):
        target = Vector.from_values([1, 2, 3])
        with pytest.raises(SizeMismatchError):
            target.assign(Vector.from_values([9, 9]))
        assert target.to_list() == [1, 2, 3]

    def test_equality(self):
        assert Vector.from_values([Decimal("1.0"), 2]) == Vector.from_values([Decimal(1), 2])
        assert Vector.from_values([1, 2]) != Vector.from_values([1, 3])
        # Size mismatch compares unequal instead of raising.
        assert not Vector.from_values([1, 2]).equals(Vector.from_values([1, 2, 3]))
        assert Vector.from_values([1]) != [1]

    def test_from_values_requires_at_least_one_value(self):
        with pytest.raises(InvalidSizeError):
            Vector.from_values([])

    def test_str_format(self):
        assert str(Vector.from_values(["a", "b"])) == "< 2 {[a][b]} >"


class TestMatrix:

    def test_rectangular_dimensions(self):
        matrix = Matrix(2, 3, 0)
        assert matrix.row_count == 2
        assert matrix.column_count == 3
        assert matrix.diagonal_length == 2
        assert Matrix(4, 2).diagonal_length == 2

    def test_square(self):
        matrix = Matrix.square(3, Decimal(0))
        assert matrix.shape == (3, 3)
        assert matrix.diagonal_length == 3
        assert all(value == 0 for row in matrix for value in row)

    @pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (-1, 2), (2, -5)])
    def test_non_positive_dimensions(self, rows, columns):
        with pytest.raises(InvalidSizeError):
            Matrix(rows, columns)

    def test_rows_are_independent(self):
        matrix = Matrix(2, 2, 0)
        matrix.set(0, 0, 5)
        assert matrix.get(1, 0) == 0

    def test_element_access_errors_propagate(self):
        matrix = Matrix(2, 2, 0)
        with pytest.raises(IndexOutOfRangeError):
            matrix.get(2, 0)
        with pytest.raises(IndexOutOfRangeError):
            matrix.set(0, 2, 1)

    def test_from_rows(self):
        matrix = Matrix.from_rows([[2, 1, 5], [1, -1, 1]])
        assert matrix.to_lists() == [[2, 1, 5], [1, -1, 1]]

        with pytest.raises(SizeMismatchError):
            Matrix.from_rows([[1, 2], [3]])
        with pytest.raises(InvalidSizeError):
            Matrix.from_rows([])

    def test_copy_is_deep(self):
        original = Matrix.from_rows([[1, 2], [3, 4]])
        duplicate = original.copy()
        assert duplicate.equals(original)

        duplicate.set(1, 1, 40)
        duplicate.get_row(0).fill(0)
        assert original.to_lists() == [[1, 2], [3, 4]]

    def test_get_row_returns_owned_row(self):
        matrix = Matrix.from_rows([[1, 2], [3, 4]])
        row = matrix.get_row(0)
        row[0] = 10
        assert matrix.get(0, 0) == 10

    def test_get_column(self):
        matrix = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        assert matrix.get_column(2).to_list() == [3, 6]
        with pytest.raises(IndexOutOfRangeError):
            matrix.get_column(3)

    def test_set_row_keeps_row_identity(self):
        matrix = Matrix.from_rows([[1, 2], [3, 4]])
        row = matrix.get_row(1)
        replacement = Vector.from_values([7, 8])
        matrix.set_row(1, replacement)

        assert matrix.get_row(1) is row
        assert row.to_list() == [7, 8]
        replacement[0] = 0
        assert matrix.get(1, 0) == 7

    def test_set_row_size_mismatch_never_partially_mutates(self):
        matrix = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
        for values in ([9, 9], [9, 9, 9, 9]):
            with pytest.raises(SizeMismatchError):
                matrix.set_row(0, Vector.from_values(values))
        assert matrix.to_lists() == [[1, 2, 3], [4, 5, 6]]

    def test_assign_and_fill(self):
        target = Matrix(2, 2, 0)
        target.assign(Matrix.from_rows([[1, 2], [3, 4]]))
        assert target.to_lists() == [[1, 2], [3, 4]]

        with pytest.raises(SizeMismatchError):
            target.assign(Matrix(3, 2, 0))

        target.fill("x")
        assert target.to_lists() == [["x", "x"], ["x", "x"]]

    def test_equality(self):
        a = Matrix.from_rows([[Decimal("2.0"), 1], [0, 1]])
        b = Matrix.from_rows([[2, 1], [0, 1]])
        assert a == b
        assert a != Matrix.from_rows([[2, 1, 0], [0, 1, 0]])
        b.set(1, 1, 2)
        assert not a.equals(b)

    def test_str_format(self):
        matrix = Matrix.from_rows([[1, 2], [3, 4]])
        assert str(matrix) == "< 2 {[< 2 {[1][2]} >][< 2 {[3][4]} >]} >"
