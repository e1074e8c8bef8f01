"""Gauss-Jordan elimination and row operations over decimal matrices."""
from __future__ import annotations

from decimal import Decimal
from typing import Any

from .containers import IndexOutOfRangeError, Matrix, Vector
from .precision import PrecisionPolicy

_ZERO = Decimal(0)


class DivisionByZeroError(ZeroDivisionError):
    """Raised when a row is divided by a value that compares equal to zero."""


def _canonical(value: Decimal) -> Decimal:
    # -0, 0E-10 and 0.000 all collapse to the same representation.
    return _ZERO if value == _ZERO else value


def _validate_divisor(divisor: Any) -> None:
    if divisor == _ZERO:
        raise DivisionByZeroError("division by zero")


def _validate_start(matrix: Matrix[Decimal], from_column: int) -> None:
    if isinstance(from_column, bool) or not isinstance(from_column, int) or not 0 <= from_column < matrix.column_count:
        raise IndexOutOfRangeError(f"invalid index : [{from_column}]")


def _is_zero(value: Any) -> bool:
    return value == _ZERO


def solve(matrix: Matrix[Decimal], policy: PrecisionPolicy, *, pivoting: bool = False) -> None:
    """Reduce ``matrix`` in place to reduced row-echelon form.

    Every division, multiplication and addition is carried out under
    ``policy``.  The forward pass normalizes each pivot and clears the column
    below it; the backward pass clears the column above.

    With ``pivoting`` disabled a zero on the diagonal skips that column
    entirely, even if a usable pivot exists further down, so such a column is
    left unresolved.  With ``pivoting`` enabled the forward pass first swaps in
    the row at or below the diagonal holding the largest absolute value in
    that column.
    """

    diagonal_length = matrix.diagonal_length
    row_count = matrix.row_count

    for i in range(diagonal_length):
        if pivoting:
            pivot_row = max(range(i, row_count), key=lambda r: abs(matrix.get(r, i)))
            if pivot_row != i and not _is_zero(matrix.get(pivot_row, i)):
                interchange_rows(matrix, i, pivot_row)
        if _is_zero(matrix.get(i, i)):
            continue
        divide_row(matrix, i, i, matrix.get(i, i), policy)
        for j in range(i + 1, row_count):
            if _is_zero(matrix.get(j, i)):
                continue
            replace_row(matrix, i, j, i, matrix.get(j, i).copy_negate(), policy)

    for i in range(diagonal_length - 1, -1, -1):
        if _is_zero(matrix.get(i, i)):
            continue
        divide_row(matrix, i, i, matrix.get(i, i), policy)
        for j in range(i - 1, -1, -1):
            if _is_zero(matrix.get(j, i)):
                continue
            replace_row(matrix, i, j, i, matrix.get(j, i).copy_negate(), policy)


def interchange_rows(matrix: Matrix[Any], row_a: int, row_b: int) -> None:
    """Swap two rows by value; the row vectors themselves stay in place."""

    first = matrix.get_row(row_a)
    second = matrix.get_row(row_b)
    saved = first.copy()
    first.assign(second)
    second.assign(saved)


def multiply_row(
    matrix: Matrix[Decimal],
    row_index: int,
    from_column: int,
    multiplier: Decimal,
    policy: PrecisionPolicy,
) -> None:
    """Multiply the elements of ``row_index`` from ``from_column`` rightward."""

    row = matrix.get_row(row_index)
    _validate_start(matrix, from_column)
    context = policy.context
    for column in range(from_column, row.size):
        row.set(column, _canonical(context.multiply(row.get(column), multiplier)))


def multiply_row_all(matrix: Matrix[Decimal], row_index: int, multiplier: Decimal, policy: PrecisionPolicy) -> None:
    multiply_row(matrix, row_index, 0, multiplier, policy)


def divide_row(
    matrix: Matrix[Decimal],
    row_index: int,
    from_column: int,
    divisor: Decimal,
    policy: PrecisionPolicy,
) -> None:
    """Divide the elements of ``row_index`` from ``from_column`` rightward.

    ``DivisionByZeroError`` is raised before the row is touched when
    ``divisor`` equals zero.
    """

    _validate_divisor(divisor)
    row = matrix.get_row(row_index)
    _validate_start(matrix, from_column)
    context = policy.context
    for column in range(from_column, row.size):
        row.set(column, _canonical(context.divide(row.get(column), divisor)))


def divide_row_all(matrix: Matrix[Decimal], row_index: int, divisor: Decimal, policy: PrecisionPolicy) -> None:
    divide_row(matrix, row_index, 0, divisor, policy)


def replace_row(
    matrix: Matrix[Decimal],
    source_row: int,
    target_row: int,
    from_column: int,
    multiplier: Decimal,
    policy: PrecisionPolicy,
) -> None:
    """Add ``multiplier`` times ``source_row`` to ``target_row``.

    Only columns from ``from_column`` rightward are updated.  The product and
    the sum are each rounded under ``policy``.
    """

    source = matrix.get_row(source_row)
    target = matrix.get_row(target_row)
    _validate_start(matrix, from_column)
    context = policy.context
    for column in range(from_column, matrix.column_count):
        product = context.multiply(source.get(column), multiplier)
        target.set(column, _canonical(context.add(target.get(column), product)))


def replace_row_all(
    matrix: Matrix[Decimal],
    source_row: int,
    target_row: int,
    multiplier: Decimal,
    policy: PrecisionPolicy,
) -> None:
    replace_row(matrix, source_row, target_row, 0, multiplier, policy)


def solution_vector(matrix: Matrix[Decimal]) -> Vector[Decimal]:
    """Return the right-hand column of a reduced augmented matrix."""

    return matrix.get_column(matrix.column_count - 1)


def unresolved_pivots(matrix: Matrix[Decimal]) -> list:
    """Diagonal positions that did not reduce to a leading one."""

    return [i for i in range(matrix.diagonal_length) if matrix.get(i, i) != 1]


__all__ = [
    "DivisionByZeroError",
    "divide_row",
    "divide_row_all",
    "interchange_rows",
    "multiply_row",
    "multiply_row_all",
    "replace_row",
    "replace_row_all",
    "solution_vector",
    "solve",
    "unresolved_pivots",
]
