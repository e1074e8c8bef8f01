"""Conversion between editor text cells and decimal matrices."""
from __future__ import annotations

import decimal
import logging
from decimal import Decimal
from typing import Any, List, Optional, Sequence

from .containers import InvalidSizeError, Matrix, SizeMismatchError
from .precision import PrecisionPolicy

LOG = logging.getLogger(__name__)

# Quantizing never needs to round to significant digits, only to places.
_QUANTIZE_CONTEXT = decimal.Context(prec=decimal.MAX_PREC)

Cells = List[List[str]]


class CellParseError(ValueError):
    """Raised when a text cell cannot be read as a finite decimal number."""

    def __init__(self, text: str, row: Optional[int] = None, column: Optional[int] = None) -> None:
        location = f" at ({row}, {column})" if row is not None and column is not None else ""
        super().__init__(f"Cell{location} is not a number: {text!r}")
        self.text = text
        self.row = row
        self.column = column


def blank_cells(rows: int, columns: int) -> Cells:
    """Return a ``rows x columns`` grid of ``"0"`` cells for a new matrix."""

    for value in (rows, columns):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidSizeError(f"invalid size : {rows} x {columns}")
    return [["0"] * columns for _ in range(rows)]


def quantize(value: Decimal, scale: int, policy: PrecisionPolicy) -> Decimal:
    """Round ``value`` to ``scale`` digits after the decimal point."""

    if scale < 0:
        raise ValueError(f"Scale must not be negative; received {scale}")
    exponent = Decimal(1).scaleb(-scale)
    return value.quantize(exponent, rounding=policy.rounding.value, context=_QUANTIZE_CONTEXT)


def parse_cell(text: Any, policy: PrecisionPolicy, scale: Optional[int] = None) -> Decimal:
    """Read one editor cell as a decimal.

    The text is rounded to the policy's precision first and then, when
    ``scale`` is given, to ``scale`` places.  Blank cells read as zero.
    """

    raw = "" if text is None else str(text).strip()
    if not raw:
        return Decimal(0)
    try:
        value = policy.context.create_decimal(raw)
    except decimal.InvalidOperation:
        raise CellParseError(raw) from None
    if not value.is_finite():
        raise CellParseError(raw)
    if scale is not None:
        quantized = quantize(value, scale, policy)
        if quantized != value:
            LOG.warning("Cell %r rounded to %s at scale %d", raw, quantized, scale)
        value = quantized
    return value


def cells_to_matrix(
    cells: Sequence[Sequence[Any]],
    policy: PrecisionPolicy,
    scale: Optional[int] = None,
) -> Matrix[Decimal]:
    """Build a decimal matrix from rows of text cells."""

    if not cells or not cells[0]:
        raise InvalidSizeError("invalid size : empty cell grid")
    column_count = len(cells[0])
    matrix: Matrix[Decimal] = Matrix(len(cells), column_count, Decimal(0))
    for row_index, row in enumerate(cells):
        if len(row) != column_count:
            raise SizeMismatchError(f"Row {row_index} has {len(row)} cells; expected {column_count}")
        for column_index, text in enumerate(row):
            try:
                matrix.set(row_index, column_index, parse_cell(text, policy, scale))
            except CellParseError as exc:
                LOG.warning("Rejected cell (%d, %d): %r", row_index, column_index, exc.text)
                raise CellParseError(exc.text, row_index, column_index) from None
    return matrix


def format_value(value: Any, policy: PrecisionPolicy, scale: Optional[int] = None) -> str:
    if value is None:
        return ""
    if not isinstance(value, Decimal):
        return str(value)
    if scale is not None:
        value = quantize(value, scale, policy)
    if value == 0:
        # Drop the sign of -0 / -0.0000 but keep the scale.
        value = value.copy_abs()
    return format(value, "f")


def matrix_to_cells(matrix: Matrix[Any], policy: PrecisionPolicy, scale: Optional[int] = None) -> Cells:
    """Render a matrix back to editor text cells."""

    return [[format_value(value, policy, scale) for value in row] for row in matrix]


__all__ = [
    "CellParseError",
    "Cells",
    "blank_cells",
    "cells_to_matrix",
    "format_value",
    "matrix_to_cells",
    "parse_cell",
    "quantize",
]
