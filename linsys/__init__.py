"""Core interfaces for the linsys exact decimal equation solver."""

from .containers import IndexOutOfRangeError, InvalidSizeError, Matrix, SizeMismatchError, Vector
from .precision import PrecisionPolicy, RoundingMode, normalize_rounding
from .linalg import (
    DivisionByZeroError,
    divide_row,
    divide_row_all,
    interchange_rows,
    multiply_row,
    multiply_row_all,
    replace_row,
    replace_row_all,
    solution_vector,
    solve,
    unresolved_pivots,
)
from .inputs import CellParseError, cells_to_matrix, matrix_to_cells
from .config import DestinationNotFoundError, MatrixDocument, deserialize, load_document, serialize
from .examples import two_by_two_example, zero_pivot_example

__all__ = [
    "CellParseError",
    "DestinationNotFoundError",
    "DivisionByZeroError",
    "IndexOutOfRangeError",
    "InvalidSizeError",
    "Matrix",
    "MatrixDocument",
    "PrecisionPolicy",
    "RoundingMode",
    "SizeMismatchError",
    "Vector",
    "cells_to_matrix",
    "deserialize",
    "divide_row",
    "divide_row_all",
    "interchange_rows",
    "load_document",
    "matrix_to_cells",
    "multiply_row",
    "multiply_row_all",
    "normalize_rounding",
    "replace_row",
    "replace_row_all",
    "serialize",
    "solution_vector",
    "solve",
    "unresolved_pivots",
    "two_by_two_example",
    "zero_pivot_example",
]
