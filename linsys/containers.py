"""Fixed-size vector and matrix containers used by the elimination engine."""
from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Sequence, TypeVar

T = TypeVar("T")


class InvalidSizeError(ValueError):
    """Raised when a container is constructed with a non-positive dimension."""


class IndexOutOfRangeError(IndexError):
    """Raised when an element or row is accessed outside the container bounds."""


class SizeMismatchError(ValueError):
    """Raised when a bulk assignment receives a container of a different size."""


def _validate_dimension(size: Any) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidSizeError(f"invalid size : {size}")
    return size


class Vector(Generic[T]):
    """A fixed-length, bounds-checked sequence of ``size`` elements.

    Every slot starts out holding ``default``.  Copies are element-wise, so a
    copied vector never shares storage with its source.
    """

    __slots__ = ("_data",)

    def __init__(self, size: int, default: T = None) -> None:  # type: ignore[assignment]
        self._data: List[T] = [default] * _validate_dimension(size)

    @classmethod
    def from_values(cls, values: Iterable[T]) -> "Vector[T]":
        items = list(values)
        vector: Vector[T] = cls(len(items))
        vector._data[:] = items
        return vector

    def copy(self) -> "Vector[T]":
        return Vector.from_values(self._data)

    @property
    def size(self) -> int:
        return len(self._data)

    def _validate_index(self, index: Any) -> int:
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._data):
            raise IndexOutOfRangeError(f"invalid index : [{index}]")
        return index

    def get(self, index: int) -> T:
        return self._data[self._validate_index(index)]

    def set(self, index: int, value: T) -> None:
        self._data[self._validate_index(index)] = value

    def fill(self, value: T) -> None:
        """Assign ``value`` to every slot without reallocating."""

        for index in range(len(self._data)):
            self._data[index] = value

    def assign(self, source: "Vector[T]") -> None:
        """Copy every element of ``source`` into this vector.

        ``SizeMismatchError`` is raised before anything is written when the two
        vectors differ in size.
        """

        if source.size != self.size:
            raise SizeMismatchError(f"invalid size : {source.size} != {self.size}")
        for index, value in enumerate(list(source)):
            self._data[index] = value

    def equals(self, other: "Vector[Any]") -> bool:
        if self.size != other.size:
            return False
        return all(a == b for a, b in zip(self._data, other._data))

    def to_list(self) -> List[T]:
        return list(self._data)

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._data!r})"

    def __str__(self) -> str:
        cells = "".join(f"[{value}]" for value in self._data)
        return f"< {self.size} {{{cells}}} >"


class Matrix(Generic[T]):
    """A rectangular grid stored as a vector of row vectors.

    The matrix owns its rows: :meth:`set_row` and :meth:`assign` copy values
    into the existing row vectors and never rebind them.  ``diagonal_length``
    is ``min(row_count, column_count)`` and is fixed at construction.
    """

    __slots__ = ("_rows", "_column_count", "_diagonal_length")

    def __init__(self, row_count: int, column_count: int, default: T = None) -> None:  # type: ignore[assignment]
        _validate_dimension(row_count)
        _validate_dimension(column_count)
        self._rows: Vector[Vector[T]] = Vector(row_count)
        for index in range(row_count):
            self._rows.set(index, Vector(column_count, default))
        self._column_count = column_count
        self._diagonal_length = min(row_count, column_count)

    @classmethod
    def square(cls, size: int, default: T = None) -> "Matrix[T]":  # type: ignore[assignment]
        return cls(size, size, default)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Matrix[T]":
        """Build a matrix from nested sequences, e.g. ``[[2, 1, 5], [1, -1, 1]]``."""

        rows = [list(row) for row in rows]
        if not rows or not rows[0]:
            raise InvalidSizeError(f"invalid size : {len(rows)} x {len(rows[0]) if rows else 0}")
        column_count = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != column_count:
                raise SizeMismatchError(
                    f"Row {index} has {len(row)} columns; expected {column_count}"
                )
        matrix: Matrix[T] = cls(len(rows), column_count)
        for index, row in enumerate(rows):
            matrix.set_row(index, Vector.from_values(row))
        return matrix

    def copy(self) -> "Matrix[T]":
        duplicate: Matrix[T] = Matrix(self.row_count, self._column_count)
        duplicate.assign(self)
        return duplicate

    @property
    def row_count(self) -> int:
        return self._rows.size

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def diagonal_length(self) -> int:
        return self._diagonal_length

    @property
    def shape(self) -> tuple:
        return self.row_count, self._column_count

    def get(self, row: int, column: int) -> T:
        return self._rows.get(row).get(column)

    def set(self, row: int, column: int, value: T) -> None:
        self._rows.get(row).set(column, value)

    def get_row(self, index: int) -> Vector[T]:
        """Return the row vector owned by this matrix (not a copy)."""

        return self._rows.get(index)

    def get_column(self, index: int) -> Vector[T]:
        """Return a new vector holding the values of column ``index``."""

        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < self._column_count:
            raise IndexOutOfRangeError(f"invalid index : [{index}]")
        return Vector.from_values(row.get(index) for row in self._rows)

    def set_row(self, index: int, values: Vector[T]) -> None:
        self._rows.get(index).assign(values)

    def fill(self, value: T) -> None:
        for row in self._rows:
            row.fill(value)

    def assign(self, source: "Matrix[T]") -> None:
        if source.shape != self.shape:
            raise SizeMismatchError(
                f"invalid size : {source.row_count} x {source.column_count} != "
                f"{self.row_count} x {self.column_count}"
            )
        for index in range(self.row_count):
            self.set_row(index, source.get_row(index))

    def equals(self, other: "Matrix[Any]") -> bool:
        if self.shape != other.shape:
            return False
        return all(mine.equals(theirs) for mine, theirs in zip(self._rows, other._rows))

    def to_lists(self) -> List[List[T]]:
        return [row.to_list() for row in self._rows]

    def __iter__(self) -> Iterator[Vector[T]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_lists()!r})"

    def __str__(self) -> str:
        return str(self._rows)


__all__ = [
    "IndexOutOfRangeError",
    "InvalidSizeError",
    "Matrix",
    "SizeMismatchError",
    "Vector",
]
