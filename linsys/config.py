"""Serialization helpers for matrices and editor documents."""
from __future__ import annotations

import json
import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Union

from .containers import Matrix, Vector
from .inputs import Cells, blank_cells, cells_to_matrix, matrix_to_cells
from .precision import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    DEFAULT_SCALE,
    PrecisionPolicy,
    RoundingMode,
    normalize_rounding,
)

LOG = logging.getLogger(__name__)

SCHEMA_VERSION = 1

_JSONSource = Union[str, Path, IO[str]]
Persistable = Union[Vector[Any], Matrix[Any], "MatrixDocument"]


class DestinationNotFoundError(FileNotFoundError):
    """Raised when reading from a path that does not exist."""


def _element_type(values: List[Any]) -> str:
    if values and all(isinstance(value, Decimal) for value in values):
        return "decimal"
    return "json"


def _encode_value(value: Any) -> Any:
    # Decimals in a mixed grid are tagged so they come back as decimals.
    if isinstance(value, Decimal):
        return {"decimal": str(value)}
    return value


def _decode_value(value: Any) -> Any:
    if isinstance(value, dict) and set(value) == {"decimal"}:
        return Decimal(str(value["decimal"]))
    return value


def _encode_values(values: List[Any], element_type: str) -> List[Any]:
    if element_type == "decimal":
        return [str(value) for value in values]
    return [_encode_value(value) for value in values]


def _decode_values(values: List[Any], element_type: str) -> List[Any]:
    if element_type == "decimal":
        return [Decimal(str(value)) for value in values]
    return [_decode_value(value) for value in values]


def vector_to_dict(vector: Vector[Any]) -> Dict[str, Any]:
    """Serialize a :class:`Vector` to a JSON-compatible dictionary."""

    values = vector.to_list()
    element_type = _element_type(values)
    return {
        "kind": "vector",
        "size": vector.size,
        "element_type": element_type,
        "values": _encode_values(values, element_type),
    }


def vector_from_dict(data: Dict[str, Any]) -> Vector[Any]:
    values = _decode_values(list(data.get("values", [])), str(data.get("element_type", "json")))
    size = int(data.get("size", len(values)))
    if size != len(values):
        raise ValueError(f"Vector declares {size} values; found {len(values)}")
    return Vector.from_values(values)


def matrix_to_dict(matrix: Matrix[Any]) -> Dict[str, Any]:
    """Serialize a :class:`Matrix` to a JSON-compatible dictionary."""

    flat = [value for row in matrix for value in row]
    element_type = _element_type(flat)
    return {
        "kind": "matrix",
        "row_count": matrix.row_count,
        "column_count": matrix.column_count,
        "element_type": element_type,
        "rows": [_encode_values(row.to_list(), element_type) for row in matrix],
    }


def matrix_from_dict(data: Dict[str, Any]) -> Matrix[Any]:
    element_type = str(data.get("element_type", "json"))
    rows = [_decode_values(list(row), element_type) for row in data.get("rows", [])]
    matrix = Matrix.from_rows(rows)
    declared = (int(data.get("row_count", matrix.row_count)), int(data.get("column_count", matrix.column_count)))
    if declared != matrix.shape:
        raise ValueError(f"Matrix declares shape {declared}; found {matrix.shape}")
    return matrix


def _to_cells(rows: Any) -> Cells:
    return [["" if value is None else str(value) for value in row] for row in rows]


@dataclass
class MatrixDocument:
    """An editable matrix together with the settings used to solve it."""

    cells: Cells
    label: str = ""
    description: str = ""
    scale: int = DEFAULT_SCALE
    precision: int = DEFAULT_PRECISION
    rounding: RoundingMode = DEFAULT_ROUNDING
    pivoting: bool = False
    document_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    schema_version: int = SCHEMA_VERSION

    def __post_init__(self) -> None:
        self.rounding = normalize_rounding(self.rounding)

    @classmethod
    def blank(cls, rows: int, columns: int, **kwargs: Any) -> "MatrixDocument":
        return cls(cells=blank_cells(rows, columns), **kwargs)

    @property
    def row_count(self) -> int:
        return len(self.cells)

    @property
    def column_count(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def policy(self) -> PrecisionPolicy:
        return PrecisionPolicy(precision=self.precision, rounding=self.rounding)

    def to_matrix(self) -> Matrix[str]:
        """Return the cells as a text matrix."""

        return Matrix.from_rows(self.cells)

    def to_decimal_matrix(self) -> Matrix[Decimal]:
        return cells_to_matrix(self.cells, self.policy(), self.scale)

    @classmethod
    def from_matrix(cls, matrix: Matrix[Any], **kwargs: Any) -> "MatrixDocument":
        return cls(cells=_to_cells(matrix.to_lists()), **kwargs)

    def with_result(self, matrix: Matrix[Decimal]) -> "MatrixDocument":
        """Return a copy of this document whose cells hold ``matrix``."""

        return MatrixDocument(
            cells=matrix_to_cells(matrix, self.policy(), self.scale),
            label=self.label,
            description=self.description,
            scale=self.scale,
            precision=self.precision,
            rounding=self.rounding,
            pivoting=self.pivoting,
            document_id=self.document_id,
            schema_version=self.schema_version,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representing the document."""

        return {
            "kind": "document",
            "schema_version": self.schema_version,
            "document_id": self.document_id,
            "label": self.label,
            "description": self.description,
            "scale": self.scale,
            "precision": self.precision,
            "rounding": self.rounding.name,
            "pivoting": self.pivoting,
            "row_count": self.row_count,
            "column_count": self.column_count,
            "cells": [list(row) for row in self.cells],
        }

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatrixDocument":
        """Create a document from a dictionary.

        Older or hand-edited files may lack the identifier, the schema version
        or the solve settings; those fall back to defaults.
        """

        cells = _to_cells(data.get("cells", []))
        if not cells or not cells[0]:
            raise ValueError("Matrix document must contain at least one cell")
        if any(len(row) != len(cells[0]) for row in cells):
            raise ValueError("Matrix document rows must all have the same number of cells")

        document_id = data.get("document_id") or uuid.uuid4().hex
        return cls(
            cells=cells,
            label=str(data.get("label", "")),
            description=str(data.get("description", "")),
            scale=int(data.get("scale", DEFAULT_SCALE)),
            precision=int(data.get("precision", DEFAULT_PRECISION)),
            rounding=normalize_rounding(data.get("rounding", DEFAULT_ROUNDING)),
            pivoting=bool(data.get("pivoting", False)),
            document_id=str(document_id),
            schema_version=int(data.get("schema_version", SCHEMA_VERSION)),
        )

    @classmethod
    def from_json(cls, source: _JSONSource) -> "MatrixDocument":
        return cls.from_dict(_read_payload(source))

    def save(self, target: Union[str, Path, IO[str]], *, indent: Optional[int] = 2) -> None:
        _write_payload(self.to_json(indent=indent), target)

    def equals(self, other: "MatrixDocument") -> bool:
        return self.to_dict() == other.to_dict()


def _read_payload(source: _JSONSource) -> Dict[str, Any]:
    if hasattr(source, "read"):
        data = json.load(source)  # type: ignore[arg-type]
    else:
        path = Path(source)  # type: ignore[arg-type]
        if not path.exists():
            raise DestinationNotFoundError(f"invalid path : {path}")
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        LOG.debug("Read %s", path)
    if not isinstance(data, dict):
        raise ValueError("Matrix JSON must contain an object at the top level")
    return data


def _write_payload(payload: str, target: Union[str, Path, IO[str]]) -> None:
    if hasattr(target, "write"):
        target.write(payload)  # type: ignore[union-attr]
    else:
        path = Path(target)  # type: ignore[arg-type]
        path.write_text(payload, encoding="utf-8")
        LOG.info("Wrote %s", path)


def to_dict(source: Persistable) -> Dict[str, Any]:
    if isinstance(source, MatrixDocument):
        return source.to_dict()
    if isinstance(source, Matrix):
        return matrix_to_dict(source)
    if isinstance(source, Vector):
        return vector_to_dict(source)
    raise TypeError(f"Cannot serialize {type(source).__name__}")


def from_dict(data: Dict[str, Any]) -> Persistable:
    kind = data.get("kind")
    if kind == "document" or (kind is None and "cells" in data):
        return MatrixDocument.from_dict(data)
    if kind == "matrix":
        return matrix_from_dict(data)
    if kind == "vector":
        return vector_from_dict(data)
    raise ValueError(f"Unknown payload kind: {kind!r}")


def serialize(source: Persistable, target: Union[str, Path, IO[str]], *, indent: Optional[int] = 2) -> None:
    """Write a vector, matrix or document as JSON to a path or file-like object."""

    _write_payload(json.dumps(to_dict(source), indent=indent), target)


def deserialize(source: _JSONSource) -> Persistable:
    """Read back whatever :func:`serialize` wrote.

    ``DestinationNotFoundError`` is raised when ``source`` names a path that
    does not exist.
    """

    return from_dict(_read_payload(source))


def load_document(source: _JSONSource) -> MatrixDocument:
    """Load a document, accepting a bare serialized matrix as well."""

    loaded = deserialize(source)
    if isinstance(loaded, MatrixDocument):
        return loaded
    if isinstance(loaded, Matrix):
        return MatrixDocument.from_matrix(loaded)
    raise ValueError("Expected a matrix document, found a vector")


__all__ = [
    "DestinationNotFoundError",
    "MatrixDocument",
    "SCHEMA_VERSION",
    "deserialize",
    "from_dict",
    "load_document",
    "matrix_from_dict",
    "matrix_to_dict",
    "serialize",
    "to_dict",
    "vector_from_dict",
    "vector_to_dict",
]
