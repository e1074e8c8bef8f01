"""State management for the linsys editor."""
from typing import Any, List, MutableMapping, Optional, Sequence, Tuple
import json
import logging

import pandas as pd
import streamlit as st

from linsys import DestinationNotFoundError, MatrixDocument, two_by_two_example
from linsys.analysis import SolveResult
from linsys.config import load_document
from linsys.inputs import Cells
from linsys.precision import normalize_rounding

LOG = logging.getLogger(__name__)

DOCUMENT_KEY = "document"
RESULT_KEY = "result"
WIDGET_VERSION_KEY = "_widget_version"


def _session(state: Optional[MutableMapping[str, Any]]) -> MutableMapping[str, Any]:
    return st.session_state if state is None else state


def column_labels(count: int) -> List[str]:
    return [f"c{index + 1}" for index in range(count)]


def cells_to_frame(cells: Sequence[Sequence[str]]) -> pd.DataFrame:
    """Editor grid for ``cells``; every column holds text."""

    columns = column_labels(len(cells[0]) if cells else 0)
    return pd.DataFrame([list(row) for row in cells], columns=columns, dtype="string")


def frame_to_cells(frame: pd.DataFrame) -> Cells:
    return [
        ["" if pd.isna(value) else str(value).strip() for value in row]
        for row in frame.itertuples(index=False, name=None)
    ]


def initialize_session_state(state: Optional[MutableMapping[str, Any]] = None) -> None:
    session = _session(state)
    if DOCUMENT_KEY not in session:
        session[DOCUMENT_KEY] = two_by_two_example()
    if WIDGET_VERSION_KEY not in session:
        session[WIDGET_VERSION_KEY] = 0


def current_document(state: Optional[MutableMapping[str, Any]] = None) -> MatrixDocument:
    session = _session(state)
    initialize_session_state(session)
    return session[DOCUMENT_KEY]


def apply_document(document: MatrixDocument, state: Optional[MutableMapping[str, Any]] = None) -> MatrixDocument:
    """Make ``document`` the edited document and discard the previous result.

    The widget version is bumped so the data editor is rebuilt from the new
    cells instead of replaying edits made to the old grid.
    """

    session = _session(state)
    session[DOCUMENT_KEY] = document
    session.pop(RESULT_KEY, None)
    session[WIDGET_VERSION_KEY] = session.get(WIDGET_VERSION_KEY, 0) + 1
    LOG.info("Loaded %d x %d document %r", document.row_count, document.column_count, document.label)
    return document


def new_document(rows: int, columns: int, state: Optional[MutableMapping[str, Any]] = None) -> MatrixDocument:
    previous = current_document(state)
    document = MatrixDocument.blank(
        rows,
        columns,
        label=f"{rows} x {columns}",
        scale=previous.scale,
        precision=previous.precision,
        rounding=previous.rounding,
        pivoting=previous.pivoting,
    )
    return apply_document(document, state)


def update_cells(cells: Cells, state: Optional[MutableMapping[str, Any]] = None) -> MatrixDocument:
    """Store edited cells; a stale result is dropped when anything changed."""

    session = _session(state)
    document = current_document(session)
    if cells != document.cells:
        document.cells = [list(row) for row in cells]
        session.pop(RESULT_KEY, None)
    return document


def update_settings(
    scale: int,
    precision: int,
    rounding: Any,
    pivoting: bool,
    state: Optional[MutableMapping[str, Any]] = None,
) -> MatrixDocument:
    session = _session(state)
    document = current_document(session)
    settings = (int(scale), int(precision), normalize_rounding(rounding), bool(pivoting))
    if settings != (document.scale, document.precision, document.rounding, document.pivoting):
        document.scale, document.precision, document.rounding, document.pivoting = settings
        session.pop(RESULT_KEY, None)
    return document


def record_result(result: SolveResult, state: Optional[MutableMapping[str, Any]] = None) -> None:
    _session(state)[RESULT_KEY] = result


def current_result(state: Optional[MutableMapping[str, Any]] = None) -> Optional[SolveResult]:
    return _session(state).get(RESULT_KEY)


def safe_load_document(source: Any) -> Tuple[Optional[MatrixDocument], str]:
    """
    Load a document from a path or file-like JSON source, returning (document, error_message).
    If successful, error_message is empty.
    """
    try:
        return load_document(source), ""
    except DestinationNotFoundError:
        return None, "File not found."
    except json.JSONDecodeError:
        return None, "Invalid JSON format."
    except (ValueError, TypeError) as exc:
        LOG.warning("Rejected document: %s", exc)
        return None, f"Failed to load matrix: {exc}"
