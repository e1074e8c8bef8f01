import io
import json

import pandas as pd

from linsys.analysis import solve_document
from linsys.precision import RoundingMode
from linsys.ui import state


def test_initialize_session_state_uses_example():
    session = {}
    state.initialize_session_state(session)
    document = session[state.DOCUMENT_KEY]
    assert document.cells == [["2", "1", "5"], ["1", "-1", "1"]]
    assert session[state.WIDGET_VERSION_KEY] == 0


def test_frame_round_trip():
    cells = [["1", "-2.5"], ["", "3"]]
    frame = state.cells_to_frame(cells)
    assert list(frame.columns) == ["c1", "c2"]
    assert state.frame_to_cells(frame) == cells


def test_frame_to_cells_treats_missing_as_blank():
    frame = pd.DataFrame([[" 4 ", None]], columns=["c1", "c2"], dtype="string")
    assert state.frame_to_cells(frame) == [["4", ""]]


def test_new_document_keeps_settings_and_bumps_version():
    session = {}
    state.update_settings(6, 20, "half_even", True, session)
    version = session[state.WIDGET_VERSION_KEY]

    document = state.new_document(3, 4, session)
    assert document.cells == [["0"] * 4] * 3
    assert (document.scale, document.precision, document.pivoting) == (6, 20, True)
    assert document.rounding is RoundingMode.HALF_EVEN
    assert session[state.WIDGET_VERSION_KEY] == version + 1


def test_edits_drop_stale_result():
    session = {}
    document = state.current_document(session)
    state.record_result(solve_document(document), session)

    state.update_cells([list(row) for row in document.cells], session)
    assert state.current_result(session) is not None

    state.update_cells([["4", "2", "6"], ["1", "-1", "1"]], session)
    assert state.current_result(session) is None
    assert state.current_document(session).cells[0] == ["4", "2", "6"]


def test_unchanged_settings_keep_result():
    session = {}
    document = state.current_document(session)
    state.record_result(solve_document(document), session)

    state.update_settings(document.scale, document.precision, document.rounding, document.pivoting, session)
    assert state.current_result(session) is not None

    state.update_settings(document.scale, document.precision + 1, document.rounding, document.pivoting, session)
    assert state.current_result(session) is None


def test_safe_load_document(tmp_path):
    document, error = state.safe_load_document(io.StringIO(json.dumps({"cells": [["1", "2"]]})))
    assert error == ""
    assert document.cells == [["1", "2"]]

    document, error = state.safe_load_document(tmp_path / "missing.json")
    assert document is None
    assert error == "File not found."

    document, error = state.safe_load_document(io.StringIO("{oops"))
    assert error == "Invalid JSON format."

    document, error = state.safe_load_document(io.StringIO(json.dumps({"cells": []})))
    assert document is None
    assert error.startswith("Failed to load matrix:")
