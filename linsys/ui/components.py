"""UI components for the linsys editor."""
from typing import Optional
import hashlib

import pandas as pd
import streamlit as st

from linsys import MatrixDocument
from linsys.analysis import SolveResult
from linsys.examples import EXAMPLES
from linsys.inputs import Cells, format_value, matrix_to_cells
from linsys.precision import RoundingMode
from linsys.visualization_plotly import render_matrix_heatmap
from .state import (
    WIDGET_VERSION_KEY,
    apply_document,
    cells_to_frame,
    column_labels,
    current_document,
    frame_to_cells,
    new_document,
    safe_load_document,
    update_settings,
)

_UPLOAD_DIGEST_KEY = "_matrix_upload_digest"
_MAX_DIMENSION = 50


def _widget_version() -> int:
    return st.session_state.get(WIDGET_VERSION_KEY, 0)


def render_sidebar() -> MatrixDocument:
    with st.sidebar:
        st.header("Matrix")
        _render_new_section()
        _render_open_section()
        st.markdown("---")
        _render_settings_section()
    return current_document()


def _render_new_section() -> None:
    document = current_document()
    c1, c2 = st.columns(2)
    rows = int(c1.number_input("Rows", 1, _MAX_DIMENSION, document.row_count, key="new_rows"))
    columns = int(c2.number_input("Columns", 1, _MAX_DIMENSION, document.column_count, key="new_columns"))
    if st.button("New matrix", use_container_width=True):
        new_document(rows, columns)
        st.rerun()

    example = st.selectbox("Example", list(EXAMPLES), key="example_selector")
    if st.button("Load example", use_container_width=True):
        apply_document(EXAMPLES[example]())
        st.rerun()


def _render_open_section() -> None:
    uploaded = st.file_uploader("Open matrix (.json)", type=["json"], key="matrix_upload")
    if uploaded is None:
        return
    payload = uploaded.getvalue()
    digest = hashlib.sha256(payload).hexdigest()
    # Streamlit re-runs the script with the same upload; only load it once.
    if st.session_state.get(_UPLOAD_DIGEST_KEY) == digest:
        return
    st.session_state[_UPLOAD_DIGEST_KEY] = digest
    document, error = safe_load_document(uploaded)
    if document is None:
        st.error(error)
        return
    apply_document(document)
    st.success(f"Loaded '{document.label or uploaded.name}'.")
    st.rerun()


def _render_settings_section() -> None:
    document = current_document()
    version = _widget_version()
    st.subheader("Solution Properties")
    scale = st.number_input(
        "Scale",
        min_value=0,
        max_value=100,
        value=int(document.scale),
        help="Digits after the decimal point for entered cells and displayed results.",
        key=f"scale_{version}",
    )
    precision = st.number_input(
        "Precision",
        min_value=1,
        max_value=1000,
        value=int(document.precision),
        help="Significant digits kept by every multiply, divide and add.",
        key=f"precision_{version}",
    )
    modes = list(RoundingMode)
    rounding = st.selectbox(
        "Rounding",
        modes,
        index=modes.index(document.rounding),
        format_func=lambda mode: mode.label,
        key=f"rounding_{version}",
    )
    pivoting = st.checkbox(
        "Interchange rows on zero pivot",
        value=document.pivoting,
        help="Without row interchange a zero on the diagonal leaves that column unresolved.",
        key=f"pivoting_{version}",
    )
    update_settings(scale, precision, rounding, pivoting)


def render_matrix_editor(document: MatrixDocument) -> Cells:
    st.subheader(document.label or "Matrix")
    if document.description:
        st.caption(document.description)
    labels = column_labels(document.column_count)
    edited = st.data_editor(
        cells_to_frame(document.cells),
        column_config={label: st.column_config.TextColumn(label, required=True) for label in labels},
        hide_index=True,
        num_rows="fixed",
        key=f"matrix_editor_{_widget_version()}",
    )
    return frame_to_cells(edited)


def render_solution(result: SolveResult) -> None:
    document = result.document
    policy = document.policy()

    st.subheader("Reduced row-echelon form")
    cells = matrix_to_cells(result.reduced, policy, document.scale)
    st.dataframe(cells_to_frame(cells), hide_index=True, width="stretch")

    if result.unresolved:
        positions = ", ".join(str(i + 1) for i in result.unresolved)
        st.warning(
            f"Pivot(s) in column(s) {positions} did not reduce to 1. "
            "A zero reached the diagonal; enable row interchange or check the system."
        )

    solution = result.solution()
    frame = pd.DataFrame(
        {
            "Unknown": [f"x{index + 1}" for index in range(solution.size)],
            "Value": [format_value(value, policy, document.scale) for value in solution],
        }
    )
    with st.expander("Solution column", expanded=True):
        st.dataframe(frame, hide_index=True, width="stretch")

    with st.expander("Heatmap", expanded=False):
        fig = render_matrix_heatmap(result.reduced)
        st.plotly_chart(fig, use_container_width=True)


def render_save_section(document: MatrixDocument, result: Optional[SolveResult]) -> None:
    st.markdown("---")
    st.subheader("Save Matrix")

    label = st.text_input("Label", value=document.label, key=f"document_label_{_widget_version()}")
    document.label = label
    file_stem = (label.strip() or "matrix").replace(" ", "_")

    c1, c2 = st.columns(2)
    c1.download_button(
        label="Download matrix (.json)",
        data=document.to_json(indent=2),
        file_name=f"{file_stem}.json",
        mime="application/json",
        key="download_document",
    )
    if result is not None:
        c2.download_button(
            label="Download solved matrix (.json)",
            data=result.solved_document().to_json(indent=2),
            file_name=f"{file_stem}_solved.json",
            mime="application/json",
            key="download_solved",
        )
