"""Streamlit application for the linsys matrix solver."""
from __future__ import annotations

import logging

import streamlit as st

from linsys.analysis import solve_document
from linsys.ui import (
    current_result,
    initialize_session_state,
    record_result,
    render_comparison_tab,
    render_matrix_editor,
    render_save_section,
    render_sidebar,
    render_solution,
    update_cells,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Simple Matrix Solutions", layout="wide")

# Initialize session state
initialize_session_state()

# Render sidebar
document = render_sidebar()

# Main content
st.title("Simple Matrix Solutions")

tab1, tab2 = st.tabs(["Matrix", "Pivoting Comparison"])

with tab1:
    cells = render_matrix_editor(document)
    document = update_cells(cells)

    if st.button("Solve", type="primary"):
        try:
            record_result(solve_document(document))
        except (ValueError, ArithmeticError) as exc:
            st.error(f"Solve failed: {exc}")

    result = current_result()
    if result is not None:
        render_solution(result)
    else:
        st.info("Enter the augmented matrix and press **Solve**. Use **New matrix** in the sidebar to change its size.")

    render_save_section(document, result)

with tab2:
    render_comparison_tab(document)
