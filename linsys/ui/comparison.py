"""Side-by-side comparison of pivoting variants."""
import streamlit as st

from linsys import MatrixDocument
from linsys.analysis import solve_with_variants
from linsys.inputs import matrix_to_cells
from .state import cells_to_frame


def render_comparison_tab(document: MatrixDocument) -> None:  # pragma: no cover - Streamlit UI
    st.header("Pivoting Comparison")
    st.caption("Solves the current matrix with and without row interchange.")

    if not st.button("Compare", key="compare_variants"):
        return

    try:
        results = solve_with_variants(document)
    except (ValueError, ArithmeticError) as exc:
        st.error(f"Comparison failed: {exc}")
        return

    policy = document.policy()
    columns = st.columns(len(results))
    for column, (name, result) in zip(columns, results.items()):
        with column:
            st.subheader(name)
            cells = matrix_to_cells(result.reduced, policy, document.scale)
            st.dataframe(cells_to_frame(cells), hide_index=True, width="stretch")
            if result.is_fully_reduced:
                st.success("Every pivot reduced to 1.")
            else:
                positions = ", ".join(str(i + 1) for i in result.unresolved)
                st.warning(f"Unresolved column(s): {positions}")
