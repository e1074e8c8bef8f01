from .components import render_matrix_editor, render_save_section, render_sidebar, render_solution
from .comparison import render_comparison_tab
from .state import current_result, initialize_session_state, record_result, update_cells

__all__ = [
    "current_result",
    "initialize_session_state",
    "record_result",
    "render_comparison_tab",
    "render_matrix_editor",
    "render_save_section",
    "render_sidebar",
    "render_solution",
    "update_cells",
]
