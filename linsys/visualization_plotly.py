"""Plotly views of matrices before and after elimination."""
from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional

import plotly.graph_objects as go

from .containers import Matrix
from .linalg import unresolved_pivots


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    return None


def render_matrix_heatmap(
    matrix: Matrix[Any],
    title: str = "Reduced matrix",
    font_size: int = 12,
    augmented: bool = True,
) -> go.Figure:
    """Heatmap of ``matrix`` with each cell annotated by its exact value.

    Diagonal positions that did not reduce to a leading one are outlined in
    red.  When ``augmented`` is set the last column is separated from the
    coefficients by a dashed line.
    """

    rows = matrix.to_lists()
    z: List[List[Optional[float]]] = [[_as_float(value) for value in row] for row in rows]
    text = [["" if value is None else str(value) for value in row] for row in rows]

    fig = go.Figure(
        go.Heatmap(
            z=z,
            text=text,
            texttemplate="%{text}",
            textfont=dict(size=font_size),
            colorscale="RdBu",
            zmid=0,
            hovertemplate="row %{y}, column %{x}<br>%{text}<extra></extra>",
        )
    )

    if all(isinstance(value, Decimal) for row in rows for value in row):
        for index in unresolved_pivots(matrix):
            fig.add_shape(
                type="rect",
                x0=index - 0.5,
                x1=index + 0.5,
                y0=index - 0.5,
                y1=index + 0.5,
                line=dict(color="red", width=3),
            )

    if augmented and matrix.column_count > 1:
        fig.add_vline(x=matrix.column_count - 1.5, line=dict(color="black", width=2, dash="dash"))

    fig.update_xaxes(
        tickvals=list(range(matrix.column_count)),
        ticktext=[f"c{i + 1}" for i in range(matrix.column_count)],
        side="top",
        showgrid=False,
        zeroline=False,
    )
    fig.update_yaxes(
        tickvals=list(range(matrix.row_count)),
        ticktext=[f"r{i + 1}" for i in range(matrix.row_count)],
        autorange="reversed",
        showgrid=False,
        zeroline=False,
    )
    fig.update_layout(
        title=title,
        plot_bgcolor="white",
        height=max(250, 60 * matrix.row_count + 120),
        margin=dict(l=50, r=50, t=80, b=30),
    )
    return fig


__all__ = ["render_matrix_heatmap"]
