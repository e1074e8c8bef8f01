from decimal import Decimal

import plotly.graph_objects as go

from linsys.containers import Matrix
from linsys.visualization_plotly import render_matrix_heatmap


def _rects(fig):
    return [shape for shape in fig.layout.shapes if shape.type == "rect"]


def test_heatmap_annotates_exact_values():
    matrix = Matrix.from_rows([[Decimal(1), Decimal(0), Decimal("0.3333")]])
    fig = render_matrix_heatmap(matrix)
    assert isinstance(fig, go.Figure)
    heatmap = fig.data[0]
    assert list(heatmap.text[0]) == ["1", "0", "0.3333"]
    assert not _rects(fig)


def test_unresolved_pivot_is_outlined():
    matrix = Matrix.from_rows([[Decimal(0), Decimal(0), Decimal(-2)], [Decimal(1), Decimal(1), Decimal(3)]])
    fig = render_matrix_heatmap(matrix, title="Zero pivot")
    rects = _rects(fig)
    assert len(rects) == 1
    assert (rects[0].x0, rects[0].y0) == (-0.5, -0.5)
    assert fig.layout.title.text == "Zero pivot"


def test_text_matrix_is_not_outlined():
    fig = render_matrix_heatmap(Matrix.from_rows([["a", "b"]]), augmented=False)
    assert not _rects(fig)
    assert not fig.layout.shapes
