"""Analysis utilities that run the solver on editor documents.

This module connects the text-cell documents to the elimination engine and
provides a side-by-side run with and without row interchange, which is the
quickest way to see whether a zero pivot left a column unresolved.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Dict, List, Optional

from .config import MatrixDocument
from .containers import Matrix, Vector
from .linalg import solution_vector, solve, unresolved_pivots

LOG = logging.getLogger(__name__)

PIVOTING_VARIANTS = {
    "No pivoting": False,
    "Partial pivoting": True,
}


@dataclass
class SolveResult:
    """Outcome of solving one document."""

    document: MatrixDocument
    original: Matrix[Decimal]
    reduced: Matrix[Decimal]
    pivoting: bool
    unresolved: List[int] = field(default_factory=list)

    @property
    def is_fully_reduced(self) -> bool:
        return not self.unresolved

    def solution(self) -> Vector[Decimal]:
        return solution_vector(self.reduced)

    def solved_document(self) -> MatrixDocument:
        """The source document with its cells replaced by the reduced matrix."""

        return self.document.with_result(self.reduced)


def solve_document(document: MatrixDocument, *, pivoting: Optional[bool] = None) -> SolveResult:
    """Parse ``document`` under its own settings and reduce it.

    ``pivoting`` overrides the document's own flag when given.  The document is
    not mutated.
    """

    use_pivoting = document.pivoting if pivoting is None else pivoting
    policy = document.policy()
    original = document.to_decimal_matrix()
    reduced = original.copy()
    LOG.info(
        "Solving %d x %d matrix (precision=%d, rounding=%s, pivoting=%s)",
        reduced.row_count,
        reduced.column_count,
        policy.precision,
        policy.rounding.name,
        use_pivoting,
    )
    solve(reduced, policy, pivoting=use_pivoting)
    unresolved = unresolved_pivots(reduced)
    if unresolved:
        LOG.warning("Unresolved pivot positions: %s", unresolved)
    return SolveResult(
        document=replace(document, cells=[list(row) for row in document.cells]),
        original=original,
        reduced=reduced,
        pivoting=use_pivoting,
        unresolved=unresolved,
    )


def solve_with_variants(document: MatrixDocument) -> Dict[str, SolveResult]:
    """Run the same document with every pivoting variant."""

    return {
        name: solve_document(document, pivoting=flag)
        for name, flag in PIVOTING_VARIANTS.items()
    }


__all__ = ["PIVOTING_VARIANTS", "SolveResult", "solve_document", "solve_with_variants"]
