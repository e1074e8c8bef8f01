"""Reference systems for the editor, the command line and the tests."""
from __future__ import annotations

from typing import Callable, Dict

from .config import MatrixDocument


def two_by_two_example() -> MatrixDocument:
    """``2x + y = 5`` and ``x - y = 1``; the solution is ``x = 2, y = 1``."""

    return MatrixDocument(
        cells=[["2", "1", "5"], ["1", "-1", "1"]],
        label="2 x 2 system",
        description="2x + y = 5, x - y = 1",
    )


def three_by_three_example() -> MatrixDocument:
    """A 3 x 3 system with a non-integer solution (x = 1, y = 0.5, z = -2)."""

    return MatrixDocument(
        cells=[
            ["1", "2", "1", "0"],
            ["3", "-2", "1", "0"],
            ["2", "4", "-1", "6"],
        ],
        label="3 x 3 system",
        description="x + 2y + z = 0, 3x - 2y + z = 0, 2x + 4y - z = 6",
    )


def zero_pivot_example() -> MatrixDocument:
    """A system whose first pivot is zero while a usable pivot sits below it."""

    return MatrixDocument(
        cells=[["0", "1", "1"], ["1", "1", "3"]],
        label="Zero pivot",
        description="y = 1, x + y = 3; only solvable with row interchange",
    )


def thirds_example() -> MatrixDocument:
    """``3x = 1``; shows the effect of precision and rounding on 1/3."""

    return MatrixDocument(
        cells=[["3", "1"]],
        label="One third",
        description="3x = 1",
        scale=10,
    )


EXAMPLES: Dict[str, Callable[[], MatrixDocument]] = {
    "2 x 2 system": two_by_two_example,
    "3 x 3 system": three_by_three_example,
    "Zero pivot": zero_pivot_example,
    "One third": thirds_example,
}


__all__ = [
    "EXAMPLES",
    "thirds_example",
    "three_by_three_example",
    "two_by_two_example",
    "zero_pivot_example",
]
