"""
Command-Line Interface for the linsys solver.

Solves saved matrix documents without starting the Streamlit editor.

Usage:
    linsys solve DOCUMENT [OPTIONS]
    linsys new ROWS COLUMNS PATH
    linsys example NAME PATH

Options (solve):
    --precision N       Significant digits used for every operation
    --scale N           Digits after the decimal point for input and output
    --rounding MODE     Rounding mode (half_up, half_even, down, ...)
    --pivoting          Interchange rows when a pivot is zero
    --output PATH       Write the solved document to PATH
    --verbose           Print detailed progress
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional, Union

from .analysis import SolveResult, solve_document
from .config import DestinationNotFoundError, MatrixDocument, load_document
from .containers import InvalidSizeError
from .examples import EXAMPLES
from .inputs import format_value, matrix_to_cells
from .precision import RoundingMode, parse_rounding

LOG = logging.getLogger("linsys")


def format_result(result: SolveResult) -> str:
    """Return the reduced matrix and the solution column as aligned text."""

    document = result.document
    policy = document.policy()
    cells = matrix_to_cells(result.reduced, policy, document.scale)
    width = max(len(cell) for row in cells for cell in row)
    lines = [" ".join(cell.rjust(width) for cell in row) for row in cells]

    lines.append("")
    for index, value in enumerate(result.solution()):
        lines.append(f"x{index + 1} = {format_value(value, policy, document.scale)}")
    if result.unresolved:
        positions = ", ".join(str(i + 1) for i in result.unresolved)
        lines.append(f"Unresolved pivot(s) in column(s): {positions}")
    return "\n".join(lines)


def run_solve(
    path: str,
    precision: Optional[int] = None,
    scale: Optional[int] = None,
    rounding: Union[str, RoundingMode, None] = None,
    pivoting: bool = False,
    output_path: Optional[str] = None,
) -> int:
    try:
        document = load_document(path)
    except DestinationNotFoundError:
        print(f"No such document: {path}")
        return 1
    except ValueError as exc:
        print(f"Could not read {path}: {exc}")
        return 1

    overrides = {}
    if precision is not None:
        overrides["precision"] = precision
    if scale is not None:
        overrides["scale"] = scale
    if rounding is not None:
        try:
            overrides["rounding"] = parse_rounding(rounding)
        except ValueError as exc:
            print(exc)
            return 1
    if pivoting:
        overrides["pivoting"] = True
    document = replace(document, **overrides)

    try:
        result = solve_document(document)
    except (ValueError, ArithmeticError) as exc:
        LOG.warning("Solve failed for %s: %s", path, exc)
        print(f"Solve failed: {exc}")
        return 1

    print(format_result(result))

    if output_path:
        result.solved_document().save(output_path)
        print(f"\nSolved document saved to: {output_path}")
    return 0


def run_new(rows: int, columns: int, path: str) -> int:
    try:
        document = MatrixDocument.blank(rows, columns, label=f"{rows} x {columns}")
    except InvalidSizeError as exc:
        print(f"Cannot create matrix: {exc}")
        return 1
    document.save(path)
    print(f"Created {rows} x {columns} document: {path}")
    return 0


def run_example(name: str, path: str) -> int:
    factory = EXAMPLES.get(name)
    if factory is None:
        print(f"Unknown example {name!r}; choose from: {', '.join(EXAMPLES)}")
        return 1
    factory().save(path)
    print(f"Wrote example {name!r} to {path}")
    return 0


def _rounding_arg(value: str) -> RoundingMode:
    try:
        return parse_rounding(value)
    except ValueError:
        names = ", ".join(mode.name.lower() for mode in RoundingMode)
        raise argparse.ArgumentTypeError(f"unknown rounding mode {value!r} (choose from: {names})") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linsys",
        description="Solve linear systems exactly with decimal Gauss-Jordan elimination",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  linsys new 2 3 system.json                          # Blank 2 x 3 document
  linsys example "2 x 2 system" system.json           # Write a sample system
  linsys solve system.json                            # Solve with saved settings
  linsys solve system.json --precision 20 --scale 6   # Override settings
  linsys solve system.json --pivoting -o solved.json  # Save the reduced matrix
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Print detailed progress")
    commands = parser.add_subparsers(dest="command", required=True)

    solve_parser = commands.add_parser("solve", help="Solve a saved matrix document")
    solve_parser.add_argument("document", help="Path to a matrix document (.json)")
    solve_parser.add_argument("--precision", "-p", type=int, help="Significant digits")
    solve_parser.add_argument("--scale", "-s", type=int, help="Digits after the decimal point")
    solve_parser.add_argument("--rounding", "-r", type=_rounding_arg, help="Rounding mode (default: half_up)")
    solve_parser.add_argument("--pivoting", action="store_true", help="Interchange rows on a zero pivot")
    solve_parser.add_argument("--output", "-o", help="Write the solved document to this path")

    new_parser = commands.add_parser("new", help="Create a blank matrix document")
    new_parser.add_argument("rows", type=int)
    new_parser.add_argument("columns", type=int)
    new_parser.add_argument("path")

    example_parser = commands.add_parser("example", help="Write one of the bundled example systems")
    example_parser.add_argument("name", choices=list(EXAMPLES))
    example_parser.add_argument("path")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "new":
        return run_new(args.rows, args.columns, args.path)
    if args.command == "example":
        return run_example(args.name, args.path)
    return run_solve(
        args.document,
        precision=args.precision,
        scale=args.scale,
        rounding=args.rounding,
        pivoting=args.pivoting,
        output_path=args.output,
    )


if __name__ == "__main__":
    sys.exit(main())
