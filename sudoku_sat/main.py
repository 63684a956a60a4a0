#!/usr/bin/env python

"""
sudoku_sat/main.py

===============================================================================

    Copyright (C) 2019-2019 Rudolf Cardinal (rudolf@pobox.com).

    This is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This software is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this software. If not, see <http://www.gnu.org/licenses/>.

===============================================================================

**Command-line Sudoku solver.**

Solvers:

- ``sat``: reduce to propositional logic and ask a CDCL SAT solver (CaDiCaL
  by default). Fast on anything.

- ``backtracking``: depth-first search, lowest digit first. Fine for most
  published puzzles; can be slow on hard ones.

- ``exact_cover``: exact cover as a 0/1 integer programme, solved by CBC.

"""

import argparse
import logging
import sys
import time
from typing import List

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from sudoku_sat.common import EXIT_FAILURE, EXIT_SUCCESS, run_guard
from sudoku_sat.oracle import DEFAULT_ORACLE
from sudoku_sat.solvers import SolverKind, make_solver, solver_kind_names
from sudoku_sat.textgrid import format_grid, parse_grid

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEMO_SUDOKU_1 = """
# A standard puzzle

.36 ... 9..
1.. 53. 2..
..4 ... ..6

.47 ... .53
... ..8 .69
69. .4. ...

... 8.7 ..1
..2 ... ..4
.85 ... .2.
"""


# =============================================================================
# main
# =============================================================================

def main(argv: List[str] = None) -> int:
    """
    Command-line entry point.

    Returns: exit code
    """
    cmd_demo = "demo"
    cmd_solve = "solve"

    help_filename = (
        "Puzzle filename to read. Must contain text in format as above.")

    parser = argparse.ArgumentParser(
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            f"Solve Sudoku puzzles. Format is:\n"
            f"{DEMO_SUDOKU_1}\n"
            f"('0' may be used instead of '.')"
        )
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    parser.add_argument(
        "--solver", type=str, choices=solver_kind_names(),
        default=SolverKind.SAT.value, help="Solving strategy")
    parser.add_argument(
        "--oracle", type=str, default=DEFAULT_ORACLE,
        help="SAT engine, by PySAT name (SAT solver only)")
    parser.add_argument(
        "--extended", action="store_true",
        help="Add redundant clauses to the encoding (SAT solver only)")
    parser.add_argument(
        "--conflict_budget", type=int, default=None,
        help="Give up after this many conflicts (SAT solver only)")
    subparsers = parser.add_subparsers(
        dest="command",
        help="Append --help for more help")

    parser_solve = subparsers.add_parser(cmd_solve, help="Solve from a file")
    parser_solve.add_argument(
        "filename", type=str, help=help_filename)

    _parser_demo = subparsers.add_parser(cmd_demo, help="Run demo")

    args = parser.parse_args(argv)
    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    if not args.command:
        print("Must specify command")
        return EXIT_FAILURE
    if args.command == cmd_demo:
        string_version = DEMO_SUDOKU_1
    else:
        log.info(f"Reading {args.filename}")
        with open(args.filename, "rt") as f:
            string_version = f.read()
    puzzle = parse_grid(string_version)

    kind = SolverKind(args.solver)
    if kind == SolverKind.SAT:
        solver = make_solver(kind,
                             oracle_name=args.oracle,
                             extended=args.extended,
                             conflict_budget=args.conflict_budget)
    else:
        solver = make_solver(kind)

    log.info(f"Solving with {solver}:\n{format_grid(puzzle)}")
    start = time.perf_counter()
    solution = solver.solve(puzzle)
    elapsed_ms = (time.perf_counter() - start) * 1000
    if solution is None:
        log.error(f"No solution found ({elapsed_ms:.1f} ms)")
        return EXIT_FAILURE
    log.info(f"Answer ({elapsed_ms:.1f} ms):\n{format_grid(solution)}")
    return EXIT_SUCCESS


def cli() -> None:
    """
    Entry point for the ``sudoku-sat`` command.
    """
    run_guard(lambda: sys.exit(main()))


# =============================================================================
# Command-line entry point
# =============================================================================

if __name__ == "__main__":
    cli()
