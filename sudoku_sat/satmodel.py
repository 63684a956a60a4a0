#!/usr/bin/env python

"""
sudoku_sat/satmodel.py

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

**Sudoku as propositional logic.**

There is one Boolean variable per (row, column, digit) triple, meaning "this
cell holds this digit": 9 x 9 x 9 = 729 of them. Clauses are in conjunctive
normal form (CNF), literals are signed integers in the DIMACS/PySAT
convention (``-x`` is "not x").

The *minimal encoding* (Lynce & Ouaknine, "Sudoku as a SAT Problem", 2006;
https://sat.inesc-id.pt/~ines/publications/aimath06.pdf) is:

- every cell holds at least one digit (81 clauses of 9 literals);
- no digit appears twice in a row, column or box (3 x 2916 binary clauses).

That is 8829 clauses before the clues, which are unit clauses. The counting
argument (9 cells per unit, each holding at least one digit, and no digit
twice) means a model of the minimal encoding holds exactly one digit per cell.

"""

from itertools import combinations
import logging
from typing import List, Tuple

from pysat.formula import CNF, IDPool

from sudoku_sat.common import DIGITS, InvalidInput, InvariantViolation, N
from sudoku_sat.grid import Box, Grid, clue_cells, empty_grid
from sudoku_sat.oracle import Assignment

log = logging.getLogger(__name__)

N_MINIMAL_CLAUSES = N * N + 3 * N * N * (N * (N - 1) // 2)  # 8829


# =============================================================================
# SudokuSat
# =============================================================================

class SudokuSat(object):
    """
    A SAT instance for one Sudoku puzzle, plus the map from grid positions to
    its literals. The literals belong to this instance; don't mix them with
    another's.
    """

    def __init__(self) -> None:
        self.pool = IDPool()
        self.cnf = CNF()
        # Allocate in scan order: row, then column, then digit.
        self.literals = [
            [
                [
                    self.pool.id((r, c, d)) for d in DIGITS
                ] for c in range(N)
            ] for r in range(N)
        ]  # type: List[List[List[int]]]
        # ... index as: self.literals[row_zb][col_zb][digit - 1]

    def lit(self, row_zb: int, col_zb: int, digit: int) -> int:
        """
        The literal asserting "cell (row_zb, col_zb) holds digit".
        """
        return self.literals[row_zb][col_zb][digit - 1]

    def cell_of(self, var: int) -> Tuple[int, int, int]:
        """
        Reverse lookup: ``(row_zb, col_zb, digit)`` for a variable.
        """
        return self.pool.obj(abs(var))

    @property
    def n_vars(self) -> int:
        return self.pool.top

    @property
    def n_clauses(self) -> int:
        return len(self.cnf.clauses)

    def add_clause(self, clause: List[int]) -> None:
        self.cnf.append(clause)

    def clone_cnf(self) -> CNF:
        """
        A copy of the clauses, for handing to an oracle.
        """
        return self.cnf.copy()


# =============================================================================
# Clause encoder
# =============================================================================

def _add_at_most_once(sudoku: SudokuSat, cells: List[Tuple[int, int]],
                      digit: int) -> None:
    """
    For every pair of cells, "not both of these hold ``digit``".
    """
    for (r1, c1), (r2, c2) in combinations(cells, 2):
        sudoku.add_clause([-sudoku.lit(r1, c1, digit),
                           -sudoku.lit(r2, c2, digit)])


def add_minimal_sudoku_constraints(sudoku: SudokuSat) -> None:
    """
    Adds the minimal encoding of the Sudoku rules, in a fixed order:
    definedness, then rows, then columns, then boxes.
    """
    # Each cell holds at least one digit
    for r in range(N):
        for c in range(N):
            sudoku.add_clause([sudoku.lit(r, c, d) for d in DIGITS])

    # Each digit at most once per row
    for r in range(N):
        row_cells = [(r, c) for c in range(N)]
        for d in DIGITS:
            _add_at_most_once(sudoku, row_cells, d)

    # Each digit at most once per column
    for c in range(N):
        col_cells = [(r, c) for r in range(N)]
        for d in DIGITS:
            _add_at_most_once(sudoku, col_cells, d)

    # Each digit at most once per box
    for box in Box.all_boxes():
        box_cells = list(box.gen_cells())
        for d in DIGITS:
            _add_at_most_once(sudoku, box_cells, d)

    log.debug(f"Minimal encoding: {sudoku.n_vars} variables, "
              f"{sudoku.n_clauses} clauses")


def add_extended_sudoku_constraints(sudoku: SudokuSat) -> None:
    """
    Adds clauses that follow from the minimal encoding, to give the solver
    more to propagate with:

    - each cell holds at most one digit;
    - each digit appears at least once in every row, column and box.

    Never changes the set of solutions.
    """
    n_before = sudoku.n_clauses

    # At most one digit per cell
    for r in range(N):
        for c in range(N):
            for d1, d2 in combinations(DIGITS, 2):
                sudoku.add_clause([-sudoku.lit(r, c, d1),
                                   -sudoku.lit(r, c, d2)])

    # Each digit at least once per row, column, box
    for d in DIGITS:
        for r in range(N):
            sudoku.add_clause([sudoku.lit(r, c, d) for c in range(N)])
        for c in range(N):
            sudoku.add_clause([sudoku.lit(r, c, d) for r in range(N)])
        for box in Box.all_boxes():
            sudoku.add_clause([sudoku.lit(r, c, d)
                               for r, c in box.gen_cells()])

    log.debug(f"Extended encoding added {sudoku.n_clauses - n_before} "
              f"clauses")


def set_cell(sudoku: SudokuSat, row_zb: int, col_zb: int,
             digit: int) -> None:
    """
    Forces a cell to a digit, with a unit clause.
    """
    if digit not in DIGITS:
        raise InvalidInput(
            f"Cannot set (row={row_zb + 1}, col={col_zb + 1}) to {digit!r}; "
            f"digits run from 1 to {N}")
    sudoku.add_clause([sudoku.lit(row_zb, col_zb, digit)])


def add_puzzle_clues(sudoku: SudokuSat, puzzle: Grid) -> None:
    """
    Adds a unit clause for every filled cell of the puzzle. Empty cells add
    nothing.
    """
    n_clues = 0
    for r, c, d in clue_cells(puzzle):
        set_cell(sudoku, r, c, d)
        n_clues += 1
    log.debug(f"Added {n_clues} clue(s)")


# =============================================================================
# Solution decoder
# =============================================================================

def extract_grid(sudoku: SudokuSat, assignment: Assignment) -> Grid:
    """
    Reads the solved grid out of a satisfying assignment.

    Raises:
        :exc:`InvariantViolation` if a cell has no true digit, or more than
        one.
    """
    grid = empty_grid()
    for r in range(N):
        for c in range(N):
            true_digits = [
                d for d in DIGITS
                if assignment.value(sudoku.lit(r, c, d)) is True
            ]
            if len(true_digits) != 1:
                raise InvariantViolation(
                    f"Cell (row={r + 1}, col={c + 1}) decodes to digits "
                    f"{true_digits}; expected exactly one")
            grid[r][c] = true_digits[0]
    return grid
