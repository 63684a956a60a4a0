#!/usr/bin/env python

"""
sudoku_sat/exact_cover.py

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

**Solves Sudoku as an exact-cover problem, via integer programming.**

Choosing a digit for a cell is a "row" of the exact-cover matrix. It covers
four of 324 constraints: that cell, that digit in its row, that digit in its
column, that digit in its box. A solution picks rows covering each constraint
exactly once. Written as a 0/1 integer programme, that is one binary variable
per (row, column, digit) and one ``== 1`` constraint per covered item; CBC,
via ``mip``, does the rest.

"""

import logging
from typing import Optional

from mip import BINARY, Constr, Model, OptimizationStatus, Var, xsum

from sudoku_sat.base import SudokuSolver
from sudoku_sat.common import ALMOST_ONE, N, RANK
from sudoku_sat.grid import Grid, check_well_formed, clue_cells, empty_grid

log = logging.getLogger(__name__)


# =============================================================================
# Functions for mip models
# =============================================================================

def debug_model_constraints(m: Model) -> None:
    """
    Shows constraints for a model.
    """
    if not log.isEnabledFor(logging.DEBUG):
        return
    lines = [f"Constraints in model {m.name!r}:"]
    for c in m.constrs:  # type: Constr
        lines.append(f"{c.name} == {c.expr}")
    log.debug("\n".join(lines))


def debug_model_vars(m: Model) -> None:
    """
    Show the names/values of model variables after fitting.
    """
    if not log.isEnabledFor(logging.DEBUG):
        return
    lines = [f"Variables in model {m.name!r}:"]
    for v in m.vars:  # type: Var
        lines.append(f"{v.name} == {v.x}")
    log.debug("\n".join(lines))


# =============================================================================
# ExactCoverSudokuSolver
# =============================================================================

class ExactCoverSudokuSolver(SudokuSolver):
    """
    Solves via the exact-cover formulation, as an integer programme.
    """
    name = "exact_cover"

    def solve(self, puzzle: Grid) -> Optional[Grid]:
        check_well_formed(puzzle)
        m = Model("Sudoku exact cover")
        m.verbose = 0

        # ---------------------------------------------------------------------
        # Variables
        # ---------------------------------------------------------------------
        x = [
            [
                [
                    m.add_var(f"x(row={r + 1}, col={c + 1}, digit={d + 1})",
                              var_type=BINARY)
                    for d in range(N)
                ] for c in range(N)
            ] for r in range(N)
        ]  # index as: x[row_zb][col_zb][digit_zb]

        # ---------------------------------------------------------------------
        # Constraints: each item covered exactly once
        # ---------------------------------------------------------------------
        # Cell
        for r in range(N):
            for c in range(N):
                m += xsum(x[r][c][d] for d in range(N)) == 1
        for d in range(N):
            # Row-digit
            for r in range(N):
                m += xsum(x[r][c][d] for c in range(N)) == 1
            # Column-digit
            for c in range(N):
                m += xsum(x[r][c][d] for r in range(N)) == 1
            # Box-digit
            for box_row in range(RANK):
                for box_col in range(RANK):
                    row_base = box_row * RANK
                    col_base = box_col * RANK
                    m += xsum(
                        x[row_base + row_offset][col_base + col_offset][d]
                        for row_offset in range(RANK)
                        for col_offset in range(RANK)
                    ) == 1
        # Clues
        for r, c, digit in clue_cells(puzzle):
            m += x[r][c][digit - 1] == 1

        # ---------------------------------------------------------------------
        # Solve
        # ---------------------------------------------------------------------
        debug_model_constraints(m)
        status = m.optimize()
        log.debug(f"CBC status: {status}")
        if status not in (OptimizationStatus.OPTIMAL,
                          OptimizationStatus.FEASIBLE) or not m.num_solutions:
            log.info(f"Integer programme has no solution ({status})")
            return None

        # ---------------------------------------------------------------------
        # Read out answers
        # ---------------------------------------------------------------------
        debug_model_vars(m)
        solution = empty_grid()
        for r in range(N):
            for c in range(N):
                for d_zb in range(N):
                    if x[r][c][d_zb].x > ALMOST_ONE:
                        solution[r][c] = d_zb + 1
                        break
        return solution
