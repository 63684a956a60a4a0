#!/usr/bin/env python

"""
sudoku_sat/sat.py

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

**Solves Sudoku by reduction to SAT.**

Puzzle -> 729 literals -> clauses (rules plus clues) -> SAT engine ->
assignment -> grid.

"""

import logging
from typing import Optional

from sudoku_sat.base import SudokuSolver
from sudoku_sat.grid import Grid, check_well_formed
from sudoku_sat.oracle import (
    DEFAULT_ORACLE,
    SatOracle,
    Verdict,
    known_oracle_names,
)
from sudoku_sat.satmodel import (
    SudokuSat,
    add_extended_sudoku_constraints,
    add_minimal_sudoku_constraints,
    add_puzzle_clues,
    extract_grid,
)

log = logging.getLogger(__name__)


class SatSudokuSolver(SudokuSolver):
    """
    Encodes the puzzle as CNF and hands it to a CDCL SAT solver.
    """
    name = "sat"

    def __init__(self,
                 oracle_name: str = DEFAULT_ORACLE,
                 extended: bool = False,
                 conflict_budget: Optional[int] = None) -> None:
        """
        Args:
            oracle_name:
                PySAT engine to use
            extended:
                add redundant clauses as well as the minimal encoding
            conflict_budget:
                give up after this many conflicts (``None`` for no limit)
        """
        if oracle_name not in known_oracle_names():
            raise ValueError(f"Unknown SAT engine: {oracle_name!r}")
        if conflict_budget is not None and conflict_budget < 0:
            raise ValueError(f"Conflict budget must not be negative; "
                             f"was {conflict_budget}")
        self.oracle_name = oracle_name
        self.extended = extended
        self.conflict_budget = conflict_budget

    def encode(self, puzzle: Grid) -> SudokuSat:
        """
        Builds the SAT instance for a puzzle.
        """
        sudoku = SudokuSat()
        add_minimal_sudoku_constraints(sudoku)
        if self.extended:
            add_extended_sudoku_constraints(sudoku)
        add_puzzle_clues(sudoku, puzzle)
        return sudoku

    def solve(self, puzzle: Grid) -> Optional[Grid]:
        check_well_formed(puzzle)
        sudoku = self.encode(puzzle)

        oracle = SatOracle(name=self.oracle_name,
                           conflict_budget=self.conflict_budget)
        oracle.add_cnf(sudoku.clone_cnf().clauses)
        verdict = oracle.solve()

        if verdict == Verdict.SAT:
            return extract_grid(sudoku, oracle.full_solution())
        if verdict == Verdict.UNSAT:
            log.info("Unsatisfiable; no solution")
        else:
            log.warning(f"SAT engine {self.oracle_name} was interrupted; "
                        f"no solution available")
        return None
