#!/usr/bin/env python

"""
sudoku_sat/backtracking.py

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

**Plain chronological backtracking.**

Fill the first empty cell (row-major) with the lowest digit that fits, recurse,
and undo on failure. Given the same puzzle it always finds the same answer:
the digit-ascending, lexicographically smallest completion. Slow on hard
puzzles; use the SAT solver for those.

"""

import logging
from typing import Optional

from sudoku_sat.base import SudokuSolver
from sudoku_sat.common import DIGITS, EMPTY, N
from sudoku_sat.grid import (
    Cell,
    Grid,
    can_place,
    check_well_formed,
    copy_grid,
    find_conflicts,
)

log = logging.getLogger(__name__)


def find_empty(grid: Grid) -> Optional[Cell]:
    """
    The first empty cell in row-major order, or ``None``.
    """
    for r in range(N):
        for c in range(N):
            if grid[r][c] == EMPTY:
                return r, c
    return None


class BacktrackingSudokuSolver(SudokuSolver):
    """
    Solves by depth-first search directly on the grid.
    """
    name = "backtracking"

    def __init__(self) -> None:
        self.n_placements = 0

    def _solve_grid(self, grid: Grid) -> bool:
        """
        Fills ``grid`` in place. Returns: solved?

        Each level of recursion fills one more empty cell, so the depth is at
        most 81.
        """
        cell = find_empty(grid)
        if cell is None:
            return True
        row, col = cell
        for d in DIGITS:
            if can_place(grid, row, col, d):
                grid[row][col] = d
                self.n_placements += 1
                if self._solve_grid(grid):
                    return True
                grid[row][col] = EMPTY
        return False

    def solve(self, puzzle: Grid) -> Optional[Grid]:
        check_well_formed(puzzle)
        conflicts = find_conflicts(puzzle)
        if conflicts:
            # Search never re-checks clues against each other.
            log.info(f"Clues conflict, e.g. at {conflicts[0]}; no solution")
            return None
        grid = copy_grid(puzzle)
        self.n_placements = 0
        solved = self._solve_grid(grid)
        log.debug(f"Backtracking made {self.n_placements} placement(s)")
        if not solved:
            log.info("Search space exhausted; no solution")
            return None
        return grid
