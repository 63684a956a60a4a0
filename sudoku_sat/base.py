#!/usr/bin/env python

"""
sudoku_sat/base.py

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

The contract every Sudoku solving strategy meets.

"""

from typing import Optional

from sudoku_sat.grid import Grid


class SudokuSolver(object):
    """
    Base class for a solving strategy.

    A solver may be used for any number of puzzles; nothing carries over from
    one :meth:`solve` to the next.
    """
    name = "?"

    def __str__(self) -> str:
        return self.name

    def solve(self, puzzle: Grid) -> Optional[Grid]:
        """
        Solves a puzzle.

        Args:
            puzzle:
                9x9 grid of integers, ``0`` for empty cells. Not modified.

        Returns:
            a new, complete grid agreeing with every clue, or ``None`` if
            there isn't one (or the attempt failed; see the log).

        Raises:
            :exc:`sudoku_sat.common.InvalidInput` for a grid that is not
            well-formed
        """
        raise NotImplementedError
