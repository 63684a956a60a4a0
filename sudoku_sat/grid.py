#!/usr/bin/env python

"""
sudoku_sat/grid.py

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

**The 9x9 Sudoku grid.**

A grid is a list of 9 rows, each a list of 9 integers. ``0`` means an empty
cell; ``1`` to ``9`` are digits. Terminology:

- *well-formed*: the right shape, every entry in ``0..9``;
- *consistent*: no nonzero digit repeated within a row, column or box;
- *complete*: consistent, and no empty cells.

"""

from itertools import combinations
from typing import Any, Generator, List, Tuple

from sudoku_sat.common import EMPTY, InvalidInput, N, RANK

Grid = List[List[int]]
Cell = Tuple[int, int]


# =============================================================================
# Box
# =============================================================================

class Box(object):
    """
    Represents a 3x3 box within the Sudoku grid.
    """
    def __init__(self, box_zb: int) -> None:
        """
        Boxes are numbered 0-8, left to right, then top to bottom.

        Args:
            box_zb: box number, as above; zero-based
        """
        assert 0 <= box_zb < N, (
            f"box_zb was {box_zb}; must be in range 0 to {N - 1} inclusive"
        )
        self.box_zb = box_zb

    def __str__(self) -> str:
        """
        Coordinate-based description for a 3x3 box.
        """
        return f"{{{self.boxrow + 1},{self.boxcol + 1}}}"

    def __repr__(self) -> str:
        return self.__str__()

    def __eq__(self, other: "Box") -> bool:
        return self.box_zb == other.box_zb

    def __hash__(self) -> int:
        return hash(self.box_zb)

    @property
    def boxrow(self) -> int:
        """
        Zero-based row number of the box (not its cells).
        """
        return self.box_zb // RANK

    @property
    def boxcol(self) -> int:
        """
        Zero-based column number of the box (not its cells).
        """
        return self.box_zb % RANK

    def top_left_cell(self) -> Cell:
        """
        Returns ``row_zb, col_zb`` for the top-left cell in the 3x3 box.
        """
        return self.boxrow * RANK, self.boxcol * RANK

    @classmethod
    def containing(cls, row_zb: int, col_zb: int) -> "Box":
        """
        Returns the box containing this cell.

        Args:
            row_zb: zero-based row number
            col_zb: zero-based column number
        """
        assert 0 <= row_zb < N
        assert 0 <= col_zb < N
        return cls.from_boxrowcol(row_zb // RANK, col_zb // RANK)

    @classmethod
    def from_boxrowcol(cls, boxrow: int, boxcol: int) -> "Box":
        """
        Returns the box at this boxrow/boxcol.
        """
        assert 0 <= boxrow < RANK
        assert 0 <= boxcol < RANK
        return cls(box_zb=boxrow * RANK + boxcol)

    @classmethod
    def all_boxes(cls) -> List["Box"]:
        return [cls(box_zb=b) for b in range(N)]

    def gen_cells(self) -> Generator[Cell, None, None]:
        """
        Generates ``(row_zb, col_zb)`` tuples for all the cells in this box,
        in scan order.
        """
        row_min, col_min = self.top_left_cell()
        for r in range(row_min, row_min + RANK):
            for c in range(col_min, col_min + RANK):
                yield r, c


# =============================================================================
# Construction
# =============================================================================

def empty_grid() -> Grid:
    return [[EMPTY for _col_zb in range(N)] for _row_zb in range(N)]


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def clue_cells(grid: Grid) -> Generator[Tuple[int, int, int], None, None]:
    """
    Generates ``(row_zb, col_zb, digit)`` for every nonzero cell, in scan
    order.
    """
    for r in range(N):
        for c in range(N):
            digit = grid[r][c]
            if digit != EMPTY:
                yield r, c, digit


# =============================================================================
# Predicates
# =============================================================================

def _well_formed_problem(grid: Any) -> str:
    """
    Returns a description of the first thing wrong with the grid's shape or
    contents, or an empty string if there is nothing wrong.
    """
    if not isinstance(grid, (list, tuple)) or len(grid) != N:
        return f"Grid must have {N} rows"
    for r, row in enumerate(grid):
        if not isinstance(row, (list, tuple)) or len(row) != N:
            return f"Row {r + 1} must have {N} cells; it is {row!r}"
        for c, value in enumerate(row):
            # bool is an int subclass, but True is not a digit
            if (not isinstance(value, int) or isinstance(value, bool) or
                    not EMPTY <= value <= N):
                return (f"Cell (row={r + 1}, col={c + 1}) holds {value!r}; "
                        f"must be an integer from {EMPTY} to {N}")
    return ""


def is_well_formed(grid: Any) -> bool:
    return not _well_formed_problem(grid)


def check_well_formed(grid: Any) -> None:
    """
    Raises :exc:`InvalidInput` unless the grid is well-formed.
    """
    problem = _well_formed_problem(grid)
    if problem:
        raise InvalidInput(problem)


def gen_units() -> Generator[List[Cell], None, None]:
    """
    Generates every row, column and box, each as a list of cells.
    """
    for r in range(N):
        yield [(r, c) for c in range(N)]
    for c in range(N):
        yield [(r, c) for r in range(N)]
    for box in Box.all_boxes():
        yield list(box.gen_cells())


def find_conflicts(grid: Grid) -> List[Tuple[Cell, Cell]]:
    """
    Returns pairs of cells that share a row, column or box and hold the same
    nonzero digit. A pair sharing both a row and a box is reported twice.
    """
    conflicts = []  # type: List[Tuple[Cell, Cell]]
    for unit in gen_units():
        for (r1, c1), (r2, c2) in combinations(unit, 2):
            digit = grid[r1][c1]
            if digit != EMPTY and digit == grid[r2][c2]:
                conflicts.append(((r1, c1), (r2, c2)))
    return conflicts


def is_consistent(grid: Grid) -> bool:
    for unit in gen_units():
        digits = [grid[r][c] for r, c in unit if grid[r][c] != EMPTY]
        if len(digits) != len(set(digits)):
            return False
    return True


def is_complete(grid: Grid) -> bool:
    return (
        all(value != EMPTY for row in grid for value in row) and
        is_consistent(grid)
    )


def can_place(grid: Grid, row_zb: int, col_zb: int, digit: int) -> bool:
    """
    Could ``digit`` go at this cell without repeating a digit already placed
    in its row, column or box? The cell's own contents are not consulted.
    """
    for c in range(N):
        if c != col_zb and grid[row_zb][c] == digit:
            return False
    for r in range(N):
        if r != row_zb and grid[r][col_zb] == digit:
            return False
    for r, c in Box.containing(row_zb, col_zb).gen_cells():
        if (r, c) != (row_zb, col_zb) and grid[r][c] == digit:
            return False
    return True
