#!/usr/bin/env python

"""
sudoku_sat/textgrid.py

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

Converts between grids and their text form, for the command line.

"""

from sudoku_sat.common import (
    EMPTY,
    HASH,
    InvalidInput,
    N,
    NEWLINE,
    RANK,
    SPACE,
    UNKNOWN,
)
from sudoku_sat.grid import Grid, empty_grid

EMPTY_SYMBOLS = (UNKNOWN, str(EMPTY))


def parse_grid(string_version: str) -> Grid:
    """
    Reads a puzzle from text.

    - Lines starting with ``#`` are comments.
    - Blank lines, and whitespace within lines, are ignored.
    - Use numbers 1-9 for known cells.
    - ``.`` or ``0`` represents an unknown cell.
    - There must then be 9 lines of 9 cells.
    """
    lines = string_version.splitlines()
    if not lines:
        raise InvalidInput("No data")

    # Remove comments
    lines = [line for line in lines if not line.strip().startswith(HASH)]

    lines = ["".join(line.split())
             for line in lines if line.strip()]  # remove blank lines/columns
    if len(lines) != N:
        raise InvalidInput(f"Must have {N} active lines; "
                           f"found {len(lines)}, which are:\n"
                           f"{lines}")

    grid = empty_grid()
    for row_zb, line in enumerate(lines):
        if len(line) != N:
            raise InvalidInput(
                f"Data line has wrong non-blank length: should be {N}, "
                f"but is {len(line)} ({line!r})")
        for col_zb, symbol in enumerate(line):
            if symbol in EMPTY_SYMBOLS:
                continue
            if not symbol.isdigit():
                raise InvalidInput(
                    f"Bad symbol {symbol!r} at "
                    f"(row={row_zb + 1}, col={col_zb + 1})")
            grid[row_zb][col_zb] = int(symbol)
    return grid


def format_grid(grid: Grid) -> str:
    """
    Text version of a grid, with boxes separated by spaces and blank lines.
    """
    x = ""
    for row_zb in range(N):
        for col_zb in range(N):
            value = grid[row_zb][col_zb]
            x += UNKNOWN if value == EMPTY else str(value)
            if col_zb % RANK == RANK - 1 and col_zb < N - 1:
                x += SPACE
        if row_zb < N - 1:
            x += NEWLINE
            if row_zb % RANK == RANK - 1:
                x += NEWLINE
    return x
