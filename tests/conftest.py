"""
Shared puzzles and helpers for the tests.
"""

import random
from typing import List

import pytest

from sudoku_sat.grid import Grid, copy_grid, empty_grid
from sudoku_sat.oracle import SatOracle, Verdict
from sudoku_sat.satmodel import (
    SudokuSat,
    add_minimal_sudoku_constraints,
    add_puzzle_clues,
)

STANDARD_PUZZLE = [
    [0, 3, 6, 0, 0, 0, 9, 0, 0],
    [1, 0, 0, 5, 3, 0, 2, 0, 0],
    [0, 0, 4, 0, 0, 0, 0, 0, 6],
    [0, 4, 7, 0, 0, 0, 0, 5, 3],
    [0, 0, 0, 0, 0, 8, 0, 6, 9],
    [6, 9, 0, 0, 4, 0, 0, 0, 0],
    [0, 0, 0, 8, 0, 7, 0, 0, 1],
    [0, 0, 2, 0, 0, 0, 0, 0, 4],
    [0, 8, 5, 0, 0, 0, 0, 2, 0],
]

SOLVED_GRID = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def contradictory_puzzle() -> Grid:
    grid = empty_grid()
    grid[0][0] = 5
    grid[0][1] = 5
    return grid


def single_clue_puzzle() -> Grid:
    grid = empty_grid()
    grid[4][4] = 7
    return grid


def shuffled_solution(rng: random.Random) -> Grid:
    """
    A random valid complete grid, made from :data:`SOLVED_GRID` by moves that
    keep it valid: relabelling digits, swapping rows within a band, swapping
    bands, and the same for columns, and transposing.
    """
    digits = list(range(1, 10))
    rng.shuffle(digits)
    relabel = {old: new for old, new in zip(range(1, 10), digits)}

    def order() -> List[int]:
        bands = [0, 1, 2]
        rng.shuffle(bands)
        result = []
        for band in bands:
            within = [0, 1, 2]
            rng.shuffle(within)
            result.extend(band * 3 + i for i in within)
        return result

    rows = order()
    cols = order()
    grid = [[relabel[SOLVED_GRID[r][c]] for c in cols] for r in rows]
    if rng.random() < 0.5:
        grid = [list(col) for col in zip(*grid)]
    return grid


def random_puzzle(rng: random.Random, n_blanks: int) -> Grid:
    """
    A solvable puzzle: a random complete grid with ``n_blanks`` cells
    emptied. It need not have a unique solution.
    """
    grid = shuffled_solution(rng)
    cells = [(r, c) for r in range(9) for c in range(9)]
    for r, c in rng.sample(cells, n_blanks):
        grid[r][c] = 0
    return grid


def has_unique_solution(puzzle: Grid, solution: Grid) -> bool:
    """
    Is ``solution`` the only completion of ``puzzle``? Asks the SAT solver
    for a completion that differs from it somewhere.
    """
    sudoku = SudokuSat()
    add_minimal_sudoku_constraints(sudoku)
    add_puzzle_clues(sudoku, puzzle)
    sudoku.add_clause([
        -sudoku.lit(r, c, solution[r][c])
        for r in range(9) for c in range(9)
    ])
    oracle = SatOracle()
    oracle.add_cnf(sudoku.clone_cnf().clauses)
    return oracle.solve() == Verdict.UNSAT


@pytest.fixture
def standard_puzzle() -> Grid:
    return copy_grid(STANDARD_PUZZLE)


@pytest.fixture
def solved_grid() -> Grid:
    return copy_grid(SOLVED_GRID)
