"""
End-to-end tests of the SAT and backtracking solvers, and the factory.
"""

import random

import pytest

import sudoku_sat.oracle as oracle_module
from sudoku_sat.backtracking import BacktrackingSudokuSolver, find_empty
from sudoku_sat.common import InvalidInput
from sudoku_sat.grid import copy_grid, empty_grid, is_complete
from sudoku_sat.sat import SatSudokuSolver
from sudoku_sat.solvers import SolverKind, make_solver, solver_kind_names

from conftest import (
    SOLVED_GRID,
    STANDARD_PUZZLE,
    contradictory_puzzle,
    has_unique_solution,
    random_puzzle,
    single_clue_puzzle,
)

STRATEGIES = [SolverKind.SAT, SolverKind.BACKTRACKING]


def assert_solves(puzzle, solution):
    assert solution is not None
    assert is_complete(solution)
    for r in range(9):
        for c in range(9):
            if puzzle[r][c]:
                assert solution[r][c] == puzzle[r][c]


# =============================================================================
# Scenarios
# =============================================================================

def test_standard_puzzle_agrees_across_strategies(standard_puzzle):
    sat_solution = make_solver(SolverKind.SAT).solve(standard_puzzle)
    bt_solution = make_solver(SolverKind.BACKTRACKING).solve(standard_puzzle)
    assert_solves(STANDARD_PUZZLE, sat_solution)
    assert sat_solution == bt_solution
    assert has_unique_solution(STANDARD_PUZZLE, sat_solution)
    assert standard_puzzle == STANDARD_PUZZLE  # input untouched


@pytest.mark.parametrize("kind", STRATEGIES)
def test_already_solved_passes_through(kind, solved_grid):
    solution = make_solver(kind).solve(solved_grid)
    assert solution == SOLVED_GRID
    assert solution is not solved_grid


@pytest.mark.parametrize("kind", STRATEGIES)
def test_empty_grid(kind):
    assert_solves(empty_grid(), make_solver(kind).solve(empty_grid()))


def test_backtracking_empty_grid_is_lexicographically_first():
    solution = BacktrackingSudokuSolver().solve(empty_grid())
    assert solution[0] == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert solution[1] == [4, 5, 6, 7, 8, 9, 1, 2, 3]


@pytest.mark.parametrize("kind", STRATEGIES)
def test_contradictory_clues(kind):
    assert make_solver(kind).solve(contradictory_puzzle()) is None


@pytest.mark.parametrize("kind", STRATEGIES)
def test_inconsistent_full_grid(kind, solved_grid):
    solved_grid[0][0] = solved_grid[0][1]
    assert make_solver(kind).solve(solved_grid) is None


@pytest.mark.parametrize("kind", STRATEGIES)
def test_infeasible_without_direct_conflict(kind):
    # Row 0 needs a 9 somewhere, but every empty cell in it sees a 9.
    puzzle = empty_grid()
    puzzle[0] = [1, 2, 3, 4, 5, 6, 7, 0, 0]
    puzzle[3][7] = 9
    puzzle[7][8] = 9
    assert make_solver(kind).solve(puzzle) is None


@pytest.mark.parametrize("kind", STRATEGIES)
def test_single_clue(kind):
    puzzle = single_clue_puzzle()
    solution = make_solver(kind).solve(puzzle)
    assert_solves(puzzle, solution)
    assert solution[4][4] == 7


@pytest.mark.parametrize("kind", STRATEGIES)
@pytest.mark.parametrize("value", [10, -1, "7", None])
def test_bad_cell_values_are_rejected(kind, value):
    puzzle = empty_grid()
    puzzle[3][3] = value
    with pytest.raises(InvalidInput):
        make_solver(kind).solve(puzzle)


@pytest.mark.parametrize("kind", STRATEGIES)
def test_wrong_shape_is_rejected(kind):
    with pytest.raises(InvalidInput):
        make_solver(kind).solve([[0] * 9] * 8)


def test_clue_preservation_and_agreement_fuzz():
    rng = random.Random(12345)
    sat_solver = make_solver(SolverKind.SAT)
    bt_solver = make_solver(SolverKind.BACKTRACKING)
    n_unique = 0
    for _ in range(100):
        puzzle = random_puzzle(rng, n_blanks=rng.randint(10, 50))
        sat_solution = sat_solver.solve(puzzle)
        bt_solution = bt_solver.solve(puzzle)
        assert_solves(puzzle, sat_solution)
        assert_solves(puzzle, bt_solution)
        if has_unique_solution(puzzle, sat_solution):
            n_unique += 1
            assert sat_solution == bt_solution
    assert n_unique > 0


# =============================================================================
# SAT solver options
# =============================================================================

@pytest.mark.parametrize("oracle_name", ["cadical153", "glucose4",
                                         "minisat22"])
def test_sat_engines_agree(oracle_name):
    solution = SatSudokuSolver(oracle_name=oracle_name).solve(STANDARD_PUZZLE)
    assert solution == BacktrackingSudokuSolver().solve(STANDARD_PUZZLE)


def test_sat_extended_encoding(standard_puzzle):
    plain = SatSudokuSolver().solve(standard_puzzle)
    extended = SatSudokuSolver(extended=True).solve(standard_puzzle)
    assert plain == extended
    assert SatSudokuSolver(extended=True).solve(contradictory_puzzle()) is None


def test_sat_encode_counts(standard_puzzle):
    assert SatSudokuSolver().encode(empty_grid()).n_clauses == 8829
    assert SatSudokuSolver().encode(standard_puzzle).n_clauses == 8829 + 27
    assert SatSudokuSolver(extended=True).encode(empty_grid()).n_clauses == \
        8829 + 3159


def test_sat_unknown_engine():
    with pytest.raises(ValueError):
        SatSudokuSolver(oracle_name="no_such_solver")


def test_sat_negative_budget():
    with pytest.raises(ValueError):
        SatSudokuSolver(conflict_budget=-1)


def test_sat_interrupted_gives_none(monkeypatch, standard_puzzle):
    class Broken(object):
        def __init__(self, *args, **kwargs):
            raise OSError("engine unavailable")

    monkeypatch.setattr(oracle_module, "Solver", Broken)
    assert SatSudokuSolver().solve(standard_puzzle) is None


def test_solvers_are_reusable():
    solver = make_solver(SolverKind.SAT)
    first = solver.solve(STANDARD_PUZZLE)
    assert solver.solve(contradictory_puzzle()) is None
    assert solver.solve(STANDARD_PUZZLE) == first


def test_find_empty():
    assert find_empty(SOLVED_GRID) is None
    assert find_empty(STANDARD_PUZZLE) == (0, 0)
    grid = copy_grid(SOLVED_GRID)
    grid[5][2] = 0
    assert find_empty(grid) == (5, 2)


# =============================================================================
# Factory
# =============================================================================

def test_factory_kinds():
    assert isinstance(make_solver(SolverKind.SAT), SatSudokuSolver)
    assert isinstance(make_solver("sat"), SatSudokuSolver)
    assert isinstance(make_solver("backtracking"), BacktrackingSudokuSolver)
    assert solver_kind_names() == ["sat", "backtracking", "exact_cover"]


def test_factory_passes_sat_options():
    solver = make_solver(SolverKind.SAT, oracle_name="glucose4",
                         extended=True, conflict_budget=5000)
    assert solver.oracle_name == "glucose4"
    assert solver.extended
    assert solver.conflict_budget == 5000


def test_factory_unknown_kind():
    with pytest.raises(ValueError):
        make_solver("dancing_links")


def test_factory_rejects_options_for_backtracking():
    with pytest.raises(ValueError):
        make_solver(SolverKind.BACKTRACKING, extended=True)
