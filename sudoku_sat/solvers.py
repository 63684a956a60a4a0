#!/usr/bin/env python

"""
sudoku_sat/solvers.py

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

**Choosing a solving strategy at runtime.**

The set of strategies is closed: each has a :class:`SolverKind` and one arm in
:func:`make_solver`. A new strategy needs both.

"""

from enum import Enum
import logging
from typing import Any, List, Union

from sudoku_sat.backtracking import BacktrackingSudokuSolver
from sudoku_sat.base import SudokuSolver
from sudoku_sat.sat import SatSudokuSolver

log = logging.getLogger(__name__)


class SolverKind(Enum):
    SAT = "sat"
    BACKTRACKING = "backtracking"
    EXACT_COVER = "exact_cover"


def solver_kind_names() -> List[str]:
    return [kind.value for kind in SolverKind]


def make_solver(kind: Union[SolverKind, str], **options: Any) -> SudokuSolver:
    """
    Creates a solver.

    Args:
        kind:
            a :class:`SolverKind`, or its string value (e.g. ``"sat"``)
        options:
            constructor options; only the SAT solver takes any
            (``oracle_name``, ``extended``, ``conflict_budget``)

    Raises:
        :exc:`ValueError` for an unknown kind, or options given to a solver
        that takes none
    """
    if not isinstance(kind, SolverKind):
        try:
            kind = SolverKind(kind)
        except ValueError:
            raise ValueError(f"Unknown solver kind: {kind!r}; "
                             f"choose from {solver_kind_names()}")
    if kind != SolverKind.SAT and options:
        raise ValueError(f"Solver {kind.value!r} takes no options; "
                         f"got {sorted(options)}")

    if kind == SolverKind.SAT:
        solver = SatSudokuSolver(**options)
    elif kind == SolverKind.BACKTRACKING:
        solver = BacktrackingSudokuSolver()
    elif kind == SolverKind.EXACT_COVER:
        # Loads the CBC library, so only on request.
        from sudoku_sat.exact_cover import ExactCoverSudokuSolver
        solver = ExactCoverSudokuSolver()
    else:
        raise ValueError(f"Unhandled solver kind: {kind!r}")
    log.debug(f"Created {solver} solver")
    return solver
