#!/usr/bin/env python

"""
sudoku_sat/oracle.py

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

**A single solve against an external CDCL SAT solver, via PySAT.**

A session goes::

    FRESH --add_cnf()--> CNF_LOADED --solve()--> RUNNING
        --> SAT | UNSAT | INTERRUPTED

and the verdict is final. Anything the engine throws while solving counts as
INTERRUPTED; nothing is retried.

"""

from enum import Enum
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set

from pysat.solvers import Solver, SolverNames

from sudoku_sat.common import OracleFailure

log = logging.getLogger(__name__)

DEFAULT_ORACLE = "cadical153"


# =============================================================================
# Verdicts and states
# =============================================================================

class Verdict(Enum):
    SAT = "sat"
    UNSAT = "unsat"
    INTERRUPTED = "interrupted"


class OracleState(Enum):
    FRESH = "fresh"
    CNF_LOADED = "cnf_loaded"
    RUNNING = "running"
    SAT = "sat"
    UNSAT = "unsat"
    INTERRUPTED = "interrupted"


VERDICT_TO_STATE = {
    Verdict.SAT: OracleState.SAT,
    Verdict.UNSAT: OracleState.UNSAT,
    Verdict.INTERRUPTED: OracleState.INTERRUPTED,
}


def known_oracle_names() -> Set[str]:
    """
    All the engine names (and aliases) that PySAT accepts.
    """
    names = set()  # type: Set[str]
    for attr, value in vars(SolverNames).items():
        if attr.startswith("_") or not isinstance(value, tuple):
            continue
        names.update(value)
    return names


# =============================================================================
# Assignment
# =============================================================================

class Assignment(object):
    """
    Truth values for variables, from a PySAT model. Variables the model does
    not mention are unassigned.
    """

    def __init__(self, model: Iterable[int]) -> None:
        self._values = {}  # type: Dict[int, bool]
        for lit in model:
            self._values[abs(lit)] = lit > 0

    def __len__(self) -> int:
        return len(self._values)

    def value(self, lit: int) -> Optional[bool]:
        """
        Truth of a literal: ``True``, ``False``, or ``None`` if its variable
        is unassigned.
        """
        truth = self._values.get(abs(lit))
        if truth is None:
            return None
        return truth if lit > 0 else not truth


# =============================================================================
# SatOracle
# =============================================================================

class SatOracle(object):
    """
    One solve, start to finish, against a PySAT engine.
    """

    def __init__(self, name: str = DEFAULT_ORACLE,
                 conflict_budget: Optional[int] = None) -> None:
        """
        Args:
            name:
                PySAT engine name, e.g. ``cadical153``, ``glucose4``,
                ``minisat22``
            conflict_budget:
                if set, give up (INTERRUPTED) after this many conflicts
        """
        self.name = name
        self.conflict_budget = conflict_budget
        self.state = OracleState.FRESH
        self._clauses = []  # type: List[List[int]]
        self._model = None  # type: Optional[List[int]]

    def _require(self, *states: OracleState) -> None:
        if self.state not in states:
            raise OracleFailure(
                f"Oracle is {self.state.value}; this needs one of "
                f"{[s.value for s in states]}")

    def add_cnf(self, clauses: Iterable[Sequence[int]]) -> None:
        """
        Loads clauses. May be called repeatedly before :meth:`solve`.
        """
        self._require(OracleState.FRESH, OracleState.CNF_LOADED)
        self._clauses.extend(list(clause) for clause in clauses)
        self.state = OracleState.CNF_LOADED

    def _run_engine(self) -> Verdict:
        with Solver(name=self.name, bootstrap_with=self._clauses) as engine:
            if self.conflict_budget is None:
                outcome = engine.solve()
            else:
                engine.conf_budget(self.conflict_budget)
                outcome = engine.solve_limited()
            if outcome is None:
                log.warning(f"{self.name}: conflict budget of "
                            f"{self.conflict_budget} exhausted")
                return Verdict.INTERRUPTED
            if not outcome:
                return Verdict.UNSAT
            self._model = engine.get_model()
            if self._model is None:
                log.error(f"{self.name}: satisfiable, but returned no model")
                return Verdict.INTERRUPTED
            return Verdict.SAT

    def solve(self) -> Verdict:
        """
        Runs the engine to a verdict. Blocks until done.
        """
        self._require(OracleState.CNF_LOADED)
        self.state = OracleState.RUNNING
        log.debug(f"Running {self.name} on {len(self._clauses)} clauses")
        try:
            verdict = self._run_engine()
        except Exception as e:
            log.error(f"SAT engine {self.name} failed: {e!r}")
            verdict = Verdict.INTERRUPTED
        self.state = VERDICT_TO_STATE[verdict]
        log.debug(f"{self.name} verdict: {verdict.value}")
        return verdict

    def full_solution(self) -> Assignment:
        """
        The satisfying assignment. Only valid after a SAT verdict.
        """
        self._require(OracleState.SAT)
        return Assignment(self._model)
