#!/usr/bin/env python

"""
sudoku_sat/common.py

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

Common constants, exceptions and functions for the Sudoku solvers.

"""

import logging
import sys
import traceback
from typing import Callable

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

RANK = 3
N = RANK ** 2  # 9
DIGITS = range(1, N + 1)
EMPTY = 0

UNKNOWN = "."
NEWLINE = "\n"
SPACE = " "
HASH = "#"
ALMOST_ONE = 0.99

EXIT_FAILURE = 1
EXIT_SUCCESS = 0


# =============================================================================
# Exceptions
# =============================================================================

class InvalidInput(ValueError):
    """
    The caller broke a precondition: a grid of the wrong shape, or a cell
    value outside ``0..9``.
    """
    pass


class OracleFailure(Exception):
    """
    The SAT oracle session was driven out of order (e.g. asking for a
    solution before a satisfying verdict).
    """
    pass


class InvariantViolation(Exception):
    """
    A satisfying assignment did not decode to exactly one digit per cell.
    That means the clause encoder is broken.
    """
    pass


# =============================================================================
# Generic helper functions
# =============================================================================

def run_guard(function: Callable[[], None]) -> None:
    try:
        function()
    except Exception as e:
        log.critical(str(e))
        traceback.print_exc()
        sys.exit(EXIT_FAILURE)
