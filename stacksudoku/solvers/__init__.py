"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, SearchStatus
from .stack_solver import TrialStackSolver, Trial
from .recursive_solver import RecursiveSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SearchStatus",
    "TrialStackSolver",
    "Trial",
    "RecursiveSolver",
]
