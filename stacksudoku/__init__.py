"""Sudoku solver: candidate propagation plus trial-stack backtracking."""

from .core import SudokuBoard, CandidateGrid
from .solvers import TrialStackSolver, RecursiveSolver, SearchStatus, SolverStats

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "CandidateGrid",
    "TrialStackSolver",
    "RecursiveSolver",
    "SearchStatus",
    "SolverStats",
]
