"""Core module for Sudoku board representation, candidates and validation."""

from .board import SudokuBoard
from .candidates import CandidateGrid, nth_digit
from .validator import is_valid_placement, is_valid_board, validate_solution

__all__ = [
    "SudokuBoard",
    "CandidateGrid",
    "nth_digit",
    "is_valid_placement",
    "is_valid_board",
    "validate_solution",
]
