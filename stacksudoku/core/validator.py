"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > board.size:
        return False

    if value in board.get_row(row):
        return False

    if value in board.get_col(col):
        return False

    if value in board.get_box(row, col):
        return False

    return True


def is_valid_board(board: SudokuBoard) -> bool:
    """Check if the entire board state is valid (no conflicts)."""
    return board.is_valid()


def preserves_clues(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """True if every non-empty cell of ``puzzle`` holds the same value in ``solution``."""
    filled = puzzle.grid != 0
    return bool((puzzle.grid[filled] == solution.grid[filled]).all())


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    return preserves_clues(puzzle, solution) and solution.is_solved()
