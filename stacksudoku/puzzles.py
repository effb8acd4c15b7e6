"""Embedded puzzles used by the CLI and the benchmark."""

from __future__ import annotations
from typing import Dict

from .core.board import SudokuBoard


# Solved by `stacksudoku solve` when no puzzle is given.
EMBEDDED_PUZZLE = [
    5, 3, 0, 0, 7, 0, 0, 0, 0,
    6, 0, 0, 1, 9, 5, 0, 0, 0,
    0, 9, 8, 0, 0, 0, 0, 6, 0,
    8, 0, 0, 0, 6, 0, 0, 0, 3,
    4, 0, 0, 8, 0, 3, 0, 0, 1,
    7, 0, 0, 0, 2, 0, 0, 0, 6,
    0, 6, 0, 0, 0, 0, 2, 8, 0,
    0, 0, 0, 4, 1, 9, 0, 0, 5,
    0, 0, 0, 0, 8, 0, 0, 7, 9,
]

SAMPLE_PUZZLES: Dict[str, str] = {
    "classic": "530070000600195000098000060800060003400803001700020006060000280000419005000080079",
    "euler-01": "003020600900305001001806400008102900700000008006708200002609500800203009005010300",
    "euler-02": "200080300060070084030500209000105408000000000402706000301007040720040060004010003",
}


def embedded_board() -> SudokuBoard:
    """Board for the embedded puzzle."""
    return SudokuBoard.from_list(EMBEDDED_PUZZLE)


def load_puzzles(path: str) -> Dict[str, SudokuBoard]:
    """
    Load puzzles from a text file, one 81-character puzzle per line.

    Blank lines and lines starting with ``#`` are skipped. Puzzles are keyed
    by their 1-based line number.
    """
    puzzles = {}
    with open(path, "r") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                puzzles[f"line-{lineno}"] = SudokuBoard.from_string(line)
            except ValueError as e:
                raise ValueError(f"{path}:{lineno}: {e}") from e
    return puzzles


def sample_boards() -> Dict[str, SudokuBoard]:
    """The built-in sample puzzles as boards."""
    return {name: SudokuBoard.from_string(s) for name, s in SAMPLE_PUZZLES.items()}
