"""Sudoku board representation for the standard 9x9 grid."""

from __future__ import annotations
import re
import numpy as np
from typing import List, Optional, Sequence, Set


SIZE = 9
BOX_SIZE = 3
NUM_CELLS = SIZE * SIZE


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board.

    Cells hold 0 (empty) or a digit 1-9. The grid is stored as a (9, 9)
    numpy array; cell index ``row * 9 + col`` addresses the same data in
    row-major order.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None, strict: bool = True):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial grid of shape (9, 9) or 81 flat values.
                  If None, creates an empty board.
            strict: If True, reject clues that conflict with each other.

        Raises:
            ValueError: If the grid has the wrong shape, holds values
                        outside 0-9, or (when strict) has conflicting clues.
        """
        if grid is None:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)
            return

        arr = np.asarray(grid)
        if arr.size != NUM_CELLS or arr.shape not in ((SIZE, SIZE), (NUM_CELLS,)):
            raise ValueError(
                f"Grid must have shape ({SIZE}, {SIZE}) or ({NUM_CELLS},), got {arr.shape}"
            )
        if not np.issubdtype(arr.dtype, np.number):
            raise ValueError(f"Cell values must be numbers, got dtype {arr.dtype}")
        if not np.array_equal(arr, arr.astype(np.int64)):
            raise ValueError("Cell values must be whole numbers")
        if arr.min() < 0 or arr.max() > SIZE:
            raise ValueError(f"Cell values must be 0-{SIZE}")

        self.grid = arr.reshape(SIZE, SIZE).astype(np.int32)

        if strict and not self.is_valid():
            raise ValueError("Puzzle clues conflict in a row, column or box")

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def cells(self) -> np.ndarray:
        """Flat row-major view of the 81 cells (shares memory with the grid)."""
        return self.grid.reshape(NUM_CELLS)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all valid candidate values for an empty cell.

        Returns:
            Set of digits 1-9 that can be placed at (row, col).
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())

        return set(range(1, SIZE + 1)) - used

    def get_empty_cells(self) -> List[int]:
        """Get the flat indices of all empty cells, in increasing order."""
        return np.flatnonzero(self.grid == 0).tolist()

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        for i in range(SIZE):
            row = self.get_row(i)
            non_zero = row[row != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        for j in range(SIZE):
            col = self.get_col(j)
            non_zero = col[col != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        for box_row in range(0, SIZE, BOX_SIZE):
            for box_col in range(0, SIZE, BOX_SIZE):
                box = self.get_box(box_row, box_col)
                non_zero = box[box != 0]
                if len(non_zero) != len(set(non_zero.tolist())):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to a compact 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.cells().tolist())

    def to_list(self) -> List[int]:
        """Return the 81 cell values in row-major order."""
        return self.cells().tolist()

    @classmethod
    def from_string(cls, s: str, strict: bool = True) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
            strict: Reject conflicting clues.
        """
        s = s.strip()
        if len(s) != NUM_CELLS:
            raise ValueError(f"String length must be {NUM_CELLS}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character in puzzle: {c!r}")

        return cls(np.array(values, dtype=np.int32), strict=strict)

    @classmethod
    def from_list(cls, values: Sequence[int], strict: bool = True) -> SudokuBoard:
        """Create a board from 81 integers in row-major order."""
        if len(values) != NUM_CELLS:
            raise ValueError(f"Expected {NUM_CELLS} values, got {len(values)}")
        return cls(np.array(values, dtype=np.int32), strict=strict)

    @classmethod
    def from_2d_list(cls, data: List[List[int]], strict: bool = True) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32), strict=strict)

    @classmethod
    def from_file(cls, path: str, strict: bool = True) -> SudokuBoard:
        """
        Read a puzzle from a text file.

        Accepts either 81 integers separated by commas and/or whitespace
        (``5, 3, 0, 0, 7, ...``) or a single 81-character line.
        """
        with open(path, "r") as f:
            text = f.read()

        tokens = [t for t in re.split(r"[,\s]+", text) if t]
        if len(tokens) == 1:
            return cls.from_string(tokens[0], strict=strict)
        try:
            values = [int(t) for t in tokens]
        except ValueError as e:
            raise ValueError(f"Invalid puzzle file {path}: {e}") from e
        return cls.from_list(values, strict=strict)

    def render(self) -> str:
        """
        Render the board as text.

        Digits are separated by spaces, ``|`` separates 3-column groups and
        a ``-------+-------+-------`` line separates 3-row groups. Empty
        cells render as 0.
        """
        lines = []
        horizontal_sep = '+'.join(['-' * (BOX_SIZE * 2 + 1)] * BOX_SIZE)

        for i in range(SIZE):
            if i and i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            groups = []
            for start in range(0, SIZE, BOX_SIZE):
                groups.append(' '.join(str(v) for v in self.grid[i, start:start + BOX_SIZE]))
            lines.append(' ' + ' | '.join(groups))

        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
