"""Candidate engine: per-cell legal digits as 9-bit masks."""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Tuple

from .board import SudokuBoard, SIZE, BOX_SIZE, NUM_CELLS


ALL_DIGITS = (1 << SIZE) - 1

# DIGIT_BITS[v] is the mask bit of digit v; index 0 (empty) maps to no bit.
DIGIT_BITS = np.array([0] + [1 << d for d in range(SIZE)], dtype=np.uint16)


def nth_digit(mask: int, n: int) -> Optional[int]:
    """
    Return the (n+1)-th smallest digit set in ``mask`` (n is zero-based).

    Returns None if fewer than n + 1 digits are set.
    """
    count = 0
    for digit in range(1, SIZE + 1):
        if mask & (1 << (digit - 1)):
            if count == n:
                return digit
            count += 1
    return None


def mask_to_digits(mask: int) -> List[int]:
    """Digits present in a mask, ascending."""
    return [d for d in range(1, SIZE + 1) if mask & (1 << (d - 1))]


class CandidateGrid:
    """
    Grid state plus the candidate table used by the backtracking search.

    The engine works on the flat 81-cell view of a board, so ``set`` and
    ``unset`` write straight through to ``board.grid``. Candidate masks of
    filled cells are always 0.
    """

    def __init__(self, board: SudokuBoard):
        self.board = board
        self.cells = board.cells()
        self.cands = np.zeros(NUM_CELLS, dtype=np.uint16)
        self.compute_all()

    def compute_all(self) -> None:
        """Recompute the candidate set of every empty cell from scratch."""
        grid = self.cells.reshape(SIZE, SIZE)
        masks = DIGIT_BITS[grid]

        row_used = np.bitwise_or.reduce(masks, axis=1)
        col_used = np.bitwise_or.reduce(masks, axis=0)

        # (box_row, row_in_box, box_col, col_in_box)
        blocks = masks.reshape(BOX_SIZE, BOX_SIZE, BOX_SIZE, BOX_SIZE)
        box_used = np.bitwise_or.reduce(np.bitwise_or.reduce(blocks, axis=3), axis=1)
        box_used = box_used.repeat(BOX_SIZE, axis=0).repeat(BOX_SIZE, axis=1)

        used = row_used[:, None] | col_used[None, :] | box_used
        cands = np.uint16(ALL_DIGITS) & ~used
        cands[grid != 0] = 0
        self.cands[:] = cands.reshape(NUM_CELLS)

    def nth_candidate(self, index: int, n: int) -> Optional[int]:
        """The n-th (zero-based) candidate of a cell in ascending order, or None."""
        return nth_digit(int(self.cands[index]), n)

    def candidates(self, index: int) -> List[int]:
        """Candidate digits of a cell, ascending."""
        return mask_to_digits(int(self.cands[index]))

    def set(self, index: int, value: int) -> None:
        """
        Commit ``value`` at ``index``.

        Clears the cell's own candidate set and prunes ``value`` from every
        peer in the same row, column and box.
        """
        self.cells[index] = value
        row, col = divmod(index, SIZE)
        box_row = row // BOX_SIZE * BOX_SIZE
        box_col = col // BOX_SIZE * BOX_SIZE

        keep = np.uint16(ALL_DIGITS & ~(1 << (value - 1)))
        table = self.cands.reshape(SIZE, SIZE)
        table[row, :] &= keep
        table[:, col] &= keep
        table[box_row:box_row + BOX_SIZE, box_col:box_col + BOX_SIZE] &= keep
        self.cands[index] = 0

    def unset(self, index: int) -> None:
        """Clear a cell and recompute all candidates."""
        self.cells[index] = 0
        self.compute_all()

    def is_feasible(self) -> bool:
        """False if some empty cell has no candidates left."""
        return not bool(np.any((self.cells == 0) & (self.cands == 0)))

    def empty_span(self) -> Tuple[int, int]:
        """
        Range of cells the search has to assign.

        Returns (begin, end): the first empty index and one past the last
        empty index. Both are 81 when the grid is full.
        """
        empties = np.flatnonzero(self.cells == 0)
        if empties.size == 0:
            return NUM_CELLS, NUM_CELLS
        return int(empties[0]), int(empties[-1]) + 1

    def snapshot(self) -> np.ndarray:
        """Read-only view of the 81 cells."""
        view = self.cells.view()
        view.flags.writeable = False
        return view
