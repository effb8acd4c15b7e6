"""Recursive backtracking solver over the same candidate engine."""

from __future__ import annotations
from typing import List, Optional
import logging

from .base_solver import BaseSolver, SearchStatus
from ..core.board import SudokuBoard
from ..core.candidates import CandidateGrid

log = logging.getLogger(__name__)


class RecursiveSolver(BaseSolver):
    """
    Depth-first search using recursion instead of an explicit stack.

    Visits the empty cells in index order, tries candidates in ascending
    order and runs the forward check before every commit, so it finds the
    same solution as TrialStackSolver.
    """

    name = "Recursive"

    def __init__(self, forward_check: bool = True, track_memory: bool = True):
        super().__init__(track_memory=track_memory)
        self.forward_check = forward_check

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        engine = CandidateGrid(board)
        empties = board.get_empty_cells()
        log.debug("Searching %d empty cells", len(empties))

        solved = self._backtrack(engine, empties, 0)
        self.stats.status = SearchStatus.SOLVED if solved else SearchStatus.EXHAUSTED
        if not solved:
            log.debug("Search exhausted after %d iterations", self.stats.iterations)
        return board

    def _backtrack(self, engine: CandidateGrid, empties: List[int], depth: int) -> bool:
        """
        Fill ``empties[depth:]``.

        Returns True if a solution was found, False otherwise.
        """
        if depth == len(empties):
            return True

        self.stats.max_depth = max(self.stats.max_depth, depth + 1)
        index = empties[depth]
        attempt = 0

        while True:
            self.stats.iterations += 1
            value = engine.nth_candidate(index, attempt)
            if value is None or (self.forward_check and not engine.is_feasible()):
                self.stats.backtracks += 1
                return False

            engine.set(index, value)
            self.stats.nodes_explored += 1
            if self._backtrack(engine, empties, depth + 1):
                return True

            engine.unset(index)
            attempt += 1
