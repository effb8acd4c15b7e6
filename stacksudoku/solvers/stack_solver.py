"""Iterative depth-first search with an explicit trial stack."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging

from .base_solver import BaseSolver, SearchStatus
from ..core.board import SudokuBoard
from ..core.candidates import CandidateGrid

log = logging.getLogger(__name__)


@dataclass
class Trial:
    """A cell filled by search and how many of its candidates were tried."""
    index: int
    attempts: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.index, self.attempts)


class TrialStackSolver(BaseSolver):
    """
    Backtracking solver driven by a cursor and a stack of trials.

    The cursor walks the cells in index order from the first empty cell to
    one past the last empty cell. Each empty cell it reaches is filled with
    its smallest candidate and pushed onto the stack. On a dead end the
    cursor jumps back to the top trial, which is cleared and retried with
    its next candidate; a trial with no candidates left is popped.

    Features:
    - Incremental candidate pruning on commit, full recomputation on undo
    - Forward check: every commit is preceded by a scan for empty cells
      with no candidates left
    - Ascending candidate order, so the result is deterministic
    """

    name = "TrialStack"

    def __init__(self, forward_check: bool = True, track_memory: bool = True):
        """
        Initialize the solver.

        Args:
            forward_check: If True, back off as soon as any empty cell has
                           run out of candidates.
            track_memory: Record peak memory with tracemalloc.
        """
        super().__init__(track_memory=track_memory)
        self.forward_check = forward_check

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        engine = CandidateGrid(board)
        self.stats.status = self.search(engine)
        return board

    def _feasible(self, engine: CandidateGrid) -> bool:
        return not self.forward_check or engine.is_feasible()

    def search(self, engine: CandidateGrid) -> SearchStatus:
        """
        Run the search on ``engine`` in place.

        Returns:
            SearchStatus.SOLVED if the cursor reached the end of the
            region to assign, SearchStatus.EXHAUSTED if the trial stack
            ran empty.
        """
        stats = self.stats
        begin, end = engine.empty_span()
        log.debug("Searching cells %d..%d", begin, end - 1)

        if begin >= end:
            stats.extra["trials"] = []
            return SearchStatus.SOLVED

        stack: List[Trial] = [Trial(begin)]
        cur = begin

        while cur < end and stack:
            stats.iterations += 1
            top = stack[-1]

            if top.index == cur:
                value = engine.nth_candidate(cur, top.attempts)
                if value is None or not self._feasible(engine):
                    stack.pop()
                    engine.unset(cur)
                    stats.backtracks += 1
                    if not stack:
                        break
                    top = stack[-1]
                    cur = top.index
                    engine.unset(cur)
                    top.attempts += 1
                    continue
                engine.set(cur, value)
                stats.nodes_explored += 1

            elif engine.cells[cur] == 0:
                value = engine.nth_candidate(cur, 0)
                if value is None or not self._feasible(engine):
                    cur = top.index
                    engine.unset(cur)
                    top.attempts += 1
                    stats.backtracks += 1
                    continue
                stack.append(Trial(cur))
                engine.set(cur, value)
                stats.nodes_explored += 1
                stats.max_depth = max(stats.max_depth, len(stack))

            cur += 1

        stats.max_depth = max(stats.max_depth, len(stack))
        stats.extra["trials"] = [t.as_tuple() for t in stack]

        if cur >= end:
            return SearchStatus.SOLVED
        log.debug("Trial stack exhausted after %d iterations", stats.iterations)
        return SearchStatus.EXHAUSTED
