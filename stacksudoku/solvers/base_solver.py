"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Dict, Any
import logging
import time
import tracemalloc

from ..core.board import SudokuBoard

log = logging.getLogger(__name__)


class SearchStatus(Enum):
    """Terminal state of a search."""
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    status: Optional[SearchStatus] = None
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0
    max_depth: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "status": self.status.value if self.status else None,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "max_depth": self.max_depth,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = True):
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> tuple[Optional[SudokuBoard], SolverStats]:
        """
        Solve a Sudoku puzzle with timing and memory tracking.

        The caller's board is never modified; the search runs on a copy.

        Args:
            board: The puzzle to solve.

        Returns:
            Tuple of (final board or None if the solver raised, stats).
            The final board is complete only when ``stats.solved`` is True.
        """
        self.stats = SolverStats(algorithm=self.name)

        if self.track_memory:
            tracemalloc.start()

        start_time = time.perf_counter()

        try:
            solution = self._solve(board.copy())
            self.stats.solved = (
                solution is not None
                and self.stats.status is SearchStatus.SOLVED
                and solution.is_solved()
            )
        except Exception as e:
            log.warning("%s raised during solve: %s", self.name, e)
            self.stats.extra["error"] = str(e)
            solution = None

        self.stats.time_seconds = time.perf_counter() - start_time

        if self.track_memory:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        log.debug(
            "%s finished: status=%s iterations=%d backtracks=%d in %.4fs",
            self.name,
            self.stats.status.value if self.stats.status else None,
            self.stats.iterations,
            self.stats.backtracks,
            self.stats.time_seconds,
        )
        return solution, self.stats

    @abstractmethod
    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle to solve (can be modified).

        Returns:
            The board in its final state. Subclasses set ``self.stats.status``.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
