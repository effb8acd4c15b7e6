"""Benchmarking harness for the backtracking solvers."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import logging
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..core.validator import validate_solution
from ..puzzles import sample_boards
from ..solvers import BaseSolver, TrialStackSolver, RecursiveSolver

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: str
    algorithm: str
    run: int
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "algorithm": self.algorithm,
            "run": self.run,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Runs each solver on each puzzle and collects performance metrics.
    """

    def __init__(
        self,
        puzzles: Optional[Dict[str, SudokuBoard]] = None,
        solvers: Optional[Dict[str, BaseSolver]] = None,
        repeat: int = 1,
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Dict of puzzle_id -> board (default: built-in samples).
            solvers: Dict of solver_name -> solver_instance (default: both
                     backtracking solvers, with and without forward checking).
            repeat: Number of runs per puzzle per solver.
        """
        if repeat < 1:
            raise ValueError(f"repeat must be at least 1, got {repeat}")

        self.puzzles = puzzles if puzzles is not None else sample_boards()
        if solvers is None:
            self.solvers = {
                "TrialStack": TrialStackSolver(),
                "TrialStack (no forward check)": TrialStackSolver(forward_check=False),
                "Recursive": RecursiveSolver(),
            }
        else:
            self.solvers = solvers
        self.repeat = repeat
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        total_tests = len(self.puzzles) * len(self.solvers) * self.repeat

        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_id, puzzle in self.puzzles.items():
            for solver_name, solver in self.solvers.items():
                for run in range(self.repeat):
                    self.results.append(self._run_single(puzzle, puzzle_id, solver_name, solver, run))
                    pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: SudokuBoard,
        puzzle_id: str,
        solver_name: str,
        solver: BaseSolver,
        run: int,
    ) -> BenchmarkResult:
        """Run a single solver on a single puzzle."""
        solution, stats = solver.solve(puzzle)
        solved = stats.solved and solution is not None and validate_solution(puzzle, solution)
        if not solved:
            log.info("%s did not solve %s (status=%s)", solver_name, puzzle_id,
                     stats.status.value if stats.status else None)

        extra = {k: v for k, v in stats.extra.items() if k != "trials"}
        return BenchmarkResult(
            puzzle_id=puzzle_id,
            algorithm=solver_name,
            run=run,
            solved=solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=extra,
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "solvers_tested": list(self.solvers.keys()),
            "repeat": self.repeat,
            "results_by_algorithm": {},
            "results_by_puzzle": {},
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]
                memory = [r.memory_bytes for r in solver_results]
                backtracks = [r.backtracks for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "accuracy": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "min_time_seconds": min(times),
                    "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                    "avg_backtracks": sum(backtracks) / len(backtracks),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        for puzzle_id in self.puzzles:
            puzzle_results = [r for r in self.results if r.puzzle_id == puzzle_id]
            if puzzle_results:
                summary["results_by_puzzle"][puzzle_id] = {}
                for solver_name in self.solvers:
                    rs = [r for r in puzzle_results if r.algorithm == solver_name]
                    if rs:
                        summary["results_by_puzzle"][puzzle_id][solver_name] = {
                            "solved": all(r.solved for r in rs),
                            "avg_time_seconds": sum(r.time_seconds for r in rs) / len(rs),
                            "backtracks": rs[0].backtracks,
                        }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary to JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        log.info("Results saved to %s", output_dir)
