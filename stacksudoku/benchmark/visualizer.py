"""Charts for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for solver benchmark results.

    Compares solvers on time and search effort, overall and per puzzle.
    """

    COLORS = {
        "TrialStack": "#2ecc71",                     # Green
        "TrialStack (no forward check)": "#f39c12",  # Orange
        "Recursive": "#3498db",                      # Blue
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        if not results:
            raise ValueError("No benchmark results to plot")
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def _algorithms(self) -> List[str]:
        return sorted(set(r.algorithm for r in self.results))

    def _puzzles(self) -> List[str]:
        return sorted(set(r.puzzle_id for r in self.results))

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_comparison(),
            self.plot_time_by_puzzle(),
            self.plot_backtracks_by_puzzle(),
        ]

    def plot_time_comparison(self) -> str:
        """Create bar chart comparing average solve times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.algorithm == algo])
            for algo in algorithms
        ]
        colors = [self.COLORS.get(algo, "#95a5a6") for algo in algorithms]

        sns.barplot(x=algorithms, y=avg_times, hue=algorithms, palette=colors,
                    legend=False, ax=ax, edgecolor='black', linewidth=0.5)

        for i, t in enumerate(avg_times):
            ax.annotate(f'{t:.4f}s', xy=(i, t), xytext=(0, 3),
                        textcoords="offset points", ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Solve Time by Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        return self._save("time_comparison.png")

    def _grouped_bars(self, values, ylabel: str, title: str, log_scale: bool = False):
        fig, ax = plt.subplots(figsize=(12, 6))

        algorithms = self._algorithms()
        puzzles = self._puzzles()
        x = np.arange(len(puzzles))
        width = 0.8 / len(algorithms)

        for i, algo in enumerate(algorithms):
            heights = []
            for puzzle_id in puzzles:
                vals = [values(r) for r in self.results
                        if r.algorithm == algo and r.puzzle_id == puzzle_id]
                heights.append(np.mean(vals) if vals else 0)

            offset = (i - len(algorithms) / 2 + 0.5) * width
            ax.bar(x + offset, heights, width,
                   label=algo,
                   color=self.COLORS.get(algo, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels(puzzles)
        ax.legend(title='Algorithm', bbox_to_anchor=(1.05, 1), loc='upper left')
        if log_scale:
            ax.set_yscale('symlog')
        return ax

    def plot_time_by_puzzle(self) -> str:
        """Create grouped bar chart of times by puzzle and algorithm."""
        self._grouped_bars(lambda r: r.time_seconds,
                           'Average Time (seconds)', 'Solve Time by Puzzle and Algorithm')
        return self._save("time_by_puzzle.png")

    def plot_backtracks_by_puzzle(self) -> str:
        """Create grouped bar chart of backtracks by puzzle and algorithm."""
        self._grouped_bars(lambda r: r.backtracks,
                           'Backtracks (Log Scale)', 'Backtracks by Puzzle and Algorithm',
                           log_scale=True)
        return self._save("backtracks_by_puzzle.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Algorithm | Accuracy | Avg Time | Avg Memory | Avg Iterations | Avg Backtracks |",
            "|-----------|----------|----------|------------|----------------|----------------|"
        ]

        for algo in self._algorithms():
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.solved)
            accuracy = (solved / len(algo_results)) * 100

            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in algo_results])
            avg_iters = np.mean([r.iterations for r in algo_results])
            avg_backtracks = np.mean([r.backtracks for r in algo_results])

            lines.append(
                f"| {algo} | {accuracy:.1f}% | {avg_time:.4f}s | {avg_memory:.2f} MB "
                f"| {int(avg_iters):,} | {int(avg_backtracks):,} |"
            )

        content = "\n".join(lines)

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
