"""Command-line interface for the backtracking Sudoku solver."""

import argparse
import logging
import os
import sys

from .benchmark import Benchmark, Visualizer
from .core.board import SudokuBoard
from .core.validator import validate_solution
from .puzzles import embedded_board, load_puzzles
from .solvers import TrialStackSolver, RecursiveSolver


SOLVERS = {
    "stack": ("TrialStack", TrialStackSolver),
    "recursive": ("Recursive", RecursiveSolver),
}


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver: candidate propagation + trial-stack backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the embedded puzzle
  stacksudoku solve

  # Solve a puzzle string
  stacksudoku solve --puzzle "530070000600195000..."

  # Solve a problem file (81 comma-separated integers)
  stacksudoku solve --file problem.txt

  # Benchmark the solvers on the built-in samples
  stacksudoku benchmark --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--file", "-f", type=str, default=None,
        help="Puzzle file (81 integers separated by commas/whitespace)"
    )
    solve_parser.add_argument(
        "--algorithm", "-a",
        choices=list(SOLVERS),
        default="stack",
        help="Search algorithm (default: stack)"
    )
    solve_parser.add_argument(
        "--no-forward-check", action="store_true",
        help="Disable the empty-candidate check before each commit"
    )
    solve_parser.add_argument(
        "--stats", "-s", action="store_true",
        help="Show detailed solving statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run solver benchmarks")
    bench_parser.add_argument(
        "--file", "-f", type=str, default=None,
        help="Puzzle file, one 81-char puzzle per line (default: built-in samples)"
    )
    bench_parser.add_argument(
        "--repeat", "-r", type=int, default=1,
        help="Runs per puzzle per solver (default: 1)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_solve(args):
    """Handle the solve command."""
    try:
        if args.puzzle:
            board = SudokuBoard.from_string(args.puzzle)
        elif args.file:
            board = SudokuBoard.from_file(args.file)
        else:
            board = embedded_board()
    except (ValueError, OSError) as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(1)

    print(board)

    name, solver_cls = SOLVERS[args.algorithm]
    solver = solver_cls(forward_check=not args.no_forward_check)
    solution, stats = solver.solve(board)

    print()
    if solution is not None:
        print(solution)
    print()

    if stats.solved and validate_solution(board, solution):
        print(f"✓ Solved with {name} in {stats.time_seconds * 1000:.0f} ms")
    else:
        print(f"✗ No solution found with {name} ({stats.time_seconds * 1000:.0f} ms)")

    if args.stats:
        print(f"  Iterations: {stats.iterations:,}")
        print(f"  Commits: {stats.nodes_explored:,}")
        print(f"  Backtracks: {stats.backtracks:,}")
        print(f"  Max depth: {stats.max_depth}")
        print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")

    if not stats.solved:
        sys.exit(2)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    try:
        puzzles = load_puzzles(args.file) if args.file else None
        benchmark = Benchmark(puzzles=puzzles, repeat=args.repeat)
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("=" * 60)
    print("SUDOKU SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(benchmark.puzzles)}")
    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Backtracks: {stats['avg_backtracks']:.1f}")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")

    benchmark.save_results(args.output)

    if not args.no_charts and results:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {os.path.basename(chart)}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
