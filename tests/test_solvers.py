"""Unit tests for the backtracking solvers."""

import logging

import numpy as np
import pytest
from stacksudoku.core.board import SudokuBoard
from stacksudoku.core.validator import validate_solution
from stacksudoku.solvers import TrialStackSolver, RecursiveSolver, SearchStatus


# Row 8 holds 1-8 and column 8 already has a 9, so cell 80 has no candidates.
DEAD_LAST_CELL = (
    "000000009"
    + "0" * 63
    + "123456780"
)

# No clue conflicts, yet no completion exists.
UNSOLVABLE_AFTER_SEARCH = (
    "000678000670005300008042567050760020026803700"
    "000920856401530080087019600300280100"
)


def assert_units_complete(board):
    expected = list(range(1, 10))
    for i in range(9):
        assert sorted(board.get_row(i).tolist()) == expected
        assert sorted(board.get_col(i).tolist()) == expected
    for r in range(0, 9, 3):
        for c in range(0, 9, 3):
            assert sorted(board.get_box(r, c).tolist()) == expected


class TestTrialStackSolver:
    """Tests for the iterative trial-stack solver."""

    def test_solve_puzzle(self, puzzle_board, solution_string):
        """Golden end-to-end check on the canonical easy puzzle."""
        solver = TrialStackSolver()

        solution, stats = solver.solve(puzzle_board)

        assert stats.solved
        assert stats.status is SearchStatus.SOLVED
        assert solution is not None
        assert solution.to_string() == solution_string

    def test_solution_properties(self, puzzle_board):
        solution, stats = TrialStackSolver().solve(puzzle_board)

        assert solution.count_empty() == 0
        assert_units_complete(solution)
        assert validate_solution(puzzle_board, solution)

    def test_does_not_modify_input(self, puzzle_board, puzzle_string):
        TrialStackSolver().solve(puzzle_board)
        assert puzzle_board.to_string() == puzzle_string

    def test_deterministic(self, puzzle_board):
        first, first_stats = TrialStackSolver().solve(puzzle_board)
        second, second_stats = TrialStackSolver().solve(puzzle_board)

        assert first == second
        assert first_stats.iterations == second_stats.iterations
        assert first_stats.backtracks == second_stats.backtracks

    def test_stats_collected(self, puzzle_board):
        """Test that stats are collected."""
        solution, stats = TrialStackSolver().solve(puzzle_board)

        assert stats.time_seconds > 0
        assert stats.iterations > 0
        assert stats.nodes_explored >= 51
        assert stats.max_depth == 51
        # One trial per cell filled by search, all left on the stack
        trials = stats.extra["trials"]
        assert [index for index, _ in trials] == puzzle_board.get_empty_cells()

    def test_single_empty_cell(self, solution_string):
        """A lone empty cell with one candidate is filled by one trial."""
        puzzle = solution_string[:40] + "0" + solution_string[41:]
        board = SudokuBoard.from_string(puzzle)

        solution, stats = TrialStackSolver().solve(board)

        assert stats.solved
        assert solution.to_string() == solution_string
        assert stats.extra["trials"] == [(40, 0)]
        assert stats.nodes_explored == 1
        assert stats.backtracks == 0

    def test_already_solved(self, solution_string):
        board = SudokuBoard.from_string(solution_string)

        solution, stats = TrialStackSolver().solve(board)

        assert stats.solved
        assert stats.iterations == 0
        assert stats.extra["trials"] == []

    def test_dead_first_cell_exhausts(self):
        """Cell 0 has no candidates: the stack empties on the first step."""
        board = SudokuBoard.from_string("012345678" + "900000000" + "0" * 63)

        solution, stats = TrialStackSolver().solve(board)

        assert not stats.solved
        assert stats.status is SearchStatus.EXHAUSTED
        assert stats.extra["trials"] == []
        assert solution == board

    def test_forward_check_catches_dead_cell_ahead(self):
        """The dead cell is the last one, but the search gives up at the first."""
        board = SudokuBoard.from_string(DEAD_LAST_CELL)

        solution, stats = TrialStackSolver().solve(board)

        assert stats.status is SearchStatus.EXHAUSTED
        assert stats.iterations == 1
        assert stats.nodes_explored == 0
        assert solution == board

    def test_exhausts_after_backtracking(self):
        """Consistent clues, but the dead end only shows up deep in the search."""
        board = SudokuBoard.from_string(UNSOLVABLE_AFTER_SEARCH)

        solution, stats = TrialStackSolver().solve(board)
        _, recursive_stats = RecursiveSolver().solve(board)

        assert stats.status is SearchStatus.EXHAUSTED
        assert not stats.solved
        assert stats.extra["trials"] == []
        assert stats.backtracks > 1
        assert stats.max_depth > 1
        assert solution == board
        assert recursive_stats.status is SearchStatus.EXHAUSTED
        assert recursive_stats.nodes_explored == stats.nodes_explored

    def test_conflicting_clues_terminate(self):
        """Two 9s in row 1 leave cell 0 without candidates."""
        board = SudokuBoard.from_string(
            "012345678" + "900000009" + "0" * 63, strict=False
        )

        solution, stats = TrialStackSolver().solve(board)

        assert not stats.solved
        assert stats.status is SearchStatus.EXHAUSTED

    def test_without_forward_check(self, puzzle_board, solution_string):
        solution, stats = TrialStackSolver(forward_check=False).solve(puzzle_board)
        _, checked_stats = TrialStackSolver().solve(puzzle_board)

        assert stats.solved
        assert solution.to_string() == solution_string
        assert stats.nodes_explored >= checked_stats.nodes_explored

    def test_stats_to_dict(self, puzzle_board):
        _, stats = TrialStackSolver(track_memory=False).solve(puzzle_board)
        data = stats.to_dict()

        assert data["solved"] is True
        assert data["status"] == "solved"
        assert data["algorithm"] == "TrialStack"
        assert data["memory_bytes"] == 0


class TestRecursiveSolver:
    """Tests for the recursive solver."""

    def test_solve_puzzle(self, puzzle_board, solution_string):
        solution, stats = RecursiveSolver().solve(puzzle_board)

        assert stats.solved
        assert solution.to_string() == solution_string

    def test_matches_trial_stack(self):
        board = SudokuBoard.from_string(
            "003020600900305001001806400008102900700000008006708200002609500800203009005010300"
        )

        stack_solution, stack_stats = TrialStackSolver().solve(board)
        recursive_solution, recursive_stats = RecursiveSolver().solve(board)

        assert stack_stats.solved and recursive_stats.solved
        assert np.array_equal(stack_solution.grid, recursive_solution.grid)
        assert stack_stats.nodes_explored == recursive_stats.nodes_explored
        assert validate_solution(board, stack_solution)

    def test_exhausts(self):
        board = SudokuBoard.from_string(DEAD_LAST_CELL)

        solution, stats = RecursiveSolver().solve(board)

        assert not stats.solved
        assert stats.status is SearchStatus.EXHAUSTED

    def test_logs_search(self, caplog):
        board = SudokuBoard.from_string(DEAD_LAST_CELL)

        with caplog.at_level(logging.DEBUG, logger="stacksudoku.solvers.recursive_solver"):
            RecursiveSolver(track_memory=False).solve(board)

        messages = [r.getMessage() for r in caplog.records
                    if r.name == "stacksudoku.solvers.recursive_solver"]
        assert "Searching 72 empty cells" in messages
        assert any(m.startswith("Search exhausted") for m in messages)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
