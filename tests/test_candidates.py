"""Tests for the candidate engine."""

import numpy as np
import pytest

from stacksudoku.core.board import SudokuBoard
from stacksudoku.core.candidates import CandidateGrid, nth_digit


class TestNthDigit:

    def test_ascending_order(self):
        mask = 0b101010001  # digits 1, 5, 7, 9
        assert [nth_digit(mask, n) for n in range(4)] == [1, 5, 7, 9]

    def test_past_the_end(self):
        assert nth_digit(0b101, 2) is None

    def test_empty_mask(self):
        assert nth_digit(0, 0) is None


class TestCandidateGrid:

    def test_compute_all(self):
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)
        board.set(4, 2, 8)
        engine = CandidateGrid(board)

        assert engine.candidates(2) == [1, 2, 4, 6, 7, 9]
        # Filled cells carry no candidates
        assert engine.candidates(0) == []
        # Same box as (0, 0), different row and column
        assert engine.candidates(10) == [1, 2, 4, 6, 7, 8, 9]
        assert engine.candidates(80) == list(range(1, 10))

    def test_matches_board_candidates(self, puzzle_board):
        engine = CandidateGrid(puzzle_board)
        for index in puzzle_board.get_empty_cells():
            row, col = divmod(index, 9)
            assert engine.candidates(index) == sorted(puzzle_board.get_candidates(row, col))

    def test_nth_candidate(self, puzzle_board):
        engine = CandidateGrid(puzzle_board)
        # Cell (0, 2): row has 5 3 7, column has 8, box has 5 3 6 9 8
        assert engine.candidates(2) == [1, 2, 4]
        assert engine.nth_candidate(2, 0) == 1
        assert engine.nth_candidate(2, 2) == 4
        assert engine.nth_candidate(2, 3) is None

    def test_set_prunes_peers(self):
        board = SudokuBoard()
        engine = CandidateGrid(board)
        engine.set(40, 5)

        assert board.get(4, 4) == 5
        assert engine.candidates(40) == []
        for index in (36, 44, 4, 76, 30, 50):
            assert 5 not in engine.candidates(index)
        # Not a peer of (4, 4)
        assert 5 in engine.candidates(0)

    def test_set_agrees_with_recomputation(self, puzzle_board):
        engine = CandidateGrid(puzzle_board)
        engine.set(2, 4)

        fresh = CandidateGrid(puzzle_board.copy())
        assert np.array_equal(engine.cands, fresh.cands)

    def test_set_then_unset_round_trip(self, puzzle_board):
        engine = CandidateGrid(puzzle_board)
        before = engine.cands.copy()

        engine.set(2, 1)
        engine.unset(2)

        assert puzzle_board.is_empty(0, 2)
        assert np.array_equal(engine.cands, before)
        assert np.array_equal(engine.cands, CandidateGrid(puzzle_board.copy()).cands)

    def test_is_feasible(self):
        board = SudokuBoard.from_string("012345678" + "900000000" + "0" * 63)
        engine = CandidateGrid(board)
        assert engine.candidates(0) == []
        assert not engine.is_feasible()

        assert CandidateGrid(SudokuBoard()).is_feasible()

    def test_empty_span(self, puzzle_board):
        engine = CandidateGrid(puzzle_board)
        # Row 8 ends with the clues 7 9
        assert engine.empty_span() == (2, 79)

    def test_empty_span_full_grid(self, solution_string):
        engine = CandidateGrid(SudokuBoard.from_string(solution_string))
        assert engine.empty_span() == (81, 81)
        assert engine.is_feasible()

    def test_snapshot_is_read_only(self, puzzle_board):
        engine = CandidateGrid(puzzle_board)
        snap = engine.snapshot()
        assert snap.shape == (81,)
        with pytest.raises(ValueError):
            snap[2] = 1

        engine.set(2, 1)
        assert snap[2] == 1
