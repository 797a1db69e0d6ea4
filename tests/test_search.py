"""
Tests for the fixed-depth lookahead search.

This module tests:
- Forced and impossible positions
- Capture preference at depth 0
- Lookahead avoiding losing captures
- Tie-breaking between equal candidates
- Board restoration after search
"""

import pytest

from advance.actions import ActionKind
from advance.ai.search import LookaheadSearch, get_best_move, search_best_move
from advance.board import Board
from advance.types import Side


def _enclosed_leader(board_from):
    return board_from({
        (3, 3): "#", (3, 4): "#", (3, 5): "#",
        (4, 3): "#", (4, 4): "G", (4, 5): "#",
        (5, 3): "#", (5, 4): "#", (5, 5): "#",
    })


class TestForcedPositions:
    """Positions with zero or one legal action."""

    @pytest.mark.parametrize("depth", [0, 1, 2])
    def test_single_safe_move(self, walled_leader_text, depth):
        board = Board.from_text(walled_leader_text)
        action = get_best_move(board, Side.WHITE, depth)

        assert action.kind == ActionKind.MOVE
        assert action.target == (3, 4)

    @pytest.mark.parametrize("depth", [0, 1])
    def test_single_capture_keeps_its_value(self, board_from, depth):
        board = board_from({
            (3, 3): "#", (3, 4): "z", (3, 5): "#",
            (4, 3): "#", (4, 4): "G", (4, 5): "#",
            (5, 3): "#", (5, 4): "#", (5, 5): "#",
        })
        result = search_best_move(board, Side.WHITE, depth=depth)

        assert result.action.kind == ActionKind.ATTACK
        assert result.score == 1

    def test_enclosed_leader_has_no_move(self, board_from):
        result = search_best_move(_enclosed_leader(board_from), Side.WHITE, depth=1)

        assert result.action is None
        assert result.score == 0

    def test_cornered_leader_has_no_move(self, board_from):
        board = board_from({(0, 0): "G", (0, 1): "#", (1, 0): "Z", (1, 1): "#"})
        assert get_best_move(board, Side.WHITE, 2) is None


class TestSelection:
    """Tests for candidate selection."""

    def test_depth_zero_takes_biggest_capture(self, board_from):
        board = board_from({(4, 4): "G", (3, 3): "d", (3, 4): "#", (3, 5): "z"})
        result = search_best_move(board, Side.WHITE, depth=0)

        assert result.action.kind == ActionKind.ATTACK
        assert result.action.target == (3, 3)
        assert result.score == 7

    def test_first_even_candidate_is_pinned(self, board_from):
        """An even trade found first outranks a later net gain of one."""
        board = board_from({(4, 4): "G", (3, 4): "z"})
        action = get_best_move(board, Side.WHITE, 0)

        assert action.kind == ActionKind.MOVE
        assert action.target == (3, 3)

    def test_reply_less_position_wins_immediately(self, board_from):
        """Leaving the opponent without a reply ends the search early."""
        board = board_from({(4, 4): "G", (3, 4): "z"})
        result = search_best_move(board, Side.WHITE, depth=1)

        assert result.action.kind == ActionKind.ATTACK
        assert result.action.target == (3, 4)
        assert result.score == 1

    def test_lookahead_avoids_losing_capture(self, board_from):
        board = board_from({(0, 0): "m", (4, 0): "z", (8, 0): "M"})

        greedy = get_best_move(board, Side.WHITE, 0)
        assert greedy.kind == ActionKind.ATTACK
        assert greedy.target == (4, 0)

        careful = get_best_move(board, Side.WHITE, 1)
        assert careful.kind == ActionKind.MOVE
        assert careful.target == (7, 0)

    def test_every_candidate_loses(self, board_from):
        """No move is chosen when every candidate has a negative net value."""
        board = board_from({
            (0, 3): "m", (0, 5): "m", (3, 0): "m", (5, 0): "m", (4, 4): "C",
        })

        assert get_best_move(board, Side.WHITE, 1) is None

        action = get_best_move(board, Side.WHITE, 0)
        assert action.kind == ActionKind.MOVE
        assert action.target == (3, 4)


class TestSearchBehaviour:
    """Tests for search bookkeeping."""

    def test_board_restored(self, board_from):
        board = board_from({(0, 0): "m", (4, 0): "z", (8, 0): "M", (8, 8): "G"})
        before = board.snapshot()

        get_best_move(board, Side.WHITE, 2)
        assert board.snapshot() == before

    def test_board_restored_on_early_return(self, board_from):
        board = board_from({(4, 4): "G", (3, 4): "z"})
        before = board.snapshot()

        get_best_move(board, Side.WHITE, 1)
        assert board.snapshot() == before

    def test_deterministic(self, board_from):
        board = board_from({(0, 0): "m", (4, 0): "z", (8, 0): "M", (6, 6): "J"})

        first = get_best_move(board, Side.WHITE, 2)
        second = get_best_move(board, Side.WHITE, 2)
        assert repr(first) == repr(second)

    def test_chosen_action_applies(self, board_from):
        board = board_from({(0, 0): "m", (4, 0): "z", (8, 0): "M"})
        action = get_best_move(board, Side.WHITE, 1)

        assert not action.applied
        action.apply()
        assert board.occupant((7, 0)).owner == Side.WHITE

    def test_counts_nodes(self, board_from):
        board = board_from({(4, 4): "G", (0, 3): "m"})
        result = LookaheadSearch(depth=0).search(board, Side.WHITE)

        assert result.nodes == 5
        assert result.depth == 0

    def test_depth_from_config(self, board_from, default_config):
        board = board_from({(0, 0): "m", (4, 0): "z", (8, 0): "M"})

        default_config.search.depth = 0
        assert get_best_move(board, Side.WHITE).target == (4, 0)

        default_config.search.depth = 1
        assert get_best_move(board, Side.WHITE).target == (7, 0)

    def test_negative_depth(self):
        with pytest.raises(ValueError):
            LookaheadSearch(depth=-1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
