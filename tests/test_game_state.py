"""
Tests for game state management and the turn engine.
"""

import pytest

from advance.actions import ActionKind
from advance.board import Board
from advance.engine import Engine
from advance.game_state import GameState
from advance.types import Side


class TestGameState:
    """Tests for GameState class."""

    def test_from_text(self, walled_leader_text):
        state = GameState.from_text(walled_leader_text, Side.WHITE)

        assert state.current_side == Side.WHITE
        assert state.move_count == 0
        assert state.to_text() == walled_leader_text

    def test_play_switches_side(self, walled_leader_text):
        state = GameState.from_text(walled_leader_text, Side.WHITE)
        action = state.legal_actions()[0]

        state.play(action)

        assert state.current_side == Side.BLACK
        assert state.move_count == 1
        assert state.board.occupant((3, 4)).kind.value == "leader"

    def test_play_rejects_foreign_action(self, walled_leader_text):
        state = GameState.from_text(walled_leader_text, Side.WHITE)
        other = Board.from_text(walled_leader_text)
        action = GameState(other, Side.WHITE).legal_actions()[0]

        with pytest.raises(ValueError):
            state.play(action)

    def test_is_terminal(self, walled_leader_text):
        state = GameState.from_text(walled_leader_text, Side.WHITE)
        assert not state.is_terminal()

        state.play(state.best_action(depth=0))
        # Black has no units
        assert state.is_terminal()

    def test_file_round_trip(self, tmp_path, walled_leader_text):
        path = tmp_path / "board.txt"
        path.write_text(walled_leader_text)

        state = GameState.from_file(path, Side.BLACK)
        out = tmp_path / "out.txt"
        state.to_file(out)

        assert out.read_text() == walled_leader_text
        assert not (tmp_path / "out.txt.tmp").exists()

    def test_str(self, walled_leader_text):
        state = GameState.from_text(walled_leader_text, Side.WHITE)
        text = str(state)

        assert "Turn: white" in text
        assert "4 . . . # G # . . ." in text


class TestEngine:
    """Tests for the turn engine."""

    def test_take_turn(self, walled_leader_text):
        state = GameState.from_text(walled_leader_text, Side.WHITE)
        turn = Engine().take_turn(state)

        assert not turn.passed
        assert turn.side == Side.WHITE
        assert turn.action.kind == ActionKind.MOVE
        assert state.board.occupant((3, 4)) is turn.action.unit
        assert state.current_side == Side.BLACK

    def test_pass_leaves_board(self, board_from):
        board = board_from({(0, 0): "G", (0, 1): "#", (1, 0): "Z", (1, 1): "#"})
        state = GameState(board, Side.WHITE)
        before = board.snapshot()

        turn = Engine().take_turn(state)

        assert turn.passed
        assert board.snapshot() == before
        assert state.current_side == Side.BLACK
        assert state.move_count == 1

    def test_depth_override(self, board_from, default_config):
        default_config.search.depth = 0
        board = board_from({(0, 0): "m", (4, 0): "z", (8, 0): "M"})

        turn = Engine(depth=1).take_turn(GameState(board, Side.WHITE))
        assert board.occupant((7, 0)) is turn.action.unit

    def test_name(self, default_config):
        default_config.agent.name = "Tester"
        assert Engine().name == "Tester"

    def test_play_file_turn(self, tmp_path, walled_leader_text):
        in_file = tmp_path / "in.txt"
        out_file = tmp_path / "out.txt"
        in_file.write_text(walled_leader_text)

        Engine().play_file_turn(Side.WHITE, in_file, out_file)

        rows = out_file.read_text().splitlines()
        assert rows[3] == "...#G#..."
        assert rows[4] == "...#.#..."


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
