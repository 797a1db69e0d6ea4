"""Game state management for Advance."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .actions import Action
from .ai.search import get_best_move
from .board import Board
from .exceptions import BoardFormatError
from .movegen import has_legal_moves, legal_actions
from .types import Side
from .utils import write_text_atomic

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """
    Board plus the side to move.

    Unlike the search, which works on the shared board through apply/invert
    pairs, ``play`` applies an action permanently.
    """
    board: Board
    current_side: Side
    move_count: int = 0

    @classmethod
    def from_text(cls, text: str, side: Side) -> "GameState":
        """Create a game state from board text."""
        return cls(board=Board.from_text(text), current_side=side)

    @classmethod
    def from_file(cls, path: Union[str, Path], side: Side) -> "GameState":
        """
        Load a board file.

        Raises:
            OSError: The file is missing or unreadable.
            BoardFormatError: The file content is not a valid board.
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise BoardFormatError(f"{path} is not a text board: {e}") from e
        state = cls.from_text(text, side)
        logger.debug("Loaded %r from %s", state.board, path)
        return state

    def to_text(self) -> str:
        return self.board.to_text()

    def to_file(self, path: Union[str, Path]) -> None:
        """Write the board file."""
        write_text_atomic(path, self.to_text())
        logger.debug("Wrote board to %s", path)

    def legal_actions(self) -> List[Action]:
        """Get all safe actions for the side to move."""
        return legal_actions(self.board, self.current_side)

    def best_action(self, depth: Optional[int] = None) -> Optional[Action]:
        """Search for the side to move's best action."""
        return get_best_move(self.board, self.current_side, depth)

    def play(self, action: Action) -> None:
        """
        Apply an action permanently and pass the turn.

        Raises:
            IllegalActionError: The action is not legal on this board.
        """
        if action.board is not self.board:
            raise ValueError("Action was generated for a different board")
        action.apply()
        self.current_side = self.current_side.opponent()
        self.move_count += 1

    def is_terminal(self) -> bool:
        """Check if the side to move has no safe action."""
        return not has_legal_moves(self.board, self.current_side)

    def __str__(self) -> str:
        return "\n".join([
            f"Turn: {self.current_side.name.lower()} | Move #{self.move_count}",
            str(self.board),
        ])

    def __repr__(self) -> str:
        return f"GameState(side={self.current_side.name}, move={self.move_count})"
