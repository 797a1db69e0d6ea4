"""Game engine - plays one turn from a board file to a board file."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .actions import Action
from .ai.search import LookaheadSearch
from .config import Config, get_config
from .game_state import GameState
from .types import Side

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """Outcome of a single turn."""
    side: Side
    action: Optional[Action]
    score: int
    nodes: int

    @property
    def passed(self) -> bool:
        """True when the side had no move and the board is unchanged."""
        return self.action is None


class Engine:
    """
    Turn driver for the agent.

    Searches for the side to move, applies the chosen action permanently and
    reports what happened. A side without a move passes.
    """

    def __init__(self, config: Optional[Config] = None, depth: Optional[int] = None):
        self.config = config or get_config()
        self.depth = self.config.search.depth if depth is None else depth

    @property
    def name(self) -> str:
        return self.config.agent.name

    def take_turn(self, state: GameState) -> TurnResult:
        """Choose and play one action for the side to move."""
        side = state.current_side
        search = LookaheadSearch(
            depth=self.depth,
            leader_guard=self.config.search.leader_guard,
        )
        result = search.search(state.board, side)

        if result.action is None:
            logger.warning("%s has no move and passes", side.name.lower())
            state.move_count += 1
            state.current_side = side.opponent()
        else:
            logger.info("%s plays %r", side.name.lower(), result.action)
            state.play(result.action)

        return TurnResult(side, result.action, result.score, result.nodes)

    def play_file_turn(self, side: Side, in_file: Union[str, Path],
                       out_file: Union[str, Path]) -> TurnResult:
        """
        Read a board, play one turn for ``side`` and write the new board.

        Nothing is written if reading or searching fails.

        Raises:
            OSError: The input cannot be read or the output cannot be written.
            BoardFormatError: The input is not a valid board.
        """
        state = GameState.from_file(in_file, side)
        turn = self.take_turn(state)
        state.to_file(out_file)
        return turn
