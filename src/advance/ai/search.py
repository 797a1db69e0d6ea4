"""Fixed-depth lookahead search for the Advance agent."""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple

from ..actions import Action
from ..board import Board
from ..config import get_config
from ..movegen import GUARD_ANY, legal_actions
from ..types import Side

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """Result of a search."""
    action: Optional[Action]
    score: int
    depth: int
    nodes: int
    elapsed: float = 0.0


class LookaheadSearch:
    """
    Two-player fixed-depth search over reversible actions.

    Every candidate is applied to the one shared board, scored, and inverted
    before the next candidate is tried. A candidate's net value is its own
    score minus the score of the opponent's best reply, found recursively
    with one less level of depth.

    Selection keeps the first candidate whose net value is zero and marks it
    with a running best of 1; after that only a strictly greater net value
    replaces it. Candidates with a negative net value are never chosen, so a
    side whose every candidate loses material gets no move back.
    """

    def __init__(self, depth: int = 1, leader_guard: str = GUARD_ANY):
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.leader_guard = leader_guard
        self.nodes_searched = 0

    def search(self, board: Board, side: Side) -> SearchResult:
        """Find the best action for ``side`` on ``board``."""
        self.nodes_searched = 0
        start_time = time.time()

        action, score = self._choose(board, side, self.depth)

        elapsed = time.time() - start_time
        logger.info(
            "%s depth %d: %r after %d nodes in %.2fs",
            side.name, self.depth, action, self.nodes_searched, elapsed,
        )
        return SearchResult(action, score, self.depth, self.nodes_searched, elapsed)

    def choose_move(self, board: Board, side: Side, depth: int) -> Optional[Action]:
        """Best action for ``side`` looking ``depth`` replies ahead, or None."""
        action, _ = self._choose(board, side, depth)
        return action

    def _choose(self, board: Board, side: Side, depth: int) -> Tuple[Optional[Action], int]:
        actions = legal_actions(board, side, self.leader_guard)
        if not actions:
            return None, 0

        if len(actions) == 1:
            # Only one legal action, no need to search
            return actions[0], actions[0].score

        best_action: Optional[Action] = None
        best_score = 0

        for action in actions:
            self.nodes_searched += 1
            action.apply()
            try:
                net = action.score
                if depth > 0:
                    reply = self.choose_move(board, side.opponent(), depth - 1)
                    if reply is None:
                        # The opponent is left without a reply
                        return action, net
                    net -= reply.score
            finally:
                action.invert()

            if best_score == 0 and net == 0:
                best_score = 1
                best_action = action
            elif net > best_score:
                best_score = net
                best_action = action

        return best_action, best_score


def get_best_move(board: Board, side: Side, depth: Optional[int] = None,
                  leader_guard: Optional[str] = None) -> Optional[Action]:
    """
    Get the best action for a side.

    Args:
        board: Current board; left unchanged on return.
        side: Side to move.
        depth: Lookahead depth (default: from config).
        leader_guard: Safety filter scope (default: from config).

    Returns:
        The chosen action, not yet applied, or None if there is no move.
    """
    return search_best_move(board, side, depth, leader_guard).action


def search_best_move(board: Board, side: Side, depth: Optional[int] = None,
                     leader_guard: Optional[str] = None) -> SearchResult:
    """Like ``get_best_move`` but returns the full search result."""
    settings = get_config().search
    if depth is None:
        depth = settings.depth
    if leader_guard is None:
        leader_guard = settings.leader_guard

    search = LookaheadSearch(depth=depth, leader_guard=leader_guard)
    return search.search(board, side)
