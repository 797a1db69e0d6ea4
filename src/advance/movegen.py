"""Move generation for Advance."""

import logging
from typing import List, Optional

from . import grid
from .actions import Action, Attack, BuildWall, Convert, DestroyWall, Move, Swap
from .board import Board
from .capabilities import can_attack, can_move_to, can_swap, is_threatened
from .config import LEADER_GUARDS, get_config
from .rules import WALL_BREAKERS, WALL_BUILDERS
from .types import Side, UnitKind

logger = logging.getLogger(__name__)

# Whose leaders the safety filter protects
GUARD_ANY = "any"
GUARD_OWN = "own"


def generate_actions(board: Board, side: Side) -> List[Action]:
    """
    Enumerate every action available to a side, before the safety filter.

    Units are visited in arena order and cells in row-major order. A
    (unit, cell) pair yields at most one action, except that a builder's
    move also yields a wall build on the same cell.
    """
    actions: List[Action] = []

    for unit in board.army(side):
        for target in grid.positions():
            if can_move_to(board, unit, target) and board.is_free(target):
                actions.append(Move(board, unit, target))
                if unit.kind in WALL_BUILDERS:
                    actions.append(BuildWall(board, unit, target))
            elif board.is_occupied(target) and can_attack(board, unit, target):
                occupant = board.occupant(target)
                if occupant.is_wall and unit.kind in WALL_BREAKERS:
                    actions.append(DestroyWall(board, unit, target))
                elif unit.can_convert:
                    actions.append(Convert(board, unit, target))
                else:
                    actions.append(Attack(board, unit, target))
            elif can_swap(board, unit, target):
                actions.append(Swap(board, unit, target))

    return actions


def leader_threatened(board: Board, side: Optional[Side] = None) -> bool:
    """
    Check if a leader on the board could be attacked.

    Args:
        board: The current board.
        side: Only consider this side's leaders; None considers every leader.
    """
    for leader in board.units(side, UnitKind.LEADER):
        if is_threatened(board, leader.location):
            return True
    return False


def filter_unsafe(board: Board, side: Side, actions: List[Action],
                  leader_guard: str = GUARD_ANY) -> List[Action]:
    """
    Drop, in place, every action after which a guarded leader is threatened.

    Each candidate is applied, checked and inverted in turn, walking the list
    backwards so removals do not disturb the positions still to visit.

    Returns:
        The same list, for chaining.
    """
    if leader_guard not in LEADER_GUARDS:
        raise ValueError(f"Unknown leader guard: {leader_guard!r}")
    guarded = side if leader_guard == GUARD_OWN else None

    for i in range(len(actions) - 1, -1, -1):
        action = actions[i]
        action.apply()
        try:
            unsafe = leader_threatened(board, guarded)
        finally:
            action.invert()
        if unsafe:
            del actions[i]

    return actions


def legal_actions(board: Board, side: Side,
                  leader_guard: Optional[str] = None) -> List[Action]:
    """Generate every action for a side that passes the safety filter."""
    if leader_guard is None:
        leader_guard = get_config().search.leader_guard
    actions = generate_actions(board, side)
    generated = len(actions)
    filter_unsafe(board, side, actions, leader_guard)
    logger.debug("%s: %d actions generated, %d safe", side.name, generated, len(actions))
    return actions


def has_legal_moves(board: Board, side: Side,
                    leader_guard: Optional[str] = None) -> bool:
    """Check if a side has any safe action."""
    # Quick check: does the side have any units?
    if not board.has_units(side):
        return False
    return bool(legal_actions(board, side, leader_guard))
