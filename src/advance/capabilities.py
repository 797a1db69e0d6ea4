"""
Per-kind movement, attack and swap rules.

Every predicate reads only the board's current occupancy. The rules for each
unit kind are looked up in the ``_MOVE_RULES`` and ``_ATTACK_RULES`` tables,
which cover the closed set of ``UnitKind`` members.
"""

from typing import Callable, Dict, List

from . import grid
from .board import Board
from .rules import (
    CATAPULT_DIAGONAL_RANGE,
    CATAPULT_STRAIGHT_RANGE,
    CONVERTERS,
    PROTECTORS,
    SWAPPERS,
    WALL_BREAKERS,
)
from .types import Position, Unit, UnitKind

# (board, unit, origin, row_delta, col_delta, target) -> bool
Rule = Callable[[Board, Unit, Position, int, int, Position], bool]


def _path_clear(board: Board, origin: Position, target: Position) -> bool:
    """Check that every cell strictly between two aligned cells is empty."""
    between = grid.cells_between(origin, target)
    if between is None:
        return False
    return all(board.is_free(pos) for pos in between)


def _never(board, unit, origin, dr, dc, target) -> bool:
    return False


def _king_step(board, unit, origin, dr, dc, target) -> bool:
    return max(abs(dr), abs(dc)) == 1


def _knight_jump(board, unit, origin, dr, dc, target) -> bool:
    return (abs(dr), abs(dc)) in ((1, 2), (2, 1))


def _rook_slide(board, unit, origin, dr, dc, target) -> bool:
    if dr != 0 and dc != 0:
        return False
    return _path_clear(board, origin, target)


def _queen_slide(board, unit, origin, dr, dc, target) -> bool:
    return _path_clear(board, origin, target)


def _zombie_step(board, unit, origin, dr, dc, target) -> bool:
    return dr == unit.owner.direction and abs(dc) <= 1


def _zombie_attack(board, unit, origin, dr, dc, target) -> bool:
    if _zombie_step(board, unit, origin, dr, dc, target):
        return True
    # Leap two rows forward, straight or two columns across, over an empty cell
    forward = unit.owner.direction
    if dr != 2 * forward or dc not in (-2, 0, 2):
        return False
    midpoint = (origin[0] + forward, origin[1] + dc // 2)
    return board.is_free(midpoint)


def _catapult_step(board, unit, origin, dr, dc, target) -> bool:
    return abs(dr) + abs(dc) == 1


def _catapult_attack(board, unit, origin, dr, dc, target) -> bool:
    if dc == 0 and abs(dr) == CATAPULT_STRAIGHT_RANGE:
        return True
    if dr == 0 and abs(dc) == CATAPULT_STRAIGHT_RANGE:
        return True
    return abs(dr) == CATAPULT_DIAGONAL_RANGE and abs(dc) == CATAPULT_DIAGONAL_RANGE


def _dragon_attack(board, unit, origin, dr, dc, target) -> bool:
    # Dragons breathe at range: the ring of adjacent cells is out of reach
    if grid.is_adjacent(origin, target):
        return False
    return _queen_slide(board, unit, origin, dr, dc, target)


_MOVE_RULES: Dict[UnitKind, Rule] = {
    UnitKind.ZOMBIE: _zombie_step,
    # Builders use a king-step placeholder; build-wall targets follow
    # whatever this entry allows.
    UnitKind.BUILDER: _king_step,
    UnitKind.JESTER: _king_step,
    UnitKind.MINER: _rook_slide,
    UnitKind.SENTINEL: _knight_jump,
    UnitKind.CATAPULT: _catapult_step,
    UnitKind.DRAGON: _queen_slide,
    UnitKind.LEADER: _king_step,
    UnitKind.WALL: _never,
}

_ATTACK_RULES: Dict[UnitKind, Rule] = {
    UnitKind.ZOMBIE: _zombie_attack,
    UnitKind.BUILDER: _king_step,
    UnitKind.JESTER: _king_step,
    UnitKind.MINER: _rook_slide,
    UnitKind.SENTINEL: _knight_jump,
    UnitKind.CATAPULT: _catapult_attack,
    UnitKind.DRAGON: _dragon_attack,
    UnitKind.LEADER: _king_step,
    UnitKind.WALL: _never,
}


def _deltas(unit: Unit, target: Position):
    """Return (origin, dr, dc) or None if the target can never be reached."""
    if not unit.on_board:
        return None
    if not grid.in_bounds(*target):
        return None
    origin = unit.location
    if target == origin:
        return None
    return origin, target[0] - origin[0], target[1] - origin[1]


def is_protected(board: Board, unit: Unit, target: Position) -> bool:
    """
    Check if a Sentinel hostile to ``unit`` guards ``target``.

    A cell is guarded when any orthogonal neighbour holds a Sentinel owned by
    the attacker's opponent.
    """
    enemy = unit.owner.opponent()
    for pos in grid.orthogonal_neighbours(target):
        guard = board.occupant(pos)
        if guard is not None and guard.kind in PROTECTORS and guard.owner == enemy:
            return True
    return False


def can_move_to(board: Board, unit: Unit, target: Position) -> bool:
    """Check if ``unit`` may move onto the empty cell ``target``."""
    found = _deltas(unit, target)
    if found is None or board.is_occupied(target):
        return False
    origin, dr, dc = found
    return _MOVE_RULES[unit.kind](board, unit, origin, dr, dc, target)


def can_attack(board: Board, unit: Unit, target: Position) -> bool:
    """
    Check if ``unit`` may attack the occupant of ``target``.

    As a side effect, ``unit.can_convert`` is reset and then set when the
    attack would convert the victim instead of capturing it.
    """
    unit.can_convert = False
    if unit.is_wall:
        return False
    found = _deltas(unit, target)
    if found is None:
        return False

    victim = board.occupant(target)
    if victim is None or victim.owner == unit.owner:
        return False
    if victim.is_wall and unit.kind not in WALL_BREAKERS:
        return False
    if is_protected(board, unit, target):
        return False

    origin, dr, dc = found
    if not _ATTACK_RULES[unit.kind](board, unit, origin, dr, dc, target):
        return False

    if unit.kind in CONVERTERS and not victim.is_wall:
        unit.can_convert = True
    return True


def can_swap(board: Board, unit: Unit, target: Position) -> bool:
    """Check if ``unit`` may trade places with a friendly unit on ``target``."""
    if unit.kind not in SWAPPERS:
        return False
    found = _deltas(unit, target)
    if found is None:
        return False
    partner = board.occupant(target)
    if partner is None or partner.is_wall or partner.owner != unit.owner:
        return False
    origin, dr, dc = found
    return _king_step(board, unit, origin, dr, dc, target)


def threatening_units(board: Board, target: Position) -> List[Unit]:
    """Units that could attack ``target`` right now, excluding its own side."""
    occupant = board.occupant(target)
    threats = []
    for unit in board.units():
        if not can_attack(board, unit, target):
            continue
        if occupant is not None and unit.owner == occupant.owner:
            continue
        threats.append(unit)
    return threats


def is_threatened(board: Board, target: Position) -> bool:
    """Check if any opposing unit could attack ``target``."""
    return bool(threatening_units(board, target))
