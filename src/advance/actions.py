"""
Reversible actions for Advance.

Each action captures, at construction time, the snapshot it needs to undo
itself exactly: the acting unit's origin, the unit on the target cell and
that unit's owner. ``apply`` checks preconditions before touching the board
and ``invert`` restores every touched cell and unit. Applications must nest
strictly: an action is inverted before any action applied earlier is.
"""

from enum import Enum
from typing import ClassVar, Optional

from .board import Board
from .capabilities import can_attack, can_move_to, can_swap
from .exceptions import IllegalActionError, InconsistentStateError
from .rules import (
    BUILD_WALL_SCORE,
    CONVERT_MULTIPLIER,
    DESTROY_WALL_SCORE,
    SWAP_SCORE,
    UNIT_VALUES,
    WALL_BREAKERS,
    WALL_BUILDERS,
)
from .types import Position, Side, Unit, UnitKind


class ActionKind(Enum):
    """Categories of action."""
    MOVE = "move"
    ATTACK = "attack"
    CONVERT = "convert"
    SWAP = "swap"
    BUILD_WALL = "build_wall"
    DESTROY_WALL = "destroy_wall"


def unit_value(unit: Optional[Unit]) -> int:
    """Score for taking ``unit``; walls and empty cells are worth nothing."""
    if unit is None:
        return 0
    return UNIT_VALUES.get(unit.kind, 0)


class Action:
    """
    Base class for reversible actions.

    Attributes:
        unit: The acting unit.
        target: The target cell.
        origin: The acting unit's cell when the action was created.
        score: Fixed static value of the action.
    """

    kind: ClassVar[ActionKind]

    def __init__(self, board: Board, unit: Unit, target: Position):
        if not unit.on_board:
            raise InconsistentStateError(f"{unit!r} cannot act from off the board")
        if not board.in_bounds(*target):
            raise IllegalActionError(f"Target {target} is off the board")
        self.board = board
        self.unit = unit
        self.target = target
        self.origin: Position = unit.location
        self.score = 0
        self._applied = False

    @property
    def applied(self) -> bool:
        return self._applied

    def apply(self) -> None:
        """Perform the action on the board."""
        if self._applied:
            raise InconsistentStateError(f"{self!r} is already applied")
        self._check()
        self._do()
        self._applied = True

    def invert(self) -> None:
        """Undo a previous ``apply``."""
        if not self._applied:
            raise InconsistentStateError(f"{self!r} was not applied")
        self._undo()
        self._applied = False

    def _check(self) -> None:
        raise NotImplementedError

    def _do(self) -> None:
        raise NotImplementedError

    def _undo(self) -> None:
        raise NotImplementedError

    def _require_at_origin(self) -> None:
        if self.unit.location != self.origin:
            raise IllegalActionError(
                f"{self.unit!r} has left {self.origin} since the action was created"
            )

    def to_dict(self) -> dict:
        """Convert the action to a JSON-serializable dict."""
        return {
            "kind": self.kind.value,
            "unit": self.unit.icon,
            "from": list(self.origin),
            "to": list(self.target),
            "score": self.score,
        }

    def __repr__(self) -> str:
        (r0, c0), (r1, c1) = self.origin, self.target
        return (
            f"{type(self).__name__}({self.unit.icon}:({r0},{c0})->({r1},{c1}), "
            f"score={self.score})"
        )


class Move(Action):
    """Relocate the acting unit onto an empty cell."""

    kind = ActionKind.MOVE

    def _check(self) -> None:
        self._require_at_origin()
        if not can_move_to(self.board, self.unit, self.target):
            raise IllegalActionError(f"{self.unit!r} cannot move to {self.target}")

    def _do(self) -> None:
        self.board.lift(self.unit)
        self.board.place(self.unit, self.target)

    def _undo(self) -> None:
        self.board.lift(self.unit)
        self.board.place(self.unit, self.origin)


class Attack(Action):
    """Capture the unit on the target cell and take its place."""

    kind = ActionKind.ATTACK

    def __init__(self, board: Board, unit: Unit, target: Position):
        super().__init__(board, unit, target)
        self.victim: Optional[Unit] = board.occupant(target)
        self.victim_owner: Optional[Side] = (
            self.victim.owner if self.victim is not None else None
        )
        self.score = unit_value(self.victim)

    def _check(self) -> None:
        self._require_at_origin()
        if self.victim is None or self.board.occupant(self.target) is not self.victim:
            raise IllegalActionError(f"Cannot attack empty cell {self.target}")
        if not can_attack(self.board, self.unit, self.target):
            raise IllegalActionError(f"{self.unit!r} cannot attack {self.target}")

    def _do(self) -> None:
        self.board.lift(self.victim)
        self.board.lift(self.unit)
        self.board.place(self.unit, self.target)

    def _undo(self) -> None:
        self.board.lift(self.unit)
        if self.victim.on_board:
            self.board.lift(self.victim)
        self.board.place(self.victim, self.target)
        # The victim may have changed sides while it was off the board
        if self.victim.owner != self.victim_owner:
            self.victim.defect()
        self.board.place(self.unit, self.origin)


class Convert(Action):
    """Win the unit on the target cell over to the acting side, in place."""

    kind = ActionKind.CONVERT

    def __init__(self, board: Board, unit: Unit, target: Position):
        super().__init__(board, unit, target)
        self.victim: Optional[Unit] = board.occupant(target)
        self.score = unit_value(self.victim) * CONVERT_MULTIPLIER

    def _check(self) -> None:
        self._require_at_origin()
        if self.victim is None or self.board.occupant(self.target) is not self.victim:
            raise IllegalActionError(f"Nothing to convert on {self.target}")
        if not can_attack(self.board, self.unit, self.target) or not self.unit.can_convert:
            raise IllegalActionError(f"{self.unit!r} cannot convert {self.target}")

    def _do(self) -> None:
        self.victim.defect()

    def _undo(self) -> None:
        # Converting is a toggle between the two sides
        self.victim.defect()


class Swap(Action):
    """Trade cells with the friendly unit on the target cell."""

    kind = ActionKind.SWAP

    def __init__(self, board: Board, unit: Unit, target: Position):
        super().__init__(board, unit, target)
        partner = board.occupant(target)
        if partner is None:
            raise IllegalActionError(f"Nothing to swap with on {target}")
        self.partner: Unit = partner
        self.score = SWAP_SCORE

    def _check(self) -> None:
        self._require_at_origin()
        if self.board.occupant(self.target) is not self.partner:
            raise IllegalActionError(f"{self.partner!r} has left {self.target}")
        if not can_swap(self.board, self.unit, self.target):
            raise IllegalActionError(f"{self.unit!r} cannot swap with {self.target}")

    def _do(self) -> None:
        self.board.lift(self.partner)
        self.board.lift(self.unit)
        self.board.place(self.unit, self.target)
        self.board.place(self.partner, self.origin)

    def _undo(self) -> None:
        self.board.lift(self.partner)
        self.board.lift(self.unit)
        self.board.place(self.unit, self.origin)
        self.board.place(self.partner, self.target)


class BuildWall(Action):
    """Raise a neutral wall on an empty cell next to the builder."""

    kind = ActionKind.BUILD_WALL

    def __init__(self, board: Board, unit: Unit, target: Position):
        super().__init__(board, unit, target)
        self.wall: Optional[Unit] = None
        self.score = BUILD_WALL_SCORE

    def _check(self) -> None:
        self._require_at_origin()
        if self.unit.kind not in WALL_BUILDERS:
            raise IllegalActionError(f"{self.unit!r} cannot build walls")
        if not can_move_to(self.board, self.unit, self.target):
            raise IllegalActionError(f"{self.unit!r} cannot build on {self.target}")

    def _do(self) -> None:
        self.wall = self.board.add_unit(UnitKind.WALL, Side.NEUTRAL, self.target)

    def _undo(self) -> None:
        self.board.discard_unit(self.wall)
        self.wall = None


class DestroyWall(Action):
    """Knock down the wall on the target cell and move onto it."""

    kind = ActionKind.DESTROY_WALL

    def __init__(self, board: Board, unit: Unit, target: Position):
        super().__init__(board, unit, target)
        self.wall: Optional[Unit] = board.occupant(target)
        self.score = DESTROY_WALL_SCORE

    def _check(self) -> None:
        self._require_at_origin()
        if self.wall is None or not self.wall.is_wall:
            raise IllegalActionError(f"Target {self.target} must be a wall")
        if self.board.occupant(self.target) is not self.wall:
            raise IllegalActionError(f"{self.wall!r} has left {self.target}")
        if self.unit.kind not in WALL_BREAKERS:
            raise IllegalActionError(f"{self.unit!r} cannot destroy walls")
        if not can_attack(self.board, self.unit, self.target):
            raise IllegalActionError(f"{self.unit!r} cannot reach {self.target}")

    def _do(self) -> None:
        self.board.lift(self.wall)
        self.board.lift(self.unit)
        self.board.place(self.unit, self.target)

    def _undo(self) -> None:
        self.board.lift(self.unit)
        self.board.place(self.unit, self.origin)
        self.board.place(self.wall, self.target)
