"""Type definitions for Advance."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple


class Side(IntEnum):
    """Side identifiers."""
    NEUTRAL = 0  # Owns walls only, never searched
    WHITE = 1    # Uppercase icons, moves upward (decreasing row)
    BLACK = 2    # Lowercase icons, moves downward (increasing row)

    def opponent(self) -> "Side":
        """Return the opposing side."""
        if self == Side.NEUTRAL:
            raise ValueError("The neutral side has no opponent")
        return Side.BLACK if self == Side.WHITE else Side.WHITE

    @property
    def direction(self) -> int:
        """Row delta of a forward step for this side."""
        if self == Side.BLACK:
            return 1
        if self == Side.WHITE:
            return -1
        return 0

    @classmethod
    def from_name(cls, name: str) -> "Side":
        """Parse a playing side from its colour name (case-insensitive)."""
        try:
            side = cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown colour: {name!r}") from None
        if side == cls.NEUTRAL:
            raise ValueError("The neutral side cannot play")
        return side


class UnitKind(Enum):
    """Kinds of units."""
    ZOMBIE = "zombie"
    BUILDER = "builder"
    JESTER = "jester"
    MINER = "miner"
    SENTINEL = "sentinel"
    CATAPULT = "catapult"
    DRAGON = "dragon"
    LEADER = "leader"
    WALL = "wall"


# Type alias for board positions
Position = Tuple[int, int]


@dataclass(eq=False)
class Unit:
    """
    A unit owned by the board arena.

    Attributes:
        uid: Arena index of the unit.
        kind: Unit kind; never changes.
        owner: Owning side; flipped in place on conversion.
        location: Occupied cell, or None when off the board.
        can_convert: Set by the attack check when the attack is a conversion.
    """
    uid: int
    kind: UnitKind
    owner: Side
    location: Optional[Position] = None
    can_convert: bool = field(default=False, repr=False)

    @property
    def on_board(self) -> bool:
        """Check if this unit currently occupies a cell."""
        return self.location is not None

    @property
    def is_wall(self) -> bool:
        return self.kind == UnitKind.WALL

    @property
    def icon(self) -> str:
        """Board-file character for this unit."""
        from .rules import KIND_ICONS

        if self.is_wall:
            return KIND_ICONS[UnitKind.WALL]
        letter = KIND_ICONS[self.kind]
        return letter.upper() if self.owner == Side.WHITE else letter.lower()

    def defect(self) -> None:
        """Switch this unit to the opposing side."""
        self.owner = self.owner.opponent()

    def __repr__(self) -> str:
        return f"Unit({self.icon}#{self.uid}@{self.location})"
