"""Board state representation for Advance."""

from typing import Iterator, List, Optional, Tuple

from . import grid
from .exceptions import BoardFormatError, InconsistentStateError
from .rules import BOARD_SIZE, EMPTY_ICONS, EMPTY_OUTPUT_ICON, ICON_KINDS
from .types import Position, Side, Unit, UnitKind


class Board:
    """
    9x9 board for Advance.

    The board owns every unit in an arena list indexed by unit id. Each cell
    stores the id of its occupant; each unit stores its location. Both sides
    of that link are only ever written by ``place`` and ``lift``.
    Row 0 is the top; white advances toward row 0, black toward row 8.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        """Create an empty board."""
        # Cell index -> unit id
        self._cells: List[Optional[int]] = [None] * grid.CELL_COUNT
        self._units: List[Unit] = []

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        """Check if a position is within the board."""
        return grid.in_bounds(row, col)

    def occupant(self, pos: Position) -> Optional[Unit]:
        """Get the unit at a position, or None if empty."""
        uid = self._cells[grid.index_of(pos)]
        return None if uid is None else self._units[uid]

    def is_free(self, pos: Position) -> bool:
        """Check if a position is empty."""
        return self._cells[grid.index_of(pos)] is None

    def is_occupied(self, pos: Position) -> bool:
        return not self.is_free(pos)

    def unit(self, uid: int) -> Unit:
        """Get a unit by arena id, on or off the board."""
        return self._units[uid]

    # ------------------------------------------------------------------
    # Mutation seam
    # ------------------------------------------------------------------

    def add_unit(self, kind: UnitKind, owner: Side, pos: Position) -> Unit:
        """Create a unit in the arena and place it on an empty cell."""
        if kind == UnitKind.WALL:
            owner = Side.NEUTRAL
        elif owner == Side.NEUTRAL:
            raise ValueError(f"A {kind.value} must belong to a playing side")

        unit = Unit(uid=len(self._units), kind=kind, owner=owner)
        self._units.append(unit)
        self.place(unit, pos)
        return unit

    def discard_unit(self, unit: Unit) -> None:
        """Remove the most recently created unit from the arena."""
        if not self._units or self._units[-1] is not unit:
            raise InconsistentStateError(f"{unit!r} is not the newest unit")
        if unit.on_board:
            self.lift(unit)
        self._units.pop()

    def place(self, unit: Unit, pos: Position) -> None:
        """Put an off-board unit onto an empty cell."""
        if unit.on_board:
            raise InconsistentStateError(f"{unit!r} is already on the board")
        index = grid.index_of(pos)
        if self._cells[index] is not None:
            raise InconsistentStateError(f"Cell {pos} is already occupied")
        self._cells[index] = unit.uid
        unit.location = pos

    def lift(self, unit: Unit) -> Position:
        """Take a unit off its cell and return the cell it left."""
        if not unit.on_board:
            raise InconsistentStateError(f"{unit!r} is not on the board")
        pos = unit.location
        self._cells[grid.index_of(pos)] = None
        unit.location = None
        return pos

    # ------------------------------------------------------------------
    # Armies
    # ------------------------------------------------------------------

    def units(self, side: Optional[Side] = None,
              kind: Optional[UnitKind] = None) -> Iterator[Unit]:
        """Iterate over on-board units in arena order, optionally filtered."""
        for unit in self._units:
            if not unit.on_board:
                continue
            if side is not None and unit.owner != side:
                continue
            if kind is not None and unit.kind != kind:
                continue
            yield unit

    def army(self, side: Side) -> List[Unit]:
        """The on-board units currently owned by a side."""
        return list(self.units(side))

    def has_units(self, side: Side) -> bool:
        return any(True for _ in self.units(side))

    def snapshot(self) -> Tuple:
        """Hashable summary of cell occupancy and every unit's fields."""
        return (
            tuple(self._cells),
            tuple((u.uid, u.kind, u.owner, u.location) for u in self._units),
        )

    # ------------------------------------------------------------------
    # Text format
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> "Board":
        """
        Create a board from the 9-line text format.

        Raises:
            BoardFormatError: Too few rows, a short row, or an unknown icon.
        """
        lines = text.splitlines()
        if len(lines) < cls.SIZE:
            raise BoardFormatError(
                f"Expected {cls.SIZE} rows, found {len(lines)}"
            )

        board = cls()
        for row in range(cls.SIZE):
            line = lines[row]
            if len(line) < cls.SIZE:
                raise BoardFormatError(
                    f"Row {row} has {len(line)} cells, expected {cls.SIZE}"
                )
            for col in range(cls.SIZE):
                icon = line[col]
                if icon in EMPTY_ICONS:
                    continue
                kind = ICON_KINDS.get(icon.lower())
                if kind is None:
                    raise BoardFormatError(
                        f"Unknown icon {icon!r} at row {row}, column {col}"
                    )
                owner = Side.WHITE if icon.isupper() else Side.BLACK
                board.add_unit(kind, owner, (row, col))
        return board

    def to_text(self) -> str:
        """Render the board in the 9-line text format."""
        lines = []
        for row in range(self.SIZE):
            line = ""
            for col in range(self.SIZE):
                unit = self.occupant((row, col))
                line += EMPTY_OUTPUT_ICON if unit is None else unit.icon
            lines.append(line)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        """String representation of the board."""
        lines = ["  " + " ".join(str(col) for col in range(self.SIZE))]
        for row, line in enumerate(self.to_text().splitlines()):
            lines.append(f"{row} " + " ".join(line))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Board({sum(1 for _ in self.units())} units)"
