"""Fixed 9x9 grid topology. No game logic lives here."""

from typing import Iterator, List, Optional

from .rules import BOARD_SIZE, ORTHOGONAL_DIRECTIONS, ALL_DIRECTIONS
from .types import Position

CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def in_bounds(row: int, col: int) -> bool:
    """Check if a position is within the grid."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def index_of(pos: Position) -> int:
    """Integer cell index of a position."""
    row, col = pos
    if not in_bounds(row, col):
        raise IndexError(f"Position {pos} is out of bounds")
    return row * BOARD_SIZE + col


def position_of(index: int) -> Position:
    """Position of an integer cell index."""
    if not 0 <= index < CELL_COUNT:
        raise IndexError(f"Cell index {index} is out of bounds")
    return divmod(index, BOARD_SIZE)


def positions() -> Iterator[Position]:
    """Iterate over every cell in row-major order."""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            yield (row, col)


def offset(pos: Position, dr: int, dc: int) -> Optional[Position]:
    """The position ``(dr, dc)`` away from ``pos``, or None if off the grid."""
    row, col = pos[0] + dr, pos[1] + dc
    if not in_bounds(row, col):
        return None
    return (row, col)


def neighbours(pos: Position) -> List[Position]:
    """All in-bounds cells adjacent to ``pos``, diagonals included."""
    found = []
    for dr, dc in ALL_DIRECTIONS:
        adj = offset(pos, dr, dc)
        if adj is not None:
            found.append(adj)
    return found


def orthogonal_neighbours(pos: Position) -> List[Position]:
    """In-bounds cells sharing an edge with ``pos``."""
    found = []
    for dr, dc in ORTHOGONAL_DIRECTIONS:
        adj = offset(pos, dr, dc)
        if adj is not None:
            found.append(adj)
    return found


def is_adjacent(a: Position, b: Position) -> bool:
    """Check if two distinct cells touch, diagonals included."""
    return a != b and max(abs(a[0] - b[0]), abs(a[1] - b[1])) == 1


def cells_between(start: Position, end: Position) -> Optional[List[Position]]:
    """
    Cells strictly between two positions on a shared line.

    Returns None when the positions are equal or are not on the same row,
    column, or diagonal.
    """
    dr = end[0] - start[0]
    dc = end[1] - start[1]
    if (dr, dc) == (0, 0):
        return None
    if dr != 0 and dc != 0 and abs(dr) != abs(dc):
        return None

    step_r = (dr > 0) - (dr < 0)
    step_c = (dc > 0) - (dc < 0)
    distance = max(abs(dr), abs(dc))
    return [
        (start[0] + i * step_r, start[1] + i * step_c)
        for i in range(1, distance)
    ]
