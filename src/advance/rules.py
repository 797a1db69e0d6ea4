"""Game rules constants for Advance."""

from types import MappingProxyType

from .types import UnitKind

# Board dimensions
BOARD_SIZE = 9

# Movement directions
# (row_delta, col_delta)
ORTHOGONAL_DIRECTIONS = [(-1, 0), (1, 0), (0, -1), (0, 1)]
DIAGONAL_DIRECTIONS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]
ALL_DIRECTIONS = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS

# Catapult reach: straight shots and diagonal lobs
CATAPULT_STRAIGHT_RANGE = 3
CATAPULT_DIAGONAL_RANGE = 2

# Score awarded for taking a unit of each kind
UNIT_VALUES = MappingProxyType({
    UnitKind.ZOMBIE: 1,
    UnitKind.BUILDER: 2,
    UnitKind.JESTER: 3,
    UnitKind.MINER: 4,
    UnitKind.SENTINEL: 5,
    UnitKind.CATAPULT: 6,
    UnitKind.DRAGON: 7,
    UnitKind.LEADER: 10,
})

# Fixed scores for actions that do not take a unit
SWAP_SCORE = 1
BUILD_WALL_SCORE = 1
DESTROY_WALL_SCORE = 1

# Conversions are worth twice the victim's value
CONVERT_MULTIPLIER = 2

# Capabilities beyond plain movement and attack
WALL_BUILDERS = frozenset({UnitKind.BUILDER})
WALL_BREAKERS = frozenset({UnitKind.MINER})
CONVERTERS = frozenset({UnitKind.JESTER})
SWAPPERS = frozenset({UnitKind.JESTER})
PROTECTORS = frozenset({UnitKind.SENTINEL})

# Board file icons (lowercase form; uppercase marks the white side)
EMPTY_ICONS = frozenset({".", " "})
EMPTY_OUTPUT_ICON = "."
KIND_ICONS = MappingProxyType({
    UnitKind.ZOMBIE: "z",
    UnitKind.LEADER: "g",
    UnitKind.BUILDER: "b",
    UnitKind.CATAPULT: "c",
    UnitKind.SENTINEL: "s",
    UnitKind.DRAGON: "d",
    UnitKind.MINER: "m",
    UnitKind.JESTER: "j",
    UnitKind.WALL: "#",
})
ICON_KINDS = MappingProxyType({icon: kind for kind, icon in KIND_ICONS.items()})
