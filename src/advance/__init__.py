"""Advance: rules and move search for a 9x9 two-player strategy game."""

from .types import Side, Unit, UnitKind, Position
from .board import Board
from .actions import Action, ActionKind, Attack, BuildWall, Convert, DestroyWall, Move, Swap
from .exceptions import AdvanceError, BoardFormatError, IllegalActionError, InconsistentStateError
from .game_state import GameState

__version__ = "1.0.0"
