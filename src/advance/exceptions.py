"""Exceptions raised by the Advance engine."""


class AdvanceError(Exception):
    """Base class for all engine errors."""


class IllegalActionError(AdvanceError, ValueError):
    """
    An action's preconditions do not hold on the current board.

    Raised by ``Action.apply`` before anything is mutated, so the board is left
    exactly as it was.
    """


class BoardFormatError(AdvanceError, ValueError):
    """The board text is truncated or contains an unknown icon."""


class InconsistentStateError(AdvanceError, RuntimeError):
    """
    The board or an action is in a state that correct callers never produce.

    Examples are asking an off-board unit to act, inverting an action that was
    never applied, or removing a unit out of creation order.
    """
