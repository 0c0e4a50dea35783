from __future__ import annotations


class OthelloError(Exception):
    """Base class for every error raised by the game engine."""


class IllegalMove(OthelloError, ValueError):
    """The requested cell is occupied or would flip nothing."""


class OutOfBounds(OthelloError, IndexError):
    """A coordinate falls outside the 8x8 grid."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"({row}, {col}) is outside the board")
        self.row = row
        self.col = col


class InvalidStateTransition(OthelloError, RuntimeError):
    """The operation is not allowed in the current game state."""
