from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .board import Board, BLACK, WHITE, player_name


class GameMode(str, Enum):
    PVP = 'pvp'
    PVC = 'pvc'

    @classmethod
    def parse(cls, value) -> 'GameMode':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown game mode: {value!r} (expected 'pvp' or 'pvc')") from None


@dataclass(frozen=True)
class GameResult:
    """Final disc counts; winner is None for a draw."""
    black_count: int
    white_count: int
    winner: Optional[int]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def count_discs(board: Board) -> Tuple[int, int]:
    """Returns (black, white) disc counts."""
    return board.count(BLACK), board.count(WHITE)


def evaluate_result(board: Board) -> GameResult:
    black, white = count_discs(board)
    if black > white:
        winner: Optional[int] = BLACK
    elif white > black:
        winner = WHITE
    else:
        winner = None
    return GameResult(black_count=black, white_count=white, winner=winner)


@dataclass
class GameState:
    """Represents one game session: the board, whose turn it is and the final result once over."""
    board: Board = field(default_factory=Board.standard)
    current_player: int = BLACK
    mode: GameMode = GameMode.PVP
    computer_player: int = WHITE
    result: Optional[GameResult] = None

    @property
    def is_over(self) -> bool:
        return self.result is not None

    @property
    def is_computer_turn(self) -> bool:
        return (
            self.mode == GameMode.PVC
            and not self.is_over
            and self.current_player == self.computer_player
        )

    def score(self) -> Tuple[int, int]:
        return count_discs(self.board)

    def describe(self) -> str:
        black, white = self.score()
        if self.result is None:
            status = f'{player_name(self.current_player)} to move'
        elif self.result.is_draw:
            status = 'game over: draw'
        else:
            status = f'game over: {player_name(self.result.winner)} wins'
        return f'Black {black} - White {white} ({status})'
