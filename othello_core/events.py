from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .board import Coord, player_name


@dataclass(frozen=True)
class MoveApplied:
    placed: Coord
    flipped: Tuple[Coord, ...]
    player: int
    next_player: Optional[int]  # None once the game is over

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": "moveApplied",
            "placed": [int(self.placed[0]), int(self.placed[1])],
            "flipped": [[int(r), int(c)] for (r, c) in self.flipped],
            "player": player_name(self.player),
            "nextPlayer": player_name(self.next_player),
        }


@dataclass(frozen=True)
class TurnSkipped:
    skipped_player: int

    def to_json(self) -> Dict[str, Any]:
        return {"type": "turnSkipped", "skippedPlayer": player_name(self.skipped_player)}


@dataclass(frozen=True)
class GameOver:
    black_count: int
    white_count: int
    winner: Optional[int]

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": "gameOver",
            "blackCount": int(self.black_count),
            "whiteCount": int(self.white_count),
            "winner": player_name(self.winner),
            "draw": self.is_draw,
        }


Event = Union[MoveApplied, TurnSkipped, GameOver]
