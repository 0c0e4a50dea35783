from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from .board import Board, Coord
from .moves import flippable_pieces

logger = logging.getLogger(__name__)


class MoveStrategy(ABC):
    """Picks a move for the computer player. Must not mutate the board."""

    name = 'base'

    @abstractmethod
    def select_move(self, board: Board, player: int) -> Optional[Coord]:
        """Returns the chosen legal move, or None if the player has none."""


class GreedyMaxFlipStrategy(MoveStrategy):
    """
    Scans empty cells row-major and takes the one flipping the most discs.
    Only a strictly greater count replaces the current best, so ties go to
    the earliest cell scanned.
    """

    name = 'greedy'

    def select_move(self, board: Board, player: int) -> Optional[Coord]:
        best: Optional[Coord] = None
        best_count = 0
        for r, c in board.empty_cells():
            n = len(flippable_pieces(board, r, c, player))
            if n > best_count:
                best_count = n
                best = (r, c)
        if best is not None:
            logger.debug("greedy picked %s flipping %d", best, best_count)
        return best


_STRATEGIES: Dict[str, Type[MoveStrategy]] = {}


def register_strategy(name: str, cls: Type[MoveStrategy]) -> None:
    if name in _STRATEGIES and _STRATEGIES[name] is not cls:
        logger.warning("Overwriting move strategy %r", name)
    _STRATEGIES[name] = cls


def unregister_strategy(name: str) -> None:
    if _STRATEGIES.pop(name, None) is not None:
        logger.debug("Unregistered move strategy %r", name)


def get_strategy(name: str = 'greedy') -> MoveStrategy:
    """Instantiates a registered strategy by name."""
    try:
        return _STRATEGIES[name.strip().lower()]()
    except KeyError:
        raise ValueError(f"Unknown strategy {name!r}; available: {', '.join(available_strategies())}") from None


def available_strategies() -> List[str]:
    return sorted(_STRATEGIES)


def ai_pick_move(board: Board, player: int, strategy: Optional[MoveStrategy] = None) -> Optional[Coord]:
    """Picks the computer's move with the given strategy (greedy by default)."""
    return (strategy or GreedyMaxFlipStrategy()).select_move(board, player)


register_strategy(GreedyMaxFlipStrategy.name, GreedyMaxFlipStrategy)
