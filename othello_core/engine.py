from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .ai import GreedyMaxFlipStrategy, MoveStrategy
from .board import Board, Coord, BLACK, WHITE, opponent, player_name
from .errors import InvalidStateTransition
from .events import Event, GameOver, MoveApplied, TurnSkipped
from .moves import apply_move, has_valid_moves, legal_moves
from .state import GameMode, GameState, evaluate_result

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


class Game:
    """
    One game session. Owns its GameState and is the only thing that mutates it.

    Every move (human or computer) returns the list of events it produced and
    also hands each event to the subscribed listeners, so a presentation layer
    can either inspect the return value or subscribe once and animate on its
    own schedule.
    """

    def __init__(
        self,
        mode=GameMode.PVP,
        computer_player: int = WHITE,
        strategy: Optional[MoveStrategy] = None,
    ) -> None:
        self.strategy: MoveStrategy = strategy or GreedyMaxFlipStrategy()
        self._listeners: List[Listener] = []
        self.state = GameState()
        self.start_game(mode, computer_player)

    @classmethod
    def from_position(
        cls,
        board: Board,
        current_player: int = BLACK,
        mode=GameMode.PVP,
        computer_player: int = WHITE,
        strategy: Optional[MoveStrategy] = None,
    ) -> 'Game':
        """Starts a session from an arbitrary position instead of the opening."""
        if current_player not in (BLACK, WHITE):
            raise ValueError(f'Unknown player: {current_player!r}')
        game = cls(mode, computer_player, strategy)
        game.state.board = board.copy()
        game.state.current_player = current_player
        if not has_valid_moves(game.state.board, current_player):
            # The side to move is stuck; resolve it as if the other side just moved.
            game.state.current_player = opponent(current_player)
            game.switch_player()
        return game

    # ---------- lifecycle ----------

    def start_game(self, mode=GameMode.PVP, computer_player: int = WHITE) -> GameState:
        """Resets to the standard opening with Black to move."""
        if computer_player not in (BLACK, WHITE):
            raise ValueError(f'Unknown player: {computer_player!r}')
        self.state = GameState(
            board=Board.standard(),
            current_player=BLACK,
            mode=GameMode.parse(mode),
            computer_player=computer_player,
        )
        logger.debug("new game mode=%s computer=%s", self.state.mode.value, player_name(computer_player))
        return self.state

    initialize = start_game

    def reset(self, mode=None) -> GameState:
        """Restarts the game, keeping the current mode unless a new one is given."""
        return self.start_game(mode if mode is not None else self.state.mode, self.state.computer_player)

    # ---------- queries ----------

    def current_state(self) -> GameState:
        return self.state

    def cell_at(self, row: int, col: int) -> int:
        return self.state.board.at(row, col)

    def legal_moves(self, player: Optional[int] = None) -> List[Coord]:
        if self.state.is_over and player is None:
            return []
        return legal_moves(self.state.board, self.state.current_player if player is None else player)

    # ---------- listeners ----------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, events: List[Event]) -> None:
        # The move is already committed; a failing listener must not hide its result.
        for event in events:
            for listener in list(self._listeners):
                try:
                    listener(event)
                except Exception:
                    logger.exception("listener %r failed on %r", listener, event)

    # ---------- moves ----------

    def attempt_move(self, row: int, col: int) -> List[Event]:
        """Applies a human move for the current player."""
        self._require_active()
        if self.state.is_computer_turn:
            raise InvalidStateTransition("It is the computer's turn")
        return self._play((row, col))

    def select_computer_move(self) -> Coord:
        """Asks the strategy for the computer's move without applying it."""
        self._require_active()
        if self.state.mode != GameMode.PVC:
            raise InvalidStateTransition('No computer player in player-vs-player mode')
        if self.state.current_player != self.state.computer_player:
            raise InvalidStateTransition("It is not the computer's turn")
        move = self.strategy.select_move(self.state.board, self.state.current_player)
        if move is None:
            raise InvalidStateTransition(f'{player_name(self.state.current_player)} has no legal move')
        return move

    def play_computer_move(self) -> List[Event]:
        return self._play(self.select_computer_move())

    def _play(self, move: Coord) -> List[Event]:
        player = self.state.current_player
        flipped = apply_move(self.state.board, move, player)
        logger.debug("%s played %s flipping %d", player_name(player), move, len(flipped))
        follow = self.switch_player()
        next_player = None if self.state.is_over else self.state.current_player
        events: List[Event] = [MoveApplied(placed=move, flipped=tuple(flipped), player=player, next_player=next_player)]
        events.extend(follow)
        self._emit(events)
        return events

    def switch_player(self) -> List[Event]:
        """
        Hands the turn on after the current player has moved.
        Opponent first; if the opponent is stuck the mover keeps the turn;
        if both are stuck the game ends.
        """
        self._require_active()
        mover = self.state.current_player
        other = opponent(mover)
        board = self.state.board
        if has_valid_moves(board, other):
            self.state.current_player = other
            return []
        if has_valid_moves(board, mover):
            logger.debug("%s has no legal move, turn skipped", player_name(other))
            return [TurnSkipped(skipped_player=other)]
        result = evaluate_result(board)
        self.state.result = result
        logger.info(
            "game over: black=%d white=%d winner=%s",
            result.black_count, result.white_count, player_name(result.winner) or 'draw',
        )
        return [GameOver(black_count=result.black_count, white_count=result.white_count, winner=result.winner)]

    def _require_active(self) -> None:
        if self.state.is_over:
            raise InvalidStateTransition('The game is over; reset to play again')
