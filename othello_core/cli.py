from __future__ import annotations

import argparse
import os
import time
from typing import Callable, List, Optional

from .ai import available_strategies, get_strategy
from .board import Coord, parse_player, player_name
from .engine import Game
from .errors import OthelloError
from .events import Event, GameOver, MoveApplied, TurnSkipped
from .log import configure_logging


def parse_move(text: str) -> Coord:
    """Parses 'r,c' or 'r c' into a coordinate."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.strip().split(sep) if t.strip() != '']
    if len(parts) != 2:
        raise ValueError(f'Could not parse move: {text!r}')
    return int(parts[0]), int(parts[1])


def describe_event(event: Event) -> str:
    if isinstance(event, MoveApplied):
        who = player_name(event.player).capitalize()
        return f"{who} plays {event.placed}, flipping {len(event.flipped)}"
    if isinstance(event, TurnSkipped):
        return f"{player_name(event.skipped_player).capitalize()} has no legal move; turn skipped."
    if isinstance(event, GameOver):
        if event.is_draw:
            outcome = 'Draw!'
        else:
            outcome = f'{player_name(event.winner).capitalize()} wins!'
        return f"Game over. Black {event.black_count} - White {event.white_count}. {outcome}"
    return repr(event)


def play(
    game: Game,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
    delay: float = 0.0,
) -> None:
    """Runs an interactive game loop until it ends or input runs out."""
    read = read or input
    write = write or print
    game.subscribe(lambda ev: write(describe_event(ev)))
    while not game.state.is_over:
        moves: List[Coord] = game.legal_moves()
        write(game.state.board.pretty(moves))
        write(game.state.describe())
        if game.state.is_computer_turn:
            if delay > 0:
                time.sleep(delay)
            game.play_computer_move()
            continue
        write(f'Legal moves: {moves}')
        try:
            text = read('Enter your move as r,c or r c: ')
        except EOFError:
            write('Input closed; quitting.')
            return
        if text.strip().lower() in ('q', 'quit', 'exit'):
            return
        try:
            move = parse_move(text)
        except ValueError:
            write('Could not parse. Try again.')
            continue
        try:
            game.attempt_move(*move)
        except OthelloError as e:
            write(f'Illegal move: {e}')
    write(game.state.board.pretty())


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--mode', choices=['pvp', 'pvc'], default='pvc', help='Player vs player or vs computer')
    parser.add_argument('--computer', choices=['black', 'white'], default='white', help='Computer color in pvc mode')
    parser.add_argument('--strategy', choices=available_strategies(), default='greedy', help='Computer move strategy')
    parser.add_argument('--delay', type=float, default=float(os.getenv('OTHELLO_AI_DELAY', '0')),
                        help='Seconds the computer "thinks" before moving')
    parser.add_argument('--log-level', default=None, help='Logging level (default from OTHELLO_LOG_LEVEL)')
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    game = Game(mode=args.mode, computer_player=parse_player(args.computer), strategy=get_strategy(args.strategy))
    play(game, delay=args.delay)


if __name__ == '__main__':
    main()
