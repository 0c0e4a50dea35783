from __future__ import annotations

# Facade module that re-exports the Othello core API.
# Used by the Flask app and tests; single-responsibility modules live under othello_core/*.

from othello_core.board import (  # noqa: F401
    BOARD_SIZE,
    EMPTY,
    BLACK,
    WHITE,
    Board,
    Coord,
    in_bounds,
    opponent,
    parse_player,
    player_name,
)
from othello_core.errors import (  # noqa: F401
    OthelloError,
    IllegalMove,
    OutOfBounds,
    InvalidStateTransition,
)
from othello_core.moves import (  # noqa: F401
    DIRECTIONS,
    flips_in_direction,
    flippable_pieces,
    is_legal_move,
    legal_moves,
    has_valid_moves,
    apply_move,
)
from othello_core.state import (  # noqa: F401
    GameMode,
    GameResult,
    GameState,
    count_discs,
    evaluate_result,
)
from othello_core.events import Event, MoveApplied, TurnSkipped, GameOver  # noqa: F401
from othello_core.ai import (  # noqa: F401
    MoveStrategy,
    GreedyMaxFlipStrategy,
    ai_pick_move,
    available_strategies,
    get_strategy,
    register_strategy,
    unregister_strategy,
)
from othello_core.engine import Game  # noqa: F401


def main() -> None:
    # CLI driver delegated to othello_core.cli
    from othello_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
