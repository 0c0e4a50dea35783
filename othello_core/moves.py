from __future__ import annotations

from typing import List, Tuple

from .board import Board, Coord, EMPTY, in_bounds, opponent
from .errors import IllegalMove, OutOfBounds

# N, S, W, E, NW, NE, SW, SE
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)


def flips_in_direction(board: Board, row: int, col: int, player: int, dr: int, dc: int) -> List[Coord]:
    """
    Walks from (row, col) along (dr, dc) collecting opponent discs.
    The run only counts if it is non-empty and closed by one of the player's
    own discs; running off the board or into an empty cell yields nothing.
    """
    opp = opponent(player)
    run: List[Coord] = []
    r, c = row + dr, col + dc
    while in_bounds(r, c) and board.grid[r][c] == opp:
        run.append((r, c))
        r += dr
        c += dc
    if run and in_bounds(r, c) and board.grid[r][c] == player:
        return run
    return []


def flippable_pieces(board: Board, row: int, col: int, player: int) -> List[Coord]:
    """Computes the flip-set for placing player's disc at (row, col)."""
    if not in_bounds(row, col):
        raise OutOfBounds(row, col)
    if board.grid[row][col] != EMPTY:
        return []
    flips: List[Coord] = []
    for dr, dc in DIRECTIONS:
        flips.extend(flips_in_direction(board, row, col, player, dr, dc))
    return flips


def is_legal_move(board: Board, row: int, col: int, player: int) -> bool:
    return len(flippable_pieces(board, row, col, player)) > 0


def legal_moves(board: Board, player: int) -> List[Coord]:
    """All legal cells for the player, in row-major order."""
    return [(r, c) for (r, c) in board.empty_cells() if flippable_pieces(board, r, c, player)]


def has_valid_moves(board: Board, player: int) -> bool:
    """True as soon as any empty cell yields a non-empty flip-set."""
    for r, c in board.empty_cells():
        if flippable_pieces(board, r, c, player):
            return True
    return False


def apply_move(board: Board, move: Coord, player: int) -> List[Coord]:
    """Places the player's disc, flips the bracketed discs and returns the flip-set."""
    row, col = move
    if not in_bounds(row, col):
        raise OutOfBounds(row, col)
    if board.grid[row][col] != EMPTY:
        raise IllegalMove(f'Cell ({row}, {col}) is already occupied')
    flips = flippable_pieces(board, row, col, player)
    if not flips:
        raise IllegalMove(f'Move ({row}, {col}) does not flip any disc')
    board.grid[row][col] = player
    for r, c in flips:
        board.grid[r][c] = player
    return flips
